# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

project = 'numkit'
copyright = '2025, numkit contributors'
author = 'numkit contributors'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx_rtd_theme',
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
]

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store', 'conf.py']

autodoc_default_options = {
    'member-order': 'bysource',
}

napoleon_use_ivar = False
autodoc_inherit_docstrings = False

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'
