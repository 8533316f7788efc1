# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup, find_packages

setup(
    name="numkit",
    version="0.1.0",
    description="Exact rational and complex numbers behind a common arithmetic protocol",
    long_description=("Exact rational numbers (arbitrary-precision fractions) and floating-point "
                      "complex numbers implementing a shared add/subtract/multiply/divide protocol, "
                      "with generic checks of algebraic identities."),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.10",
    packages=find_packages(include=["numkit", "numkit.*"]),
    install_requires=["atpublic"],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme"],
    },
    entry_points={
        "console_scripts": [
            "numkit-demo = numkit.demo:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3",
        "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    zip_safe=False,
)
