# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

from .errors import *
from .number import *
from .rational import *
from .complexnum import *
from .identities import *
