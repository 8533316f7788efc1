# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

from .demo import main

if __name__ == '__main__':
    raise SystemExit(main())
