# -*- coding: utf-8 -*-
"""Location: ./transmute/__main__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Entry point for ``python -m transmute``.
"""

# First-Party
from transmute.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
