# -*- coding: utf-8 -*-
"""Location: ./transmute/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Transmute.
Guess how a string encodes a value and convert it to other encodings.
"""

__author__ = "Mihai Criveti"
__copyright__ = "Copyright 2025"
__license__ = "Apache 2.0"
__version__ = "0.1.0"
__description__ = "Classify and convert between numeric, text and array encodings"
__packages__ = ["transmute"]
