# -*- coding: utf-8 -*-
"""Location: ./transmute/encode/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Encoding.
The canonical decoded value, encoding descriptors and the codecs between them.
"""
