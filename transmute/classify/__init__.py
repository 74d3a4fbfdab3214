# -*- coding: utf-8 -*-
"""Location: ./transmute/classify/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Classification.
Scores how well an input string matches each supported encoding and
decomposes array-like input into recursively classified elements.
"""
