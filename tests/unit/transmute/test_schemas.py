# -*- coding: utf-8 -*-
"""Location: ./tests/unit/transmute/test_schemas.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Tests for response models and JSON output.
"""

# Third-Party
import orjson
from pydantic import ValidationError
import pytest

# First-Party
from transmute.schemas import ClassificationResult, ConversionResult, dumps, EncodingWithDecodings, HashResult, to_jsonable


class TestModels:
    """Model validation."""

    def test_negative_score_rejected(self):
        """Scores are never negative."""
        with pytest.raises(ValidationError):
            ClassificationResult(encoding="hex", score=-1)

    def test_frozen(self):
        """Results are immutable."""
        result = HashResult(algorithm="sha2-256", output="0x00")
        with pytest.raises(ValidationError):
            result.output = "0x01"

    def test_decodings_default(self):
        """Decodings default to empty."""
        assert EncodingWithDecodings(encoding="hex", score=0).decodings == {}


class TestDumps:
    """JSON serialization."""

    def test_nested_models(self):
        """Models nested in dicts and lists serialize."""
        payload = {"hex": {"int": ConversionResult(input="[12]", output="18")}}
        assert to_jsonable(payload) == {"hex": {"int": {"input": "[12]", "output": "18"}}}

    def test_compact(self):
        """Indentation is optional."""
        assert dumps([ClassificationResult(encoding="int", score=0)], indent=False) == '[{"encoding":"int","score":0}]'

    def test_indented(self):
        """Indented output parses back to the same data."""
        text = dumps([HashResult(algorithm="keccak-256", output="0x00")])
        assert "\n" in text
        assert orjson.loads(text) == [{"algorithm": "keccak-256", "output": "0x00"}]
