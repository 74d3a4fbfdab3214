# -*- coding: utf-8 -*-
"""Location: ./transmute/schemas.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Transmute Response Schemas.
Pydantic models for the JSON documents produced by the command line and the
editor handler.

Examples:
    >>> from transmute.schemas import ClassificationResult
    >>> ClassificationResult(encoding="hex", score=0).model_dump()
    {'encoding': 'hex', 'score': 0}
"""

# Standard
from typing import Any, Dict

# Third-Party
import orjson
from pydantic import BaseModel, ConfigDict, Field


class TransmuteModel(BaseModel):
    """Base model for all response payloads."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ClassificationResult(TransmuteModel):
    """
    One ranked classification candidate.

    Attributes:
        encoding (str): Display name of the candidate's encoding.
        score (int): Error score, 0 is a perfect match.

    Examples:
        >>> ClassificationResult(encoding="[hex, int]", score=12).encoding
        '[hex, int]'
    """

    encoding: str = Field(..., description="Encoding display name")
    score: int = Field(..., ge=0, description="Error score, 0 for a perfect match")


class ConversionResult(TransmuteModel):
    """
    A decoded value and its rendering in one output encoding.

    Attributes:
        input (str): Display of the decoded value.
        output (str): Rendered output.
    """

    input: str = Field(..., description="Decoded value display")
    output: str = Field(..., description="Rendered output")


class EncodingWithDecodings(TransmuteModel):
    """
    A classification candidate together with its value in several encodings.

    Attributes:
        encoding (str): Candidate encoding name.
        score (int): Error score.
        decodings (Dict[str, str]): Output encoding name to rendered value.

    Examples:
        >>> entry = EncodingWithDecodings(encoding="hex", score=0, decodings={"int": "18"})
        >>> entry.decodings["int"]
        '18'
    """

    encoding: str = Field(..., description="Encoding display name")
    score: int = Field(..., ge=0, description="Error score")
    decodings: Dict[str, str] = Field(default_factory=dict, description="Rendered value per output encoding")


class HashResult(TransmuteModel):
    """
    A digest rendered for one algorithm.

    Attributes:
        algorithm (str): Canonical algorithm name.
        output (str): Rendered digest.
    """

    algorithm: str = Field(..., description="Hash algorithm, e.g. keccak-256")
    output: str = Field(..., description="Rendered digest")


def to_jsonable(payload: Any) -> Any:
    """Convert models (possibly nested in lists and dicts) into plain data.

    Args:
        payload: Model, list, dict or scalar.

    Returns:
        Any: JSON-serializable data.

    Examples:
        >>> to_jsonable({"a": [ClassificationResult(encoding="int", score=0)]})
        {'a': [{'encoding': 'int', 'score': 0}]}
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump()
    if isinstance(payload, dict):
        return {key: to_jsonable(value) for key, value in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [to_jsonable(item) for item in payload]
    return payload


def dumps(payload: Any, indent: bool = True) -> str:
    """Serialize a response payload to JSON text.

    Args:
        payload: Model, list, dict or scalar.
        indent: Pretty-print with two-space indentation.

    Returns:
        str: JSON text.

    Examples:
        >>> dumps([HashResult(algorithm="sha2-256", output="0x00")], indent=False)
        '[{"algorithm":"sha2-256","output":"0x00"}]'
    """
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(to_jsonable(payload), option=option).decode()
