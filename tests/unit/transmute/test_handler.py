# -*- coding: utf-8 -*-
"""Location: ./tests/unit/transmute/test_handler.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Tests for the line-delimited JSON editor handler.
"""

# Standard
import io

# Third-Party
import orjson
import pytest

# First-Party
from transmute.handler import EventHandler, Message


@pytest.fixture
def handler(service):
    """Handler over the shared service fixture."""
    return EventHandler(service)


class TestHandle:
    """Single requests."""

    def test_convert_each_line(self, handler):
        """List selections produce one result per line."""
        response = handler.handle({"method": "classify_and_convert", "params": ["hex", ["10", "255"]]})
        assert response == {"result": ["0xa", "0xff"]}

    def test_string_selection(self, handler):
        """A plain string selection produces one result."""
        assert handler.handle({"method": "flatten_array", "params": ["[1, [2, 3]]"]}) == {"result": ["[1, 2, 3]"]}

    @pytest.mark.parametrize(
        "method,params,expected",
        [
            ("chunk_array", [2, "[1, 2, 3, 4]"], "[513, 1027]"),
            ("reverse_array", ["[1, 2, 3]"], "[3, 2, 1]"),
            ("rotate_array", [1, "[1, 2, 3]"], "[3, 1, 2]"),
            ("generate", [2, "hex"], "0x0000"),
            ("pad_left", [4, "0x12"], "0x00000012"),
            ("pad_right", [4, "0x12"], "0x12000000"),
        ],
    )
    def test_methods(self, handler, method, params, expected):
        """Each method forwards its leading params to the service."""
        assert handler.handle({"method": method, "params": params}) == {"result": [expected]}

    def test_random(self, handler):
        """Random values have the padded width."""
        response = handler.handle({"method": "random", "params": [4, "hex"]})
        assert len(response["result"][0]) == 10

    def test_hash(self, handler):
        """Hash requests name the algorithm first."""
        response = handler.handle({"method": "hash", "params": ["keccak256", "test_key"]})
        assert response == {"result": ["0xad62e20f6955fd04f45eef123e61f3c74ce24e1ce4f6ab270b886cd860fd65ac"]}

    def test_stop(self, handler):
        """Stop answers with an empty result."""
        assert handler.handle({"method": Message.STOP.value}) == {"result": []}


class TestHandleErrors:
    """Malformed requests and failing operations."""

    def test_unknown_method(self, handler):
        """Unknown methods are reported."""
        assert handler.handle({"method": "unknown", "params": []}) == {"error": "Unknown method: unknown"}

    def test_missing_selection(self, handler):
        """A request without params has no selection."""
        assert handler.handle({"method": "flatten_array"}) == {"error": "Missing selection for flatten_array"}

    def test_bad_param(self, handler):
        """Non-numeric lengths are invalid params."""
        response = handler.handle({"method": "pad_left", "params": ["x", "0x12"]})
        assert response["error"].startswith("Invalid params for pad_left")

    def test_missing_param(self, handler):
        """Missing leading params are invalid params."""
        response = handler.handle({"method": "chunk_array", "params": ["[1, 2]"]})
        assert response["error"].startswith("Invalid params for chunk_array")

    def test_service_error(self, handler):
        """Service errors become error responses."""
        assert handler.handle({"method": "hash", "params": ["md5", "abc"]}) == {"error": "Unsupported hash: md5"}


class TestServe:
    """Stream loop."""

    def test_until_stop(self, handler):
        """Requests after stop are not read."""
        reader = io.StringIO('{"method": "flatten_array", "params": ["[1, [2]]"]}\n\n{"method": "stop"}\n{"method": "flatten_array", "params": ["[3]"]}\n')
        writer = io.StringIO()
        handler.serve(reader, writer)
        assert [orjson.loads(line) for line in writer.getvalue().splitlines()] == [{"result": ["[1, 2]"]}, {"result": []}]

    def test_until_eof(self, handler):
        """The loop ends with the input."""
        writer = io.StringIO()
        handler.serve(io.StringIO('{"method": "reverse_array", "params": ["[1, 2]"]}\n'), writer)
        assert writer.getvalue() == '{"result":["[2, 1]"]}\n'

    def test_invalid_json(self, handler):
        """Malformed lines get an error response and the loop continues."""
        writer = io.StringIO()
        handler.serve(io.StringIO('not json\n[1, 2]\n'), writer)
        responses = [orjson.loads(line) for line in writer.getvalue().splitlines()]
        assert responses[0]["error"].startswith("Invalid JSON")
        assert responses[1] == {"error": "Request must be an object"}
