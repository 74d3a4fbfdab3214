# -*- coding: utf-8 -*-
"""Location: ./transmute/handler.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Editor Request Handler.
Serves conversion requests from an editor over line-delimited JSON on a pair
of streams. Each request is ``{"method": <name>, "params": [...]}``; each
response is ``{"result": [...]}`` or ``{"error": <message>}``. The last
parameter of every method is the selection: a string or a list of lines,
converted one line at a time.

Examples:
    >>> from transmute.handler import EventHandler
    >>> handler = EventHandler()
    >>> handler.handle({"method": "classify_and_convert", "params": ["hex", ["10", "255"]]})
    {'result': ['0xa', '0xff']}
    >>> handler.handle({"method": "unknown", "params": []})
    {'error': 'Unknown method: unknown'}
"""

# Standard
from enum import Enum
import logging
from typing import Any, Callable, Dict, IO, List, Optional

# Third-Party
import orjson

# First-Party
from transmute.errors import TransmuteError
from transmute.services.conversion_service import ConversionService

logger = logging.getLogger(__name__)


class Message(str, Enum):
    """Methods understood by the handler."""

    CLASSIFY_AND_CONVERT = "classify_and_convert"
    FLATTEN_ARRAY = "flatten_array"
    CHUNK_ARRAY = "chunk_array"
    REVERSE_ARRAY = "reverse_array"
    ROTATE_ARRAY = "rotate_array"
    GENERATE = "generate"
    RANDOM = "random"
    PAD_LEFT = "pad_left"
    PAD_RIGHT = "pad_right"
    HASH = "hash"
    STOP = "stop"


class EventHandler:
    """Dispatches editor requests to the conversion service."""

    def __init__(self, service: Optional[ConversionService] = None):
        """Create the handler.

        Args:
            service: Conversion service; a default one when omitted.
        """
        self.service = service or ConversionService()
        self._dispatch: Dict[Message, Callable[[List[Any], str], str]] = {
            Message.CLASSIFY_AND_CONVERT: lambda args, line: self.service.classify_and_convert(str(args[0]), line),
            Message.FLATTEN_ARRAY: lambda args, line: self.service.flatten_array(line),
            Message.CHUNK_ARRAY: lambda args, line: self.service.chunk_array(int(args[0]), line),
            Message.REVERSE_ARRAY: lambda args, line: self.service.reverse_array(line, int(args[0]) if args else 1),
            Message.ROTATE_ARRAY: lambda args, line: self.service.rotate_array(line, int(args[0])),
            Message.GENERATE: lambda args, line: self.service.generate(line, int(args[0])),
            Message.RANDOM: lambda args, line: self.service.random(line, int(args[0])),
            Message.PAD_LEFT: lambda args, line: self.service.pad_left(int(args[0]), line),
            Message.PAD_RIGHT: lambda args, line: self.service.pad_right(int(args[0]), line),
            Message.HASH: lambda args, line: self.service.hash(str(args[0]), line),
        }

    def handle(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """Answer one request.

        Args:
            request: Decoded request document.

        Returns:
            Dict[str, Any]: ``{"result": [...]}`` or ``{"error": message}``.

        Examples:
            >>> EventHandler().handle({"method": "generate", "params": [2, "hex"]})
            {'result': ['0x0000']}
            >>> EventHandler().handle({"method": "pad_left", "params": ["x", "0x12"]})
            {'error': "Invalid params for pad_left: invalid literal for int() with base 10: 'x'"}
        """
        try:
            message = Message(request.get("method"))
        except ValueError:
            return {"error": f"Unknown method: {request.get('method')}"}
        if message is Message.STOP:
            return {"result": []}

        params = list(request.get("params") or [])
        if not params:
            return {"error": f"Missing selection for {message.value}"}
        *args, selection = params
        lines = selection if isinstance(selection, list) else [selection]

        try:
            return {"result": [self._dispatch[message](args, str(line)) for line in lines]}
        except (IndexError, ValueError) as e:
            return {"error": f"Invalid params for {message.value}: {e}"}
        except TransmuteError as e:
            logger.warning(f"{message.value} failed: {e}")
            return {"error": str(e)}

    def serve(self, reader: IO[str], writer: IO[str]) -> None:
        """Answer requests line by line until end of input or ``stop``.

        Args:
            reader: Stream of JSON request lines.
            writer: Stream receiving JSON response lines.

        Examples:
            >>> import io
            >>> out = io.StringIO()
            >>> EventHandler().serve(io.StringIO('{"method": "flatten_array", "params": ["[1, [2]]"]}\\n{"method": "stop"}\\n'), out)
            >>> out.getvalue().splitlines()
            ['{"result":["[1, 2]"]}', '{"result":[]}']
        """
        for raw in reader:
            if not raw.strip():
                continue
            try:
                request = orjson.loads(raw)
            except orjson.JSONDecodeError as e:
                response: Dict[str, Any] = {"error": f"Invalid JSON: {e}"}
                request = {}
            else:
                response = self.handle(request) if isinstance(request, dict) else {"error": "Request must be an object"}
            writer.write(orjson.dumps(response).decode() + "\n")
            writer.flush()
            if isinstance(request, dict) and request.get("method") == Message.STOP.value:
                logger.info("Stop requested, shutting down handler")
                return
