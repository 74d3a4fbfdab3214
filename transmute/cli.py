# -*- coding: utf-8 -*-
"""Location: ./transmute/cli.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Transmute Command Line.
Classify, convert, hash, pad, generate and reshape encoded values from the
shell:

    transmute classify 0x1234
    transmute convert -o base64 0x1234
    transmute --list classify "[1, 2, 3]"
    transmute hash -a keccak256 test_key
    transmute pad -p 32 -s left 0x1234
    transmute array chunk -c 3 "[1, 2, 3, 4, 5, 6]"
    transmute serve

Commands print a plain string when there is one answer and JSON otherwise.
``--list`` asks for every candidate instead of the best one. Errors go to
stderr with exit status 1.
"""

# Standard
import argparse
import logging
import sys
from typing import Any, List, Optional

# First-Party
from transmute import __version__
from transmute.config import settings
from transmute.errors import TransmuteError
from transmute.handler import EventHandler
from transmute.schemas import ClassificationResult, dumps
from transmute.services.conversion_service import ConversionService
from transmute.services.logging_service import LoggingService

logger = logging.getLogger(__name__)


class CLIError(TransmuteError):
    """Base class for CLI-related errors."""


def _split(value: Optional[str]) -> List[str]:
    """Split a comma-separated option value.

    Args:
        value: Option text or None.

    Returns:
        List[str]: Non-empty trimmed items.

    Examples:
        >>> _split("hex, base64,")
        ['hex', 'base64']
        >>> _split(None)
        []
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _input(args: argparse.Namespace) -> str:
    """Positional input, or standard input when omitted.

    Args:
        args: Parsed arguments.

    Returns:
        str: Input text.

    Raises:
        CLIError: If no input is available.
    """
    if args.input is not None and args.input != "-":
        return args.input
    if sys.stdin is None or sys.stdin.isatty():
        raise CLIError("No input given")
    return sys.stdin.read().rstrip("\n")


def classify_command(args: argparse.Namespace, service: ConversionService) -> Any:
    """Best encoding name, or every candidate with ``--list``.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        Any: Encoding name or list of results.
    """
    candidates = service.classify(_input(args))
    if args.list:
        return [ClassificationResult(encoding=str(c.encoding()), score=c.score) for c in candidates]
    return str(candidates[0].encoding()) if candidates else "Empty"


def convert_command(args: argparse.Namespace, service: ConversionService) -> Any:
    """Convert between encodings.

    Without input or output encodings every candidate is listed with its
    value in the default targets; without output encodings the decoded value
    per input encoding is listed; with a single output encoding the first
    working conversion is printed.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        Any: Output string or JSON payload.
    """
    text = _input(args)
    inputs = _split(args.input_encoding)
    outputs = _split(args.output_encoding)
    if not inputs and not outputs:
        return service.describe(text)
    if not outputs:
        return service.decodings(text, inputs)
    if not args.list and len(outputs) == 1:
        return service.convert(text, outputs[0], inputs)
    return service.convert_all(text, outputs, inputs)


def hash_command(args: argparse.Namespace, service: ConversionService) -> Any:
    """Hash the input with one or more algorithms.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        Any: Digest string or list of results.
    """
    text = _input(args)
    algorithms = _split(args.algorithm) or [settings.default_hash]
    if not args.list and len(algorithms) == 1:
        return service.hash(algorithms[0], text, args.input_encoding)
    return service.classify_and_hash(algorithms, text, args.input_encoding)


def generate_command(args: argparse.Namespace, service: ConversionService) -> str:
    """Zero value of the requested size.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        str: Rendered value.
    """
    return service.generate(args.encoding, args.bytes)


def random_command(args: argparse.Namespace, service: ConversionService) -> str:
    """Random value of the requested size.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        str: Rendered value.
    """
    return service.random(args.encoding, args.bytes)


def pad_command(args: argparse.Namespace, service: ConversionService) -> str:
    """Pad the input value to a byte length.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        str: Padded value.
    """
    if args.side == "left":
        return service.pad_left(args.padding, _input(args))
    return service.pad_right(args.padding, _input(args))


def flatten_command(args: argparse.Namespace, service: ConversionService) -> str:
    """Flatten a nested array.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        str: Flattened array.
    """
    return service.flatten_array(_input(args))


def chunk_command(args: argparse.Namespace, service: ConversionService) -> str:
    """Chunk an array.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        str: Chunked array.

    Raises:
        CLIError: If the chunk count is not positive.
    """
    if args.chunks < 1:
        raise CLIError("Chunk count must be at least 1")
    return service.chunk_array(args.chunks, _input(args))


def reverse_command(args: argparse.Namespace, service: ConversionService) -> str:
    """Reverse an array.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        str: Reversed array.
    """
    return service.reverse_array(_input(args), args.depth)


def rotate_command(args: argparse.Namespace, service: ConversionService) -> str:
    """Rotate an array.

    Args:
        args: Parsed arguments.
        service: Conversion service.

    Returns:
        str: Rotated array.
    """
    return service.rotate_array(_input(args), args.rotation)


def serve_command(args: argparse.Namespace, service: ConversionService) -> None:
    """Answer editor requests on stdin/stdout until ``stop`` or end of input.

    Args:
        args: Parsed arguments.
        service: Conversion service.
    """
    EventHandler(service).serve(sys.stdin, sys.stdout)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured argument parser

    Examples:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["pad", "-p", "4", "-s", "left", "0x12"])
        >>> args.padding, args.side, args.input
        (4, 'left', '0x12')
        >>> parser.parse_args(["array", "rotate", "-r", "-2", "[1, 2]"]).rotation
        -2
    """
    parser = argparse.ArgumentParser(prog="transmute", description="Classify and convert between numeric, text and array encodings")
    parser.add_argument("--version", "-V", action="version", version=f"transmute {__version__}")
    parser.add_argument("--list", "-l", action="store_true", help="Return every candidate as JSON instead of the best one")
    parser.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    classify_parser = subparsers.add_parser("classify", help="Guess the encoding of the input")
    classify_parser.add_argument("input", nargs="?", help="Input text (default: stdin)")
    classify_parser.set_defaults(func=classify_command)

    convert_parser = subparsers.add_parser("convert", help="Convert the input between encodings")
    convert_parser.add_argument("--input-encoding", "-i", help="Comma-separated input encodings (default: classify)")
    convert_parser.add_argument("--output-encoding", "-o", help="Comma-separated output encodings")
    convert_parser.add_argument("input", nargs="?", help="Input text (default: stdin)")
    convert_parser.set_defaults(func=convert_command)

    hash_parser = subparsers.add_parser("hash", help="Hash the input")
    hash_parser.add_argument("--algorithm", "--algo", "-a", help="Comma-separated hash algorithms (default: settings.default_hash)")
    hash_parser.add_argument("--input-encoding", "-i", help="Input encoding (default: classify)")
    hash_parser.add_argument("input", nargs="?", help="Input text (default: stdin)")
    hash_parser.set_defaults(func=hash_command)

    for name, func, help_text in (("generate", generate_command, "Render zero bytes"), ("random", random_command, "Render random bytes")):
        literal_parser = subparsers.add_parser(name, help=help_text)
        literal_parser.add_argument("--encoding", "-e", default="hex", help="Output encoding (default: hex)")
        literal_parser.add_argument("--bytes", "-b", type=int, default=32, help="Number of bytes (default: 32)")
        literal_parser.set_defaults(func=func)

    pad_parser = subparsers.add_parser("pad", help="Pad the input value to a byte length")
    pad_parser.add_argument("--padding", "-p", type=int, default=32, help="Target length in bytes (default: 32)")
    pad_parser.add_argument("--side", "-s", choices=["left", "right"], default="left", help="Side to pad (default: left)")
    pad_parser.add_argument("input", nargs="?", help="Input text (default: stdin)")
    pad_parser.set_defaults(func=pad_command)

    array_parser = subparsers.add_parser("array", help="Reshape arrays")
    array_subparsers = array_parser.add_subparsers(dest="array_command", help="Array operations")

    flatten_parser = array_subparsers.add_parser("flatten", help="Flatten nested arrays")
    flatten_parser.add_argument("input", nargs="?", help="Input text (default: stdin)")
    flatten_parser.set_defaults(func=flatten_command)

    chunk_parser = array_subparsers.add_parser("chunk", help="Split into equal chunks")
    chunk_parser.add_argument("--chunks", "-c", type=int, required=True, help="Number of chunks")
    chunk_parser.add_argument("input", nargs="?", help="Input text (default: stdin)")
    chunk_parser.set_defaults(func=chunk_command)

    reverse_parser = array_subparsers.add_parser("reverse", help="Reverse element order")
    reverse_parser.add_argument("--depth", "-d", type=int, default=1, help="Levels to reverse (default: 1)")
    reverse_parser.add_argument("input", nargs="?", help="Input text (default: stdin)")
    reverse_parser.set_defaults(func=reverse_command)

    rotate_parser = array_subparsers.add_parser("rotate", help="Rotate elements right (negative: left)")
    rotate_parser.add_argument("--rotation", "-r", type=int, required=True, help="Positions to rotate")
    rotate_parser.add_argument("input", nargs="?", help="Input text (default: stdin)")
    rotate_parser.set_defaults(func=rotate_command)

    serve_parser = subparsers.add_parser("serve", help="Answer line-delimited JSON requests on stdin")
    serve_parser.set_defaults(func=serve_command)

    return parser


def run(argv: Optional[List[str]] = None, service: Optional[ConversionService] = None) -> Any:
    """Parse arguments and run the selected command.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when omitted.
        service: Conversion service; a default one when omitted.

    Returns:
        Any: The command's output.

    Examples:
        >>> run(["convert", "-i", "hex", "-o", "base64", "0x1234"])
        'EjQ'
        >>> len(run(["generate", "-e", "hex", "-b", "4"]))
        10
    """
    return _dispatch(create_parser().parse_args(argv), service)


def _dispatch(args: argparse.Namespace, service: Optional[ConversionService] = None) -> Any:
    """Run the command selected by parsed arguments.

    Args:
        args: Parsed arguments.
        service: Conversion service; a default one when omitted.

    Returns:
        Any: The command's output.

    Raises:
        CLIError: If no command was given.
    """
    if not hasattr(args, "func"):
        raise CLIError("No command given, see --help")
    logger.debug(f"Running {args.command} command")
    return args.func(args, service or ConversionService())


def emit(payload: Any) -> None:
    """Print a command result.

    Args:
        payload: Plain string, or data to print as JSON.
    """
    if payload is None:
        return
    if isinstance(payload, str):
        print(payload)
    else:
        print(dumps(payload, indent=settings.json_indent))


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when omitted.
    """
    args = create_parser().parse_args(argv)
    logging_service = LoggingService()
    logging_service.initialize()
    try:
        if args.log_level:
            logging_service.set_level(args.log_level)
        emit(_dispatch(args))
    except TransmuteError as e:
        logger.debug(f"Command failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        sys.exit(1)
    finally:
        logging_service.shutdown()


if __name__ == "__main__":
    main()
