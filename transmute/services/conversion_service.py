# -*- coding: utf-8 -*-
"""Location: ./transmute/services/conversion_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Conversion Service.
The operations behind the command line and the editor handler. Each one
classifies its input (unless told the input encoding), decodes the best
candidate, optionally transforms the decoded value and renders it again.

Examples:
    >>> from transmute.services.conversion_service import ConversionService
    >>> service = ConversionService()
    >>> service.classify_and_convert("hex", "123\\n456\\n789")
    '0x7b\\n0x1c8\\n0x315'
    >>> service.flatten_array("[1,2,3,[4,5,6,[7,8,9]]]")
    '[1, 2, 3, 4, 5, 6, 7, 8, 9]'
    >>> service.pad_left(4, "0x12")
    '0x00000012'
"""

# Standard
import logging
from typing import Dict, Iterable, List, Optional, Tuple

# First-Party
from transmute.classify.classifier import Classifier
from transmute.classify.types import ArrayClassification, Classification
from transmute.config import settings
from transmute.encode.decoded import Decoded
from transmute.encode.decoding import decode, decoded_from
from transmute.encode.encoding import BaseEncoding, Encoding, HashEncoding, TextEncoding
from transmute.encode.hashing import Hasher
from transmute.errors import TransmuteError, UnsupportedEncodingError
from transmute.schemas import ConversionResult, EncodingWithDecodings, HashResult

logger = logging.getLogger(__name__)


class ConversionService:
    """Classify, decode, transform and re-encode input strings."""

    def __init__(self, classifier: Optional[Classifier] = None):
        """Create the service.

        Args:
            classifier: Classifier to use; a default one when omitted.
        """
        self.classifier = classifier or Classifier()

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def classify(self, text: str) -> List[Classification]:
        """Ranked candidates without the empty sentinel.

        Args:
            text: Input string.

        Returns:
            List[Classification]: Best first.
        """
        return [candidate for candidate in self.classifier.classify(text) if not candidate.is_empty()]

    def classify_best_match(self, text: str) -> Classification:
        """Best candidate.

        Args:
            text: Input string.

        Returns:
            Classification: Minimum candidate.
        """
        return self.classifier.classify_best_match(text)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def decode(self, encoding: Encoding, text: str) -> Decoded:
        """Decode text under an explicit encoding.

        Args:
            encoding: Input encoding.
            text: Input string.

        Returns:
            Decoded: The value.
        """
        return decode(encoding, text)

    def encode(self, encoding: Encoding, decoded: Decoded, pad: bool = False) -> str:
        """Render a decoded value.

        Args:
            encoding: Output encoding.
            decoded: Value.
            pad: Keep leading zero bytes.

        Returns:
            str: Rendered text.
        """
        return encoding.encode(decoded, pad)

    def classify_and_convert(self, encoding: str, text: str) -> str:
        """Render the best interpretation of ``text`` in ``encoding``.

        Line-separated input is converted line by line.

        Args:
            encoding: Output encoding name.
            text: Input string.

        Returns:
            str: Rendered text.

        Examples:
            >>> ConversionService().classify_and_convert("base64", "0x1234")
            'EjQ'
            >>> ConversionService().classify_and_convert("hex", "[0x0, 0x0, 0x90, 0x78, 0x56, 0x34, 0x12]")
            '0x12345678900000'
        """
        best = self.classify_best_match(text)
        target = Encoding.from_spec(encoding)
        if isinstance(best, ArrayClassification) and best.is_lines():
            target = target.to_lines(best.separator)
        logger.debug(f"Converting {best.encoding()} to {target}")
        return target.encode(decoded_from(best))

    def classify_and_convert_all(self, encoding: str, text: str) -> List[Tuple[str, str]]:
        """Render every candidate interpretation that converts cleanly.

        Args:
            encoding: Output encoding name.
            text: Input string.

        Returns:
            List[Tuple[str, str]]: ``(candidate encoding, output)`` pairs, best first.

        Examples:
            >>> ConversionService().classify_and_convert_all("int", "10")[:2]
            [('int', '10'), ('bin', '2')]
        """
        target = Encoding.from_spec(encoding)
        results: List[Tuple[str, str]] = []
        for candidate in self.classify(text):
            try:
                results.append((str(candidate.encoding()), target.encode(decoded_from(candidate))))
            except TransmuteError as e:
                logger.debug(f"Skipping {candidate.encoding()} candidate: {e}")
        return results

    def input_encodings(self, text: str, names: Optional[Iterable[str]] = None) -> List[Encoding]:
        """Encodings to try when decoding ``text``.

        Args:
            text: Input string.
            names: Explicit input encoding names; classification order when omitted.

        Returns:
            List[Encoding]: Encodings, preferred first.
        """
        if names:
            return [Encoding.from_spec(name) for name in names]
        return [candidate.encoding() for candidate in self.classify(text)]

    def convert(self, text: str, output: str, input_names: Optional[Iterable[str]] = None) -> str:
        """Render ``text`` in ``output`` using the first input encoding that works.

        Args:
            text: Input string.
            output: Output encoding name.
            input_names: Explicit input encoding names.

        Returns:
            str: Rendered text.

        Raises:
            UnsupportedEncodingError: If no input encoding converts.

        Examples:
            >>> ConversionService().convert("0x1234", "base64", ["hex"])
            'EjQ'
        """
        target = Encoding.from_spec(output)
        for encoding in self.input_encodings(text, input_names):
            try:
                return target.encode(decode(encoding, text))
            except TransmuteError as e:
                logger.debug(f"Cannot convert from {encoding} to {target}: {e}")
        raise UnsupportedEncodingError(str(target), "no input encoding converts")

    def convert_all(self, text: str, outputs: Iterable[str], input_names: Optional[Iterable[str]] = None) -> Dict[str, Dict[str, ConversionResult]]:
        """Render ``text`` under every input encoding in every output encoding.

        Args:
            text: Input string.
            outputs: Output encoding names.
            input_names: Explicit input encoding names.

        Returns:
            Dict[str, Dict[str, ConversionResult]]: Input encoding name to output
            encoding name to result; failing combinations are left out.
        """
        outputs = list(outputs)
        results: Dict[str, Dict[str, ConversionResult]] = {}
        for encoding in self.input_encodings(text, input_names):
            try:
                decoded = decode(encoding, text)
            except TransmuteError as e:
                logger.debug(f"Cannot decode as {encoding}: {e}")
                continue
            conversions: Dict[str, ConversionResult] = {}
            for output in outputs:
                try:
                    conversions[output] = ConversionResult(input=str(decoded), output=Encoding.from_spec(output).encode(decoded))
                except TransmuteError as e:
                    logger.debug(f"Cannot encode {encoding} value as {output}: {e}")
            results[str(encoding)] = conversions
        return results

    def decodings(self, text: str, input_names: Optional[Iterable[str]] = None) -> Dict[str, List[str]]:
        """Decoded value display under each input encoding.

        Args:
            text: Input string.
            input_names: Explicit input encoding names.

        Returns:
            Dict[str, List[str]]: Input encoding name to decoded display.
        """
        results: Dict[str, List[str]] = {}
        for encoding in self.input_encodings(text, input_names):
            try:
                results[str(encoding)] = [str(decode(encoding, text))]
            except TransmuteError as e:
                logger.debug(f"Cannot decode as {encoding}: {e}")
        return results

    def describe(self, text: str, targets: Optional[Iterable[str]] = None) -> List[EncodingWithDecodings]:
        """Every candidate with its value in the default output encodings.

        Args:
            text: Input string.
            targets: Output encoding names; ``settings.convert_targets`` when omitted.

        Returns:
            List[EncodingWithDecodings]: One entry per candidate, best first.
        """
        targets = list(targets) if targets is not None else list(settings.convert_targets)
        entries: List[EncodingWithDecodings] = []
        for candidate in self.classify(text):
            rendered: Dict[str, str] = {}
            try:
                decoded = decode(candidate.encoding(), text)
            except TransmuteError as e:
                logger.debug(f"Cannot decode as {candidate.encoding()}: {e}")
            else:
                for target in targets:
                    try:
                        rendered[target] = Encoding.from_spec(target).encode(decoded)
                    except TransmuteError as e:
                        logger.debug(f"Cannot encode {candidate.encoding()} value as {target}: {e}")
            entries.append(EncodingWithDecodings(encoding=str(candidate.encoding()), score=candidate.score, decodings=rendered))
        return entries

    # ------------------------------------------------------------------
    # Array transforms
    # ------------------------------------------------------------------

    def flatten_array(self, text: str) -> str:
        """Flatten a nested array, keeping its delimiters.

        Args:
            text: Input string.

        Returns:
            str: Flattened array.
        """
        best = self.classify_best_match(text)
        return best.encoding().flatten().encode(decoded_from(best).flatten())

    def chunk_array(self, count: int, text: str) -> str:
        """Group an array (or the bytes of a value) into ``count`` chunks.

        Args:
            count: Number of chunks.
            text: Input string.

        Returns:
            str: Chunked array.

        Examples:
            >>> ConversionService().chunk_array(3, "[0x09, 0x08, 0x07, 0x06, 0x05, 0x04, 0x03, 0x02, 0x01]")
            '[0x70809, 0x40506, 0x10203]'
        """
        best = self.classify_best_match(text)
        return best.encoding().encode(decoded_from(best).chunk(count))

    def reverse_array(self, text: str, depth: int = 1) -> str:
        """Reverse an array down to ``depth`` levels.

        Args:
            text: Input string.
            depth: Levels to reverse.

        Returns:
            str: Reversed array.

        Examples:
            >>> ConversionService().reverse_array("[1, 2, 3]")
            '[3, 2, 1]'
        """
        best = self.classify_best_match(text)
        return best.encoding().reverse(depth).encode(decoded_from(best).reverse(depth))

    def rotate_array(self, text: str, amount: int) -> str:
        """Rotate an array right by ``amount`` (left when negative).

        Args:
            text: Input string.
            amount: Positions.

        Returns:
            str: Rotated array.

        Examples:
            >>> ConversionService().rotate_array("[1, 2, 3, 4, 5]", 2)
            '[4, 5, 1, 2, 3]'
        """
        best = self.classify_best_match(text)
        return best.encoding().rotate(amount).encode(decoded_from(best).rotate(amount))

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def generate(self, encoding: str, length: int) -> str:
        """Zero value of ``length`` bytes.

        Args:
            encoding: Output encoding name.
            length: Byte count.

        Returns:
            str: Rendered zeros.

        Examples:
            >>> ConversionService().generate("hex", 32) == "0x" + "0" * 64
            True
        """
        return Encoding.from_spec(encoding).generate(length)

    def random(self, encoding: str, length: int) -> str:
        """Random value of ``length`` bytes.

        Args:
            encoding: Output encoding name.
            length: Byte count.

        Returns:
            str: Rendered random bytes.
        """
        return Encoding.from_spec(encoding).random(length)

    def pad_left(self, length: int, text: str) -> str:
        """Pad on the left to ``length`` bytes, or ``length`` elements for arrays.

        Byte values gain most significant zeros; arrays gain zero elements at
        the front.

        Args:
            length: Target byte or element count.
            text: Input string.

        Returns:
            str: Padded value in the input's own encoding.

        Examples:
            >>> ConversionService().pad_left(4, "[0x1, 0x2]")
            '[0x00, 0x00, 0x01, 0x02]'
        """
        best = self.classify_best_match(text)
        decoded = decoded_from(best)
        if decoded.is_array():
            return best.encoding().left_pad(length).encode(decoded.left_pad(length), pad=True)
        return best.encoding().encode(decoded.right_pad(length), pad=True)

    def pad_right(self, length: int, text: str) -> str:
        """Pad on the right to ``length`` bytes, or ``length`` elements for arrays.

        Byte values gain least significant zeros; arrays gain zero elements at
        the back.

        Args:
            length: Target byte or element count.
            text: Input string.

        Returns:
            str: Padded value in the input's own encoding.

        Examples:
            >>> ConversionService().pad_right(4, "0x12")
            '0x12000000'
        """
        best = self.classify_best_match(text)
        decoded = decoded_from(best)
        if decoded.is_array():
            return best.encoding().right_pad(length).encode(decoded.right_pad(length), pad=True)
        return best.encoding().encode(decoded.left_pad(length), pad=True)

    # ------------------------------------------------------------------
    # Hashing
    # ------------------------------------------------------------------

    def hash(self, algorithm: str, text: str, encoding: Optional[str] = None) -> str:
        """Hash the value of ``text``.

        Numeric input that classifies perfectly is hashed as its value and the
        digest is rendered in the same base; anything else is hashed as raw
        UTF-8 text and rendered in hex.

        Args:
            algorithm: Hash name such as ``keccak256``.
            text: Input string.
            encoding: Explicit input encoding name.

        Returns:
            str: Rendered digest.

        Examples:
            >>> ConversionService().hash("sha256", "hello world")[:18]
            '0xb94d27b9934d3e08'
        """
        hasher = Hasher.parse(algorithm)
        if encoding:
            source = Encoding.from_spec(encoding)
            decoded = decode(source, text)
            if isinstance(source, TextEncoding):
                return HashEncoding(hasher).encode(Decoded.from_be_bytes(decoded.to_le_bytes()))
        else:
            best = self.classify_best_match(text)
            source = best.encoding()
            if best.score > 0 or not isinstance(source, BaseEncoding):
                return HashEncoding(hasher).encode(Decoded.from_be_bytes(text.encode("utf-8")))
            decoded = decoded_from(best)
        digest = hasher.hash(decoded)
        if isinstance(source, BaseEncoding):
            return source.encode(digest, pad=True)
        return BaseEncoding(16).encode(digest, pad=True)

    def classify_and_hash(self, algorithms: Iterable[str], text: str, encoding: Optional[str] = None) -> List[HashResult]:
        """Hash ``text`` with several algorithms.

        Args:
            algorithms: Hash names.
            text: Input string.
            encoding: Explicit input encoding name.

        Returns:
            List[HashResult]: One result per algorithm, in order.

        Examples:
            >>> [r.algorithm for r in ConversionService().classify_and_hash(["sha256", "blake2"], "abc")]
            ['sha2-256', 'blake2-256']
        """
        return [HashResult(algorithm=str(Hasher.parse(name)), output=self.hash(name, text, encoding)) for name in algorithms]
