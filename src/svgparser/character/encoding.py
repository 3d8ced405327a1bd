"""Character set detection and transcoding for SVG input.

Detection runs in stages: byte order mark, then the encoding declared in the
XML prolog, then the configured default. Declared labels are resolved with
the WHATWG encoding table from w3lib; a label it cannot resolve is fatal
for the whole parse.
"""

import codecs
import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple

from w3lib.encoding import resolve_encoding

from svgparser.shared import CharsetError, EncodingConfig, TokenizationError

# The prolog must sit at the start of the document
DECLARATION_SCAN_LIMIT = 1024


class DetectionMethod(Enum):
    """Enumeration of encoding detection methods."""
    BOM = "bom"
    XML_DECLARATION = "xml_declaration"
    DEFAULT = "default"


@dataclass
class EncodingResult:
    """Result of encoding detection.

    Attributes:
        encoding: Canonical codec name used to decode the document
        method: Detection method that decided the encoding
        declared: Encoding label exactly as written in the prolog, if any
        bom_length: Number of leading bytes occupied by a byte order mark
    """
    encoding: str
    method: DetectionMethod
    declared: Optional[str] = None
    bom_length: int = 0


class BOMDetector:
    """Byte Order Mark (BOM) detection."""

    # Longest patterns first so UTF-32 LE is not mistaken for UTF-16 LE
    BOM_PATTERNS: ClassVar[Tuple[Tuple[bytes, str], ...]] = (
        (b"\xff\xfe\x00\x00", "utf-32-le"),
        (b"\x00\x00\xfe\xff", "utf-32-be"),
        (b"\xef\xbb\xbf", "utf-8"),
        (b"\xff\xfe", "utf-16-le"),
        (b"\xfe\xff", "utf-16-be"),
    )

    def detect(self, data: bytes) -> Optional[EncodingResult]:
        """Detect encoding based on BOM.

        Args:
            data: Byte data to analyze

        Returns:
            EncodingResult if BOM detected, None otherwise
        """
        for bom_bytes, encoding in self.BOM_PATTERNS:
            if data.startswith(bom_bytes):
                return EncodingResult(
                    encoding=encoding,
                    method=DetectionMethod.BOM,
                    bom_length=len(bom_bytes),
                )
        return None


class XMLDeclarationParser:
    """Parser for XML encoding declarations."""

    XML_DECLARATION_PATTERN = re.compile(
        rb'\s*<\?xml\s[^>]*?\bencoding\s*=\s*(["\'])(.*?)\1',
        re.DOTALL,
    )

    # Labels the WHATWG table in w3lib does not cover
    ALIASES: ClassVar[Dict[str, str]] = {
        "unicode-1-1-utf-8": "utf-8",
        "x-euc-jp": "euc_jp",
    }

    def parse_declaration(self, data: bytes) -> Optional[EncodingResult]:
        """Parse encoding from XML declaration.

        Args:
            data: Byte data to analyze

        Returns:
            EncodingResult if a declaration names an encoding, None otherwise

        Raises:
            CharsetError: If the declared encoding is not recognised
        """
        match = self.XML_DECLARATION_PATTERN.match(data[:DECLARATION_SCAN_LIMIT])
        if not match:
            return None

        declared = match.group(2).decode("ascii", errors="replace")
        return EncodingResult(
            encoding=self.resolve(declared),
            method=DetectionMethod.XML_DECLARATION,
            declared=declared,
        )

    def resolve(self, label: str) -> str:
        """Map an encoding label to a canonical Python codec name.

        Labels follow the WHATWG encoding table, so ``us-ascii`` and
        ``iso-8859-1`` both resolve to ``cp1252``.

        Raises:
            CharsetError: If no codec is registered for the label
        """
        normalized = label.strip().lower()
        normalized = self.ALIASES.get(normalized, normalized)
        if not normalized:
            raise CharsetError("Empty encoding declaration", encoding=label)
        encoding = resolve_encoding(normalized)
        if encoding is None:
            raise CharsetError(
                f"Unsupported character set: {label!r}", encoding=label
            )
        return encoding


class EncodingDetector:
    """Main encoding detection class.

    Implements a cascading detection strategy:
    1. BOM detection
    2. XML declaration parsing
    3. Configured default (UTF-8 unless overridden)
    """

    def __init__(self, config: Optional[EncodingConfig] = None) -> None:
        self.config = config or EncodingConfig()
        self.bom_detector = BOMDetector()
        self.xml_parser = XMLDeclarationParser()

    def detect(self, data: bytes) -> EncodingResult:
        """Detect the encoding of ``data``.

        Raises:
            CharsetError: If the prolog declares an unrecognised encoding
        """
        bom_result = self.bom_detector.detect(data)
        if bom_result:
            return bom_result

        xml_result = self.xml_parser.parse_declaration(data)
        if xml_result:
            return xml_result

        return EncodingResult(
            encoding=codecs.lookup(self.config.default_encoding).name,
            method=DetectionMethod.DEFAULT,
        )

    def decode(self, data: bytes) -> Tuple[str, EncodingResult]:
        """Detect the encoding of ``data`` and transcode it to text.

        Returns:
            Tuple of decoded text (BOM removed) and the detection result

        Raises:
            CharsetError: If the prolog declares an unrecognised encoding
            TokenizationError: If the bytes are invalid in the detected encoding
        """
        result = self.detect(data)
        try:
            text = data[result.bom_length:].decode(result.encoding)
        except UnicodeDecodeError as e:
            raise TokenizationError(
                f"Invalid {result.encoding} data at byte {e.start + result.bom_length}"
            ) from e
        return text, result


def decode_document(
    data: bytes, config: Optional[EncodingConfig] = None
) -> Tuple[str, EncodingResult]:
    """Transcode raw document bytes to text using automatic detection."""
    return EncodingDetector(config).decode(data)
