"""Core parser API for SVG documents.

Simple module-level functions cover the common cases; ``SVGParser`` holds a
``ParserConfig`` for callers that need to tune charset detection,
tokenization or output.
"""

import time
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Tuple, Union

from svgparser.character import (
    DECLARATION_SCAN_LIMIT,
    EncodingDetector,
    EncodingResult,
)
from svgparser.serialization import serialize, tostring
from svgparser.shared import ParserConfig, SVGParserError, get_logger
from svgparser.tokenization import TokenSource
from svgparser.tree import Element, ElementDecoder

# Type definitions for input data
InputType = Union[str, bytes, bytearray, memoryview, BinaryIO, TextIO, Path]

MS_PER_SECOND = 1000  # Milliseconds per second conversion


class SVGParser:
    """Configured SVG parser.

    Examples:
        >>> parser = SVGParser(ParserConfig(correlation_id="req-1"))
        >>> root = parser.parse(b'<svg><rect id="r1"/></svg>')
        >>> root.find_by_id("r1").name
        'rect'
    """

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or ParserConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "svg_parser")
        self.detector = EncodingDetector(self.config.encoding)

    def parse(self, source: InputType, validate: bool = False) -> Element:
        """Parse an SVG document into an element tree.

        Args:
            source: Document as bytes, text, a readable stream or a Path
            validate: Accepted for forward compatibility; no validation is
                performed

        Returns:
            Root element, or an empty ``Element`` if the document has none

        Raises:
            CharsetError: If the document declares an unrecognised encoding
            TokenizationError: If the document is malformed
        """
        start_time = time.time()
        raw = _read_source(source)

        try:
            if isinstance(raw, str):
                text, encoding = self._prepare_text(raw)
            else:
                text, encoding = self.detector.decode(bytes(raw))

            self.logger.debug(
                "Starting parse",
                extra={
                    "input_length": len(raw),
                    "encoding": encoding.encoding if encoding else None,
                    "validate": validate,
                }
            )

            tokens = TokenSource(
                text, self.config.tokenizer, self.config.correlation_id
            )
            decoder = ElementDecoder(self.config.correlation_id)
            root = decoder.build(tokens)

        except SVGParserError as e:
            self.logger.debug(
                "Parse failed",
                extra={
                    "error_type": type(e).__name__,
                    "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
                }
            )
            raise

        self.logger.debug(
            "Parse completed",
            extra={
                "root": root.name,
                "element_count": decoder.elements_created,
                "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
            }
        )
        return root

    def parse_file(self, file_path: Union[str, Path], validate: bool = False) -> Element:
        """Parse the SVG document stored at ``file_path``."""
        path_obj = Path(file_path)
        self.logger.debug("Reading file", extra={"file_path": str(path_obj)})
        return self.parse(path_obj.read_bytes(), validate)

    def _prepare_text(self, text: str) -> Tuple[str, Optional[EncodingResult]]:
        # Already decoded; a declared encoding is still checked but not applied
        if text.startswith("\ufeff"):
            text = text[1:]
        head = text[:DECLARATION_SCAN_LIMIT].encode("utf-8", errors="replace")
        return text, self.detector.xml_parser.parse_declaration(head)

    def serialize(self, element: Element, out: BinaryIO) -> None:
        """Write ``element`` as XML to ``out`` using this parser's config."""
        serialize(element, out, self.config.serializer)

    def tostring(self, element: Element) -> bytes:
        """Serialize ``element`` to bytes using this parser's config."""
        return tostring(element, self.config.serializer)


def _read_source(source: InputType) -> Union[str, bytes, bytearray, memoryview]:
    if isinstance(source, (str, bytes, bytearray, memoryview)):
        return source
    if isinstance(source, Path):
        return source.read_bytes()
    if hasattr(source, "read"):
        return source.read()
    raise TypeError(f"Unsupported input type: {type(source).__name__}")


def parse(
    source: InputType,
    validate: bool = False,
    config: Optional[ParserConfig] = None,
) -> Element:
    """Parse an SVG document from bytes, text, a stream or a Path.

    Examples:
        >>> root = parse(b'<svg id="root"><rect id="r1"/><circle id="c1"/></svg>')
        >>> [child.name for child in root.children]
        ['rect', 'circle']
        >>> parse(b"").is_empty
        True
    """
    return SVGParser(config).parse(source, validate)


def parse_string(
    svg_string: str,
    validate: bool = False,
    config: Optional[ParserConfig] = None,
) -> Element:
    """Parse an SVG document that is already decoded to text."""
    return SVGParser(config).parse(svg_string, validate)


def parse_file(
    file_path: Union[str, Path],
    validate: bool = False,
    config: Optional[ParserConfig] = None,
) -> Element:
    """Parse the SVG document stored at ``file_path``."""
    return SVGParser(config).parse_file(file_path, validate)
