"""Exception hierarchy for SVG parsing.

Every failure the library surfaces derives from ``SVGParserError`` so callers
can catch the whole family at once. End-of-stream is never raised to callers.
"""

from typing import List, Optional


class SVGParserError(Exception):
    """Base exception for all svgparser errors."""


class CharsetError(SVGParserError):
    """Raised when a declared character encoding cannot be recognised."""

    def __init__(self, message: str, encoding: Optional[str] = None) -> None:
        super().__init__(message)
        self.encoding = encoding


class TokenizationError(SVGParserError):
    """Raised for malformed XML or bytes that cannot be decoded.

    Attributes:
        line: 1-based line of the offending input, when known
        column: 0-based column of the offending input, when known
        code: expat error code, when the tokenizer reported one
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column
        self.code = code


class SerializationError(SVGParserError):
    """Raised when an element cannot be written as XML."""


class ConversionError(SVGParserError):
    """Raised when converting to or from a foreign tree representation fails."""


class ConfigError(SVGParserError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []
