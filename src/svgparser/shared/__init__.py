"""Shared utilities for SVG parsing.

Configuration objects, the exception hierarchy and logging helpers used
across all layers.
"""

from .config import (
    EncodingConfig,
    ParserConfig,
    SerializerConfig,
    TokenizerConfig,
)
from .errors import (
    CharsetError,
    ConfigError,
    ConfigValidationError,
    ConversionError,
    SerializationError,
    SVGParserError,
    TokenizationError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "EncodingConfig",
    "ParserConfig",
    "SerializerConfig",
    "TokenizerConfig",
    "CharsetError",
    "ConfigError",
    "ConfigValidationError",
    "ConversionError",
    "SerializationError",
    "SVGParserError",
    "TokenizationError",
    "CorrelationLogger",
    "get_logger",
]
