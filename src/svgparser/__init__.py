"""SVG Parser.

Parses SVG documents into a tree of elements that can be compared,
serialized back to XML and searched by id, tag name or text content.

Progressive API Disclosure:
- Level 1: Simple functions - parse(), parse_string(), parse_file()
- Level 2: Configured parser - SVGParser class with ParserConfig
"""

__version__ = "0.1.0"
__author__ = "SVG Parser Team"

from .api import LxmlAdapter, SVGParser, parse, parse_file, parse_string
from .serialization import serialize, tostring
from .shared import (
    CharsetError,
    ParserConfig,
    SVGParserError,
    TokenizationError,
)
from .tree import Element, compare, find_all, find_by_content, find_by_id

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "parse_string",
    "parse_file",

    # Level 2: Configured parser
    "SVGParser",
    "ParserConfig",

    # Tree model and operations
    "Element",
    "compare",
    "find_all",
    "find_by_content",
    "find_by_id",
    "serialize",
    "tostring",

    # Interop
    "LxmlAdapter",

    # Errors
    "CharsetError",
    "SVGParserError",
    "TokenizationError",
]
