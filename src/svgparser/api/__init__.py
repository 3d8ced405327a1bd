"""Public API: parsing entry points and library adapters."""

from .adapters import LxmlAdapter
from .parser import SVGParser, parse, parse_file, parse_string

__all__ = [
    "LxmlAdapter",
    "SVGParser",
    "parse",
    "parse_file",
    "parse_string",
]
