"""Tokenization layer: XML events and the expat-backed token source."""

from .events import (
    Attribute,
    CharData,
    EndElement,
    Event,
    StartElement,
    local_name,
)
from .prolog import blank_stray_text
from .source import TokenSource

__all__ = [
    "Attribute",
    "CharData",
    "EndElement",
    "Event",
    "StartElement",
    "TokenSource",
    "blank_stray_text",
    "local_name",
]
