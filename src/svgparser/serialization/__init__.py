"""Serialization layer: writes element trees back out as XML."""

from .writer import serialize, tostring

__all__ = [
    "serialize",
    "tostring",
]
