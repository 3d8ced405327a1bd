"""XML event types delivered by the token source.

Names carried by events are local names: any namespace prefix is dropped,
so ``svg:rect`` becomes ``rect`` and ``xlink:href`` becomes ``href``.
A prefixed namespace declaration ``xmlns:xlink`` surfaces as ``xlink``.
"""

from dataclasses import dataclass
from typing import Tuple, Union

Attribute = Tuple[str, str]


def local_name(qualified_name: str) -> str:
    """Strip the namespace prefix from a qualified XML name."""
    return qualified_name.rpartition(":")[2]


@dataclass(frozen=True)
class StartElement:
    """Opening tag with its attributes in document order."""

    name: str
    attributes: Tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class EndElement:
    """Closing tag."""

    name: str


@dataclass(frozen=True)
class CharData:
    """A run of character data, entities already resolved."""

    data: str


Event = Union[StartElement, EndElement, CharData]
