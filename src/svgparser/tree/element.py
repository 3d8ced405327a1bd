"""Element tree model for parsed SVG documents."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from svgparser.tree.compare import compare
from svgparser.tree.query import find_all, find_by_content, find_by_id, iter_subtree


@dataclass(eq=False)
class Element:
    """A single SVG element: tag, attributes, text content and children.

    ``children`` owns the subtree; ``parent`` is a back-reference only and is
    ignored by comparison, serialization and ``repr``. ``content`` keeps the
    last non-blank run of character data seen directly inside the element,
    untrimmed.
    """

    name: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["Element"] = field(default_factory=list)
    parent: Optional["Element"] = field(default=None, repr=False)
    content: str = ""

    def __post_init__(self) -> None:
        """Normalize attributes and establish parent relationships."""
        if self.attributes is None:
            self.attributes = {}
        for child in self.children:
            child.parent = self

    @property
    def is_empty(self) -> bool:
        """True for the placeholder returned when a document has no root."""
        return (
            not self.name
            and not self.attributes
            and not self.children
            and not self.content
        )

    def add_child(self, child: "Element") -> None:
        """Append a child element and establish parent relationship."""
        if not isinstance(child, Element):
            raise TypeError("Child must be an Element instance")

        child.parent = self
        self.children.append(child)

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self.attributes.get(name, default)

    def iter(self) -> Iterator["Element"]:
        """Iterate over this element and its descendants in document order."""
        return iter_subtree(self)

    def get_depth(self) -> int:
        """Get depth of this element in the tree (root = 0)."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def compare(self, other: "Element") -> bool:
        """Deep structural equality with ``other``."""
        return compare(self, other)

    def find_by_id(self, id_value: str) -> Optional["Element"]:
        """First descendant whose ``id`` attribute equals ``id_value``."""
        return find_by_id(self, id_value)

    def find_all(self, name: str) -> List["Element"]:
        """All descendants with tag ``name``."""
        return find_all(self, name)

    def find_by_content(self, text: str) -> List["Element"]:
        """All descendants whose content contains ``text``, ignoring case."""
        return find_by_content(self, text)

    def to_dict(self) -> Dict[str, Any]:
        """Convert element subtree to dictionary representation."""
        result: Dict[str, Any] = {
            "name": self.name,
            "attributes": dict(self.attributes),
        }

        if self.content:
            result["content"] = self.content

        if self.children:
            result["children"] = [child.to_dict() for child in self.children]

        return result
