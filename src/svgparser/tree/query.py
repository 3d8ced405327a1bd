"""Read-only searches over an element tree.

All searches walk descendants depth-first in document order and never
include the element they start from. Nothing found is an empty result,
not an error.
"""

from typing import TYPE_CHECKING, Iterator, List, Optional

if TYPE_CHECKING:
    from svgparser.tree.element import Element


def iter_descendants(root: Optional["Element"]) -> Iterator["Element"]:
    """Yield every descendant of ``root`` in document (pre-)order."""
    if root is None:
        return
    stack = [child for child in reversed(root.children) if child is not None]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in reversed(node.children) if child is not None)


def iter_subtree(root: "Element") -> Iterator["Element"]:
    """Yield ``root`` followed by its descendants."""
    yield root
    yield from iter_descendants(root)


def find_by_id(root: Optional["Element"], id_value: str) -> Optional["Element"]:
    """Find the first descendant whose ``id`` attribute equals ``id_value``."""
    for element in iter_descendants(root):
        if element.attributes.get("id") == id_value:
            return element
    return None


def find_all(root: Optional["Element"], name: str) -> List["Element"]:
    """Collect every descendant with tag ``name``."""
    return [element for element in iter_descendants(root) if element.name == name]


def find_by_content(root: Optional["Element"], text: str) -> List["Element"]:
    """Collect descendants whose content contains ``text``, case-insensitively."""
    needle = text.lower()
    return [
        element
        for element in iter_descendants(root)
        if needle in element.content.lower()
    ]
