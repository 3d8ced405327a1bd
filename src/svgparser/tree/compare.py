"""Deep structural equality for element trees."""

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from svgparser.tree.element import Element


def _same_node(left: "Element", right: "Element") -> bool:
    if (
        left.name != right.name
        or left.content != right.content
        or len(left.attributes) != len(right.attributes)
        or len(left.children) != len(right.children)
    ):
        return False

    for key, value in left.attributes.items():
        if key not in right.attributes or right.attributes[key] != value:
            return False
    return True


def compare(a: "Element", b: "Element") -> bool:
    """Return True if two trees are structurally equal.

    Names, contents, attribute mappings (order-insensitive) and children
    (pairwise, in document order) must all match. Parent links are never
    consulted. Stops at the first mismatch.
    """
    pending: List[Tuple["Element", "Element"]] = [(a, b)]
    while pending:
        left, right = pending.pop()
        if left is right:
            continue
        if not _same_node(left, right):
            return False
        pending.extend(zip(reversed(left.children), reversed(right.children)))
    return True
