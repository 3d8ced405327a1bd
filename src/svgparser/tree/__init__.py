"""Element tree model, decoder, comparator and query engine.

Key Components:
    Element: Parsed SVG element with attributes, content and children
    ElementDecoder: Builds an Element tree from an XML event stream
    compare: Deep structural equality between two trees
    find_by_id / find_all / find_by_content: Descendant searches
"""

from .builder import ElementDecoder
from .compare import compare
from .element import Element
from .query import (
    find_all,
    find_by_content,
    find_by_id,
    iter_descendants,
    iter_subtree,
)

__all__ = [
    "Element",
    "ElementDecoder",
    "compare",
    "find_all",
    "find_by_content",
    "find_by_id",
    "iter_descendants",
    "iter_subtree",
]
