"""Bidirectional conversion between svgparser trees and lxml.etree.

``from_lxml`` applies the same rules as the decoder: local names only,
namespace declarations made on a node become attributes (``xmlns`` for the
default namespace, the prefix otherwise) and ``content`` is the last
non-blank text run directly inside the node. Comments and processing
instructions are skipped, but the text that follows them still counts.

``to_lxml`` writes ``content`` as the element's leading text. A default
namespace declaration (the ``xmlns`` attribute) has no attribute form in
lxml and is not carried over.
"""

from typing import Any, Dict, Iterator, Optional

from lxml import etree

from svgparser.shared import ConversionError, get_logger
from svgparser.tree import Element

DEFAULT_NAMESPACE_ATTRIBUTE = "xmlns"


class LxmlAdapter:
    """Adapter for bidirectional conversion with lxml.etree."""

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "lxml_adapter")

    def to_lxml(self, element: Element) -> Any:
        """Convert an Element tree to an ``lxml.etree._Element``.

        Raises:
            ConversionError: If a name cannot be used as an lxml tag or
                attribute
        """
        if not element.name:
            raise ConversionError("Cannot convert an element with no name")

        attributes = {
            key: value
            for key, value in element.attributes.items()
            if key != DEFAULT_NAMESPACE_ATTRIBUTE
        }
        try:
            node = etree.Element(element.name, attributes)
        except ValueError as e:
            raise ConversionError(
                f"Failed to convert <{element.name}> to lxml: {e}"
            ) from e

        if element.content:
            node.text = element.content

        for child in element.children:
            if child is not None:
                node.append(self.to_lxml(child))

        return node

    def from_lxml(self, node: Any) -> Element:
        """Convert an lxml element or element tree to an Element tree.

        Raises:
            ConversionError: If ``node`` is not an lxml element
        """
        if hasattr(node, "getroot"):
            node = node.getroot()
        if not isinstance(node, etree._Element) or not isinstance(node.tag, str):
            raise ConversionError(
                f"Expected an lxml element, got {type(node).__name__}"
            )

        root = self._convert_node(node, None)
        self.logger.debug("Converted lxml tree", extra={"root": root.name})
        return root

    def _convert_node(self, node: Any, parent: Optional[Element]) -> Element:
        element = Element(
            name=etree.QName(node).localname,
            attributes=self._attributes_of(node),
            parent=parent,
            content=_last_non_blank(_text_runs(node)),
        )
        for child in node:
            if isinstance(child.tag, str):
                element.children.append(self._convert_node(child, element))
        return element

    def _attributes_of(self, node: Any) -> Dict[str, str]:
        attributes: Dict[str, str] = {}

        inherited = node.getparent().nsmap if node.getparent() is not None else {}
        for prefix, uri in node.nsmap.items():
            if inherited.get(prefix) != uri:
                attributes[prefix or DEFAULT_NAMESPACE_ATTRIBUTE] = uri

        for key, value in node.attrib.items():
            attributes[etree.QName(key).localname] = value
        return attributes


def _text_runs(node: Any) -> Iterator[Optional[str]]:
    yield node.text
    for child in node:
        yield child.tail


def _last_non_blank(runs: Iterator[Optional[str]]) -> str:
    content = ""
    for run in runs:
        if run and run.strip():
            content = run
    return content
