"""Decoder that turns an XML event stream into an element tree.

The decoder walks events forward exactly once. It keeps an explicit stack of
open elements instead of recursing, so nesting depth is limited by memory
rather than by the interpreter's recursion limit; events are consumed in the
same order a recursive descent would consume them.
"""

from typing import Iterable, Iterator, List, Optional

from svgparser.shared import get_logger
from svgparser.tokenization import CharData, EndElement, Event, StartElement
from svgparser.tree.element import Element


class ElementDecoder:
    """Builds an ``Element`` tree from XML events.

    Events may come from a ``TokenSource`` or from any iterable, which makes
    the decoder easy to drive from hand-made event lists.
    """

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize element decoder.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "element_decoder")
        self.elements_created = 0

    def build(self, events: Iterable[Event]) -> Element:
        """Decode the first root element and its whole subtree.

        Returns an empty ``Element`` when the stream ends before any start
        tag. Errors raised while pulling events propagate unchanged.
        """
        self.elements_created = 0
        stream = iter(events)
        root = self.decode_first(stream)
        self.decode(root, stream)

        self.logger.debug(
            "Element tree decoded",
            extra={"root": root.name, "element_count": self.elements_created}
        )
        return root

    def decode_first(self, stream: Iterator[Event]) -> Element:
        """Skip ahead to the first start tag and create the root from it."""
        for event in stream:
            if isinstance(event, StartElement):
                return self._new_element(event, None)
        return Element()

    def decode(self, element: Element, stream: Iterator[Event]) -> None:
        """Decode the children and content of ``element`` from ``stream``.

        Returns when the end tag matching ``element`` is consumed or when the
        stream runs out. End tags that do not match the innermost open
        element are ignored.
        """
        open_elements: List[Element] = [element]

        for event in stream:
            current = open_elements[-1]

            if isinstance(event, StartElement):
                open_elements.append(self._new_element(event, current))

            elif isinstance(event, CharData):
                if event.data.strip():
                    current.content = event.data

            elif isinstance(event, EndElement):
                if event.name != current.name:
                    continue
                open_elements.pop()
                if not open_elements:
                    return
                open_elements[-1].children.append(current)

        # Truncated input: attach whatever is still open, innermost first
        while len(open_elements) > 1:
            child = open_elements.pop()
            open_elements[-1].children.append(child)

    def _new_element(self, event: StartElement, parent: Optional[Element]) -> Element:
        self.elements_created += 1
        return Element(
            name=event.name,
            attributes=dict(event.attributes),
            parent=parent,
        )
