"""XML output for element trees.

Elements are emitted as a stream of start-tag, character-data and end-tag
events through ``xml.sax.saxutils.XMLGenerator``. Output is UTF-8 without an
XML declaration; empty elements are written as ``<name></name>``. Nothing is
rolled back on failure: bytes already handed to the output stay written.
"""

import io
from typing import BinaryIO, Dict, List, Optional, Tuple
from xml.sax.saxutils import XMLGenerator, escape

from svgparser.shared import SerializationError, SerializerConfig, get_logger
from svgparser.tree import Element

OUTPUT_ENCODING = "utf-8"

# Expat turns a raw carriage return into a line feed on reparse
TEXT_ENTITIES = {"\r": "&#13;"}

logger = get_logger(__name__, component="serializer")


class _TextEscapingGenerator(XMLGenerator):
    """XMLGenerator that also writes carriage returns in text as references."""

    def characters(self, content: str) -> None:
        self.ignorableWhitespace(escape(content, TEXT_ENTITIES))


def _attributes_for(element: Element, config: SerializerConfig) -> Dict[str, str]:
    if config.sort_attributes:
        return dict(sorted(element.attributes.items()))
    return element.attributes


def serialize(
    element: Element,
    out: BinaryIO,
    config: Optional[SerializerConfig] = None,
) -> None:
    """Write ``element`` and its subtree to the binary stream ``out``.

    ``out`` is flushed once the whole tree has been written.

    Raises:
        SerializationError: If an element in the tree has no name
        OSError: Whatever ``out.write`` raises, unchanged
    """
    config = config or SerializerConfig()
    generator = _TextEscapingGenerator(
        out, encoding=OUTPUT_ENCODING, short_empty_elements=False
    )

    # (element, closing) pairs; a closing entry emits the end tag
    pending: List[Tuple[Element, bool]] = [(element, False)]
    while pending:
        node, closing = pending.pop()
        if closing:
            generator.endElement(node.name)
            continue

        if not node.name:
            raise SerializationError("Cannot serialize an element with no name")

        generator.startElement(node.name, _attributes_for(node, config))
        if node.content:
            generator.characters(node.content)

        pending.append((node, True))
        pending.extend(
            (child, False) for child in reversed(node.children) if child is not None
        )

    generator.endDocument()
    # XMLGenerator only flushes its own text layer
    flush = getattr(out, "flush", None)
    if flush is not None:
        flush()
    logger.debug("Element tree serialized", extra={"root": element.name})


def tostring(element: Element, config: Optional[SerializerConfig] = None) -> bytes:
    """Serialize ``element`` and return the XML as bytes."""
    buffer = io.BytesIO()
    serialize(element, buffer, config)
    return buffer.getvalue()
