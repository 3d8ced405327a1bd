"""Pull-based XML event stream backed by expat.

``TokenSource`` is an iterator over ``StartElement``, ``EndElement`` and
``CharData`` events. Exhaustion (``StopIteration``) is the end-of-stream
sentinel. Input is fed to expat one chunk at a time and events are handed
out lazily, so a syntax error is only raised once the consumer has pulled
every event that precedes it.

A run of character data is delivered as one event even when it spans chunk
boundaries. Comments, processing instructions and CDATA section boundaries
are not delivered themselves but do end the current run.

Character data before the root element is discarded rather than reported
as a syntax error.
"""

from collections import deque
from typing import Any, Deque, Iterator, List, Optional
from xml.parsers import expat

from svgparser.shared import TokenizationError, TokenizerConfig, get_logger
from svgparser.tokenization.events import (
    CharData,
    EndElement,
    Event,
    StartElement,
    local_name,
)
from svgparser.tokenization.prolog import blank_stray_text

# Raised by expat at end of input when no complete root element was seen:
# empty documents and documents truncated inside an open element.
NO_ELEMENTS_CODE = expat.errors.codes[expat.errors.XML_ERROR_NO_ELEMENTS]


class TokenSource(Iterator[Event]):
    """Iterator of XML events over an already-decoded document."""

    def __init__(
        self,
        text: str,
        config: Optional[TokenizerConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.config = config or TokenizerConfig()
        self.logger = get_logger(__name__, correlation_id, "token_source")

        self._text, discarded = blank_stray_text(text)
        if discarded:
            self.logger.warning(
                "Discarded character data before the root element",
                extra={"discarded_chars": discarded},
            )
        self._offset = 0
        self._events: Deque[Event] = deque()
        self._text_open = False
        self._error: Optional[TokenizationError] = None
        self._finished = False
        self._parser = self._create_parser()

    def _create_parser(self) -> Any:
        parser = expat.ParserCreate()
        parser.buffer_size = self.config.text_buffer_size
        parser.buffer_text = True
        parser.ordered_attributes = True
        parser.StartElementHandler = self._on_start_element
        parser.EndElementHandler = self._on_end_element
        parser.CharacterDataHandler = self._on_character_data
        parser.CommentHandler = self._on_text_boundary
        parser.ProcessingInstructionHandler = self._on_text_boundary
        parser.StartCdataSectionHandler = self._on_text_boundary
        parser.EndCdataSectionHandler = self._on_text_boundary
        return parser

    def _on_start_element(self, name: str, attributes: List[str]) -> None:
        pairs = tuple(
            (local_name(attributes[i]), attributes[i + 1])
            for i in range(0, len(attributes), 2)
        )
        self._text_open = False
        self._events.append(StartElement(local_name(name), pairs))

    def _on_end_element(self, name: str) -> None:
        self._text_open = False
        self._events.append(EndElement(local_name(name)))

    def _on_character_data(self, data: str) -> None:
        if self._text_open and self._events:
            self._events[-1] = CharData(self._events[-1].data + data)
        else:
            self._events.append(CharData(data))
        self._text_open = True

    def _on_text_boundary(self, *args: Any) -> None:
        self._text_open = False

    def __iter__(self) -> "TokenSource":
        return self

    def __next__(self) -> Event:
        while self._needs_input():
            self._feed_next_chunk()
        if self._events:
            return self._events.popleft()
        if self._error is not None:
            raise self._error
        raise StopIteration

    def _needs_input(self) -> bool:
        if self._finished:
            return False
        # The last text run may continue in the next chunk
        return not self._events or (len(self._events) == 1 and self._text_open)

    def _feed_next_chunk(self) -> None:
        chunk = self._text[self._offset:self._offset + self.config.chunk_size]
        self._offset += len(chunk)
        final = self._offset >= len(self._text)

        try:
            self._parser.Parse(chunk, final)
        except expat.ExpatError as e:
            self._finished = True
            self._text_open = False
            if e.code == NO_ELEMENTS_CODE:
                self.logger.debug(
                    "Input ended without a complete root element",
                    extra={"line": e.lineno, "column": e.offset},
                )
                return
            error = TokenizationError(
                str(e), line=e.lineno, column=e.offset, code=e.code
            )
            error.__cause__ = e
            self._error = error
            self.logger.debug(
                "Tokenization failed",
                extra={"line": e.lineno, "column": e.offset, "code": e.code},
            )
            return

        if final:
            self._finished = True
            self._text_open = False
