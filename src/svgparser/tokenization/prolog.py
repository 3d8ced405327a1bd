"""Clean-up of the document prolog before tokenization.

Character data that appears before the root element is discarded by the
decoder, but expat refuses such a document outright. ``blank_stray_text``
replaces that text with spaces before expat sees it. Line breaks and tabs
are kept so line and column numbers in later errors stay unchanged.
"""

import re
from typing import List, Optional, Tuple

XML_DECLARATION = re.compile(r"<\?xml[\s?]")

XML_SPACE = " \t\r\n"

# Characters kept as-is when a stray run is blanked
_LAYOUT = frozenset("\t\n\r")


def _blank(text: str) -> str:
    return "".join(ch if ch in _LAYOUT else " " for ch in text)


def _doctype_end(text: str, start: int) -> int:
    # Internal subsets may contain '>' inside brackets or quoted literals
    depth = 0
    position = start + 2
    length = len(text)
    while position < length:
        ch = text[position]
        if ch in "\"'":
            close = text.find(ch, position + 1)
            if close == -1:
                return length
            position = close
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == ">" and depth <= 0:
            return position + 1
        position += 1
    return length


def _markup_end(text: str, start: int) -> Optional[Tuple[int, bool]]:
    """Return ``(end, keep)`` for prolog markup at ``start``, or None.

    None means the markup is a start tag or something only expat can judge.
    Unterminated markup extends to the end of the text.
    """
    if text.startswith("<?", start):
        close = text.find("?>", start + 2)
        return (len(text) if close == -1 else close + 2), True
    if text.startswith("<!--", start):
        close = text.find("-->", start + 4)
        return (len(text) if close == -1 else close + 3), True
    if text.startswith("<![CDATA[", start):
        close = text.find("]]>", start + 9)
        return (len(text) if close == -1 else close + 3), False
    if text.startswith("<!", start):
        return _doctype_end(text, start), True
    return None


def blank_stray_text(text: str) -> Tuple[str, int]:
    """Blank out character data that precedes the root element.

    Comments, processing instructions and the doctype are kept. An XML
    declaration is kept only at the very start of the text, the one place
    expat accepts it. CDATA sections before the root are stray text too.

    Returns:
        Tuple of the prepared text and the number of non-whitespace
        characters discarded. The text is returned unchanged, as the same
        object, when nothing had to be blanked.
    """
    pieces: List[str] = []
    discarded = 0
    changed = False
    position = 0
    length = len(text)

    while position < length:
        open_bracket = text.find("<", position)
        if open_bracket == -1:
            open_bracket = length

        stray = text[position:open_bracket]
        if stray.strip(XML_SPACE):
            discarded += sum(ch not in XML_SPACE for ch in stray)
            stray = _blank(stray)
            changed = True
        pieces.append(stray)
        if open_bracket == length:
            break

        markup = _markup_end(text, open_bracket)
        if markup is None:
            pieces.append(text[open_bracket:])
            break

        end, keep = markup
        chunk = text[open_bracket:end]
        if not keep:
            discarded += len(chunk)
        if not keep or (open_bracket > 0 and XML_DECLARATION.match(chunk)):
            chunk = _blank(chunk)
            changed = True
        pieces.append(chunk)
        position = end

    if not changed:
        return text, 0
    return "".join(pieces), discarded
