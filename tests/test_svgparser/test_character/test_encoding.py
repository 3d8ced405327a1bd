"""Tests for charset detection and transcoding."""

import codecs

import pytest

from svgparser.character.encoding import (
    BOMDetector,
    DetectionMethod,
    EncodingDetector,
    XMLDeclarationParser,
    decode_document,
)
from svgparser.shared import CharsetError, EncodingConfig, TokenizationError


class TestBOMDetector:
    """Test BOM detection functionality."""

    @pytest.mark.parametrize(
        "data, encoding, length",
        [
            (b"\xef\xbb\xbf<svg/>", "utf-8", 3),
            (b"\xff\xfe<\x00", "utf-16-le", 2),
            (b"\xfe\xff\x00<", "utf-16-be", 2),
            (b"\xff\xfe\x00\x00<\x00\x00\x00", "utf-32-le", 4),
            (b"\x00\x00\xfe\xff\x00\x00\x00<", "utf-32-be", 4),
        ],
    )
    def test_bom_detection(self, data: bytes, encoding: str, length: int) -> None:
        """Test each supported byte order mark."""
        result = BOMDetector().detect(data)

        assert result is not None
        assert result.encoding == encoding
        assert result.method == DetectionMethod.BOM
        assert result.bom_length == length

    def test_no_bom(self) -> None:
        """Test data without BOM."""
        assert BOMDetector().detect(b"<svg/>") is None
        assert BOMDetector().detect(b"") is None


class TestXMLDeclarationParser:
    """Test XML declaration encoding extraction."""

    def test_double_quoted_declaration(self) -> None:
        """Test encoding declared with double quotes."""
        data = b'<?xml version="1.0" encoding="ISO-8859-1"?><svg/>'

        result = XMLDeclarationParser().parse_declaration(data)

        assert result is not None
        assert result.encoding == "cp1252"
        assert result.declared == "ISO-8859-1"
        assert result.method == DetectionMethod.XML_DECLARATION

    def test_single_quoted_declaration(self) -> None:
        """Test encoding declared with single quotes."""
        data = b"<?xml version='1.0' encoding='windows-1252'?>\n<svg/>"

        result = XMLDeclarationParser().parse_declaration(data)

        assert result is not None
        assert result.encoding == "cp1252"

    def test_leading_whitespace_allowed(self) -> None:
        """Test that whitespace before the declaration is tolerated."""
        data = b'\n  <?xml version="1.0" encoding="utf-8"?><svg/>'

        result = XMLDeclarationParser().parse_declaration(data)

        assert result is not None
        assert result.encoding == "utf-8"

    def test_alias_resolution(self) -> None:
        """Test labels that need an alias to resolve."""
        parser = XMLDeclarationParser()

        assert parser.resolve("UTF8") == "utf-8"
        assert parser.resolve(" x-sjis ") == "cp932"
        assert parser.resolve("unicode-1-1-utf-8") == "utf-8"
        assert parser.resolve("x-euc-jp") == codecs.lookup("euc_jp").name

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("us-ascii", "cp1252"),
            ("ISO-8859-1", "cp1252"),
            ("latin1", "cp1252"),
            ("gbk", "gb18030"),
            ("Shift_JIS", "cp932"),
            ("UTF-16", "utf-16"),
        ],
    )
    def test_whatwg_label_mapping(self, label: str, expected: str) -> None:
        """Test labels that resolve to their web superset encodings."""
        assert XMLDeclarationParser().resolve(label) == expected

    def test_declaration_without_encoding(self) -> None:
        """Test declaration that names no encoding."""
        data = b'<?xml version="1.0"?><svg/>'

        assert XMLDeclarationParser().parse_declaration(data) is None

    def test_declaration_must_open_document(self) -> None:
        """Test that a declaration after content is not considered."""
        data = b'<svg><?xml version="1.0" encoding="bogus"?></svg>'

        assert XMLDeclarationParser().parse_declaration(data) is None

    def test_unknown_encoding_is_fatal(self) -> None:
        """Test that an unrecognised declared charset raises."""
        data = b'<?xml version="1.0" encoding="x-no-such-charset"?><svg/>'

        with pytest.raises(CharsetError, match="Unsupported character set") as info:
            XMLDeclarationParser().parse_declaration(data)

        assert info.value.encoding == "x-no-such-charset"

    def test_empty_encoding_is_fatal(self) -> None:
        """Test that an empty declared charset raises."""
        with pytest.raises(CharsetError, match="Empty encoding declaration"):
            XMLDeclarationParser().parse_declaration(b'<?xml version="1.0" encoding=""?>')


class TestEncodingDetector:
    """Test cascading detection and transcoding."""

    def test_bom_takes_precedence(self) -> None:
        """Test that a BOM wins over a conflicting declaration."""
        data = b'\xef\xbb\xbf<?xml version="1.0" encoding="latin-1"?><svg/>'

        result = EncodingDetector().detect(data)

        assert result.method == DetectionMethod.BOM
        assert result.encoding == "utf-8"

    def test_default_encoding(self) -> None:
        """Test fallback when nothing is declared."""
        result = EncodingDetector().detect(b"<svg/>")

        assert result.method == DetectionMethod.DEFAULT
        assert result.encoding == "utf-8"
        assert result.declared is None

    def test_configured_default_encoding(self) -> None:
        """Test that the configured default is used for undeclared input."""
        detector = EncodingDetector(EncodingConfig(default_encoding="latin-1"))

        text, result = detector.decode(b"<text>caf\xe9</text>")

        assert text == "<text>café</text>"
        assert result.method == DetectionMethod.DEFAULT

    def test_decode_declared_latin1(self) -> None:
        """Test transcoding a Latin-1 document to text."""
        source = '<?xml version="1.0" encoding="ISO-8859-1"?><text>café</text>'

        text, result = decode_document(source.encode("latin-1"))

        assert text == source
        assert result.declared == "ISO-8859-1"

    def test_decode_strips_bom(self) -> None:
        """Test that the BOM is not part of the decoded text."""
        data = b"\xff\xfe" + "<svg/>".encode("utf-16-le")

        text, result = decode_document(data)

        assert text == "<svg/>"
        assert result.encoding == "utf-16-le"

    def test_invalid_bytes_raise_tokenization_error(self) -> None:
        """Test that undecodable input is reported as a tokenization error."""
        with pytest.raises(TokenizationError, match="Invalid utf-8 data at byte 5"):
            decode_document(b"<svg>\xff</svg>")

    def test_empty_input(self) -> None:
        """Test decoding empty input."""
        text, result = decode_document(b"")

        assert text == ""
        assert result.method == DetectionMethod.DEFAULT
