"""Test module for svgparser package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import svgparser

    # Assert
    assert svgparser is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    import svgparser

    assert isinstance(svgparser.__version__, str)
    assert svgparser.__version__ == "0.1.0"


def test_package_exports_public_api() -> None:
    """Test that the top-level package exposes the parsing API."""
    import svgparser

    for name in (
        "parse",
        "parse_string",
        "parse_file",
        "SVGParser",
        "Element",
        "compare",
        "find_by_id",
        "find_all",
        "find_by_content",
        "serialize",
        "tostring",
    ):
        assert name in svgparser.__all__
        assert hasattr(svgparser, name)
