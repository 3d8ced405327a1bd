"""Tests for the Element tree model."""

import pytest

from svgparser.tree import Element


class TestElement:
    """Test Element construction and navigation helpers."""

    def test_default_element_is_empty(self) -> None:
        """Test the zero-value element."""
        element = Element()

        assert element.name == ""
        assert element.attributes == {}
        assert element.children == []
        assert element.parent is None
        assert element.content == ""
        assert element.is_empty

    def test_none_attributes_become_empty_mapping(self) -> None:
        """Test that attributes are never None."""
        element = Element(name="rect", attributes=None)  # type: ignore[arg-type]

        assert element.attributes == {}
        assert not element.is_empty

    def test_children_get_parent_on_construction(self) -> None:
        """Test that constructor children point back at their parent."""
        child1 = Element(name="rect")
        child2 = Element(name="circle")

        parent = Element(name="svg", children=[child1, child2])

        assert child1.parent is parent
        assert child2.parent is parent

    def test_add_child_establishes_parent_relationship(self) -> None:
        """Test adding child element establishes parent-child relationship."""
        parent = Element(name="g")
        child = Element(name="path")

        parent.add_child(child)

        assert parent.children == [child]
        assert child.parent is parent

    def test_add_child_with_invalid_type_raises_error(self) -> None:
        """Test adding non-Element raises TypeError."""
        with pytest.raises(TypeError, match="Child must be an Element instance"):
            Element(name="g").add_child("rect")  # type: ignore[arg-type]

    def test_get_attribute(self) -> None:
        """Test attribute lookup with default."""
        element = Element(name="rect", attributes={"width": "10"})

        assert element.get_attribute("width") == "10"
        assert element.get_attribute("height") is None
        assert element.get_attribute("height", "0") == "0"

    def test_iter_is_document_order(self) -> None:
        """Test pre-order iteration including the element itself."""
        leaf = Element(name="tspan")
        text = Element(name="text", children=[leaf])
        rect = Element(name="rect")
        root = Element(name="svg", children=[text, rect])

        assert [e.name for e in root.iter()] == ["svg", "text", "tspan", "rect"]

    def test_get_depth(self) -> None:
        """Test depth computed from parent links."""
        leaf = Element(name="tspan")
        root = Element(name="svg", children=[Element(name="text", children=[leaf])])

        assert root.get_depth() == 0
        assert leaf.get_depth() == 2

    def test_equality_is_identity(self) -> None:
        """Test that == is identity; structural equality is compare()."""
        a = Element(name="rect")
        b = Element(name="rect")

        assert a != b
        assert a.compare(b)

    def test_repr_omits_parent(self) -> None:
        """Test that repr does not recurse through the parent link."""
        child = Element(name="rect")
        Element(name="svg", children=[child])

        assert "parent" not in repr(child)

    def test_to_dict(self) -> None:
        """Test dictionary representation."""
        root = Element(
            name="g",
            attributes={"id": "layer"},
            children=[Element(name="text", content="Hi")],
        )

        assert root.to_dict() == {
            "name": "g",
            "attributes": {"id": "layer"},
            "children": [{"name": "text", "attributes": {}, "content": "Hi"}],
        }

    def test_query_methods_delegate(self) -> None:
        """Test method forms of the query functions."""
        circle = Element(name="circle", attributes={"id": "c1"}, content="Dot")
        root = Element(name="svg", children=[circle])

        assert root.find_by_id("c1") is circle
        assert root.find_all("circle") == [circle]
        assert root.find_by_content("dot") == [circle]
