#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for document nodes, marks and visitors."""

import dataclasses

import pytest

from resumark.ast import (
    MARK_CLASSES,
    NODE_CLASSES,
    Bold,
    BulletList,
    Doc,
    Italic,
    Link,
    ListItem,
    NodeVisitor,
    OrderedList,
    Paragraph,
    Text,
    Underline,
    ValidationVisitor,
    get_node_children,
)
from resumark.exceptions import ValidationError


@pytest.mark.unit
class TestNodeConstruction:
    """Test node construction and normalization."""

    def test_absent_and_empty_children_are_equal(self) -> None:
        assert Paragraph() == Paragraph(children=[]) == Paragraph(children=None)

    def test_children_stored_as_tuple(self) -> None:
        para = Paragraph(children=[Text("a")])
        assert para.children == (Text("a"),)

    def test_absent_and_empty_marks_are_equal(self) -> None:
        assert Text("a") == Text("a", marks=[]) == Text("a", marks=None)

    def test_marks_keep_order(self) -> None:
        text = Text("a", marks=[Italic(), Bold()])
        assert text.marks == (Italic(), Bold())
        assert text != Text("a", marks=[Bold(), Italic()])

    def test_nodes_are_frozen(self) -> None:
        text = Text("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            text.content = "b"  # type: ignore[misc]

    def test_ordered_list_default_start(self) -> None:
        assert OrderedList().start == 1

    def test_link_defaults(self) -> None:
        link = Link()
        assert link.href is None
        assert link.target is None
        assert link.class_ is None

    def test_registries_cover_all_variants(self) -> None:
        assert set(NODE_CLASSES) == {"doc", "paragraph", "bulletList", "orderedList", "listItem", "text"}
        assert set(MARK_CLASSES) == {"bold", "italic", "underline", "link"}

    def test_get_node_children(self) -> None:
        item = ListItem(children=[Paragraph()])
        assert get_node_children(item) == (Paragraph(),)
        assert get_node_children(Text("leaf")) == ()


@pytest.mark.unit
class TestVisitorDispatch:
    """Test visitor dispatch."""

    def test_incomplete_visitor_cannot_be_instantiated(self) -> None:
        class MissingText(NodeVisitor):
            def visit_doc(self, node):
                return None

            def visit_paragraph(self, node):
                return None

            def visit_bullet_list(self, node):
                return None

            def visit_ordered_list(self, node):
                return None

            def visit_list_item(self, node):
                return None

        with pytest.raises(TypeError):
            MissingText()  # type: ignore[abstract]

    def test_accept_calls_matching_method(self) -> None:
        class Names(NodeVisitor):
            def visit_doc(self, node):
                return "doc"

            def visit_paragraph(self, node):
                return "paragraph"

            def visit_bullet_list(self, node):
                return "bullet"

            def visit_ordered_list(self, node):
                return "ordered"

            def visit_list_item(self, node):
                return "item"

            def visit_text(self, node):
                return "text"

        visitor = Names()
        assert Doc().accept(visitor) == "doc"
        assert Paragraph().accept(visitor) == "paragraph"
        assert BulletList().accept(visitor) == "bullet"
        assert OrderedList().accept(visitor) == "ordered"
        assert ListItem().accept(visitor) == "item"
        assert Text("x").accept(visitor) == "text"


@pytest.mark.unit
class TestValidationVisitor:
    """Test structural validation."""

    def test_valid_tree_passes(self, sample_doc) -> None:
        sample_doc.accept(ValidationVisitor())

    def test_text_directly_in_doc_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Doc children must be block nodes"):
            Doc(children=[Text("loose")]).accept(ValidationVisitor())

    def test_list_children_must_be_items(self) -> None:
        with pytest.raises(ValidationError, match="list items"):
            BulletList(children=[Paragraph()]).accept(ValidationVisitor())

    def test_paragraph_children_must_be_text(self) -> None:
        with pytest.raises(ValidationError, match="text nodes"):
            Paragraph(children=[BulletList()]).accept(ValidationVisitor())

    def test_non_strict_collects_errors(self) -> None:
        validator = ValidationVisitor(strict=False)
        Doc(children=[Text("a"), BulletList(children=[Text("b")])]).accept(validator)
        assert validator.errors == [
            "Doc children must be block nodes, got Text",
            "BulletList children must be list items, got Text",
        ]

    def test_underline_is_a_valid_mark(self) -> None:
        Paragraph(children=[Text("u", marks=[Underline()])]).accept(ValidationVisitor())
