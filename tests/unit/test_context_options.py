#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the generation context and option classes."""

import dataclasses

import pytest

from resumark.context import GenerationContext
from resumark.exceptions import ValidationError
from resumark.options import HtmlRendererOptions, LatexRendererOptions, MarkdownParserOptions, TreeRendererOptions


@pytest.mark.unit
class TestGenerationContext:
    """Test context coercion."""

    def test_default(self) -> None:
        assert GenerationContext().link_underline is False
        assert GenerationContext.coerce(None) == GenerationContext()

    def test_from_nested_mapping(self) -> None:
        context = GenerationContext.coerce({"typography": {"links": {"underline": True}}})
        assert context.link_underline is True

    @pytest.mark.parametrize("data", [{}, {"typography": None}, {"typography": {}}, {"typography": {"links": {}}}])
    def test_missing_levels_default(self, data) -> None:
        assert GenerationContext.from_dict(data) == GenerationContext()

    def test_instance_passed_through(self) -> None:
        context = GenerationContext()
        assert GenerationContext.coerce(context) is context

    def test_bad_section_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GenerationContext.from_dict({"typography": "bold"})

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, []])
    def test_non_boolean_underline_rejected(self, value) -> None:
        with pytest.raises(ValidationError) as exc_info:
            GenerationContext.from_dict({"typography": {"links": {"underline": value}}})
        assert exc_info.value.parameter_name == "underline"

    def test_null_underline_defaults(self) -> None:
        context = GenerationContext.from_dict({"typography": {"links": {"underline": None}}})
        assert context == GenerationContext()

    def test_bad_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GenerationContext.coerce(42)  # type: ignore[arg-type]


@pytest.mark.unit
class TestOptions:
    """Test frozen option dataclasses."""

    def test_defaults(self) -> None:
        assert HtmlRendererOptions().escape_html is True
        assert HtmlRendererOptions().default_href == "#"
        assert LatexRendererOptions().escape_link_urls is True
        assert MarkdownParserOptions().link_target is None

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            HtmlRendererOptions().escape_html = False  # type: ignore[misc]

    def test_create_updated(self) -> None:
        original = LatexRendererOptions()
        updated = original.create_updated(escape_link_urls=False)
        assert updated.escape_link_urls is False
        assert original.escape_link_urls is True

    def test_from_mapping_ignores_unknown_keys(self) -> None:
        options = MarkdownParserOptions.from_mapping({"link-target": "_blank", "bogus": 1})
        assert options == MarkdownParserOptions(link_target="_blank")

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValueError):
            TreeRendererOptions(indent=-1)
