#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the HTML renderer."""

import io
from concurrent.futures import ThreadPoolExecutor

import pytest

from resumark.ast import Bold, BulletList, Doc, Italic, Link, ListItem, OrderedList, Paragraph, Text, Underline
from resumark.context import GenerationContext, LinkTypography, Typography
from resumark.exceptions import InvalidOptionsError, RenderingError
from resumark.options import HtmlRendererOptions, LatexRendererOptions
from resumark.renderers import HtmlRenderer

UNDERLINE = {"typography": {"links": {"underline": True}}}


def render(node, context=None, **options) -> str:
    return HtmlRenderer(HtmlRendererOptions(**options)).generate(node, context)


@pytest.mark.unit
class TestHtmlBlocks:
    """Test block-level output."""

    def test_empty_doc(self) -> None:
        assert render(Doc()) == ""

    def test_empty_paragraph(self) -> None:
        assert render(Paragraph()) == "<p></p>"
        assert render(Paragraph(children=None)) == render(Paragraph(children=[]))

    def test_paragraphs_joined_without_separator(self) -> None:
        doc = Doc(children=[Paragraph(children=[Text("a")]), Paragraph(children=[Text("b")])])
        assert render(doc) == "<p>a</p><p>b</p>"

    def test_lists(self) -> None:
        item = ListItem(children=[Paragraph(children=[Text("x")])])
        assert render(BulletList(children=[item])) == "<ul><li><p>x</p></li></ul>"
        assert render(OrderedList(children=[item], start=3)) == "<ol><li><p>x</p></li></ol>"

    def test_sample_doc(self, sample_doc) -> None:
        assert render(sample_doc) == (
            '<p>Built <strong>search</strong> at <a href="https://acme.test" target="_blank">Acme</a></p>'
            "<ul><li><p>Python</p></li><li><p><em>Rust</em></p></li></ul>"
            "<ol><li><p>first</p></li></ol>"
        )


@pytest.mark.unit
class TestHtmlText:
    """Test text escaping and marks."""

    def test_escaping(self) -> None:
        assert render(Text("<a>")) == "&lt;a&gt;"
        assert render(Text("R&D \"x\" 'y'")) == "R&amp;D &quot;x&quot; &#x27;y&#x27;"

    def test_escaping_disabled(self) -> None:
        assert render(Text("<b>"), escape_html=False) == "<b>"

    def test_simple_marks(self) -> None:
        assert render(Text("b", marks=[Bold()])) == "<strong>b</strong>"
        assert render(Text("i", marks=[Italic()])) == "<em>i</em>"
        assert render(Text("u", marks=[Underline()])) == "<u>u</u>"

    def test_first_mark_is_innermost(self) -> None:
        assert render(Text("x", marks=[Bold(), Italic()])) == "<em><strong>x</strong></em>"
        assert render(Text("x", marks=[Italic(), Bold()])) == "<strong><em>x</em></strong>"

    def test_bold_roundtrip_sentence(self) -> None:
        para = Paragraph(children=[Text("This is "), Text("bold", marks=[Bold()]), Text(" text")])
        assert render(Doc(children=[para])) == "<p>This is <strong>bold</strong> text</p>"


@pytest.mark.unit
class TestHtmlLinks:
    """Test link rendering."""

    def test_missing_href_uses_placeholder(self) -> None:
        assert render(Text("x", marks=[Link()])) == '<a href="#">x</a>'
        assert render(Text("x", marks=[Link(href="")])) == '<a href="#">x</a>'

    def test_custom_placeholder(self) -> None:
        assert render(Text("x", marks=[Link()]), default_href="about:blank") == '<a href="about:blank">x</a>'

    def test_all_attributes(self) -> None:
        mark = Link(href="https://x.test/?a=1&b=2", target="_blank", class_="ext")
        assert render(Text("x", marks=[mark])) == (
            '<a href="https://x.test/?a=1&amp;b=2" target="_blank" class="ext">x</a>'
        )

    def test_attribute_values_escaped(self) -> None:
        mark = Link(href='"><script>', class_='a"b')
        assert render(Text("x", marks=[mark])) == '<a href="&quot;&gt;&lt;script&gt;" class="a&quot;b">x</a>'

    def test_underline_context_drops_target(self) -> None:
        mark = Link(href="/a", target="_blank", class_="c")
        assert render(Text("x", marks=[mark]), UNDERLINE) == '<a href="/a" class="c">x</a>'

    def test_context_dataclass(self) -> None:
        context = GenerationContext(typography=Typography(links=LinkTypography(underline=True)))
        assert render(Text("x", marks=[Link(href="/a", target="_blank")]), context) == '<a href="/a">x</a>'

    def test_context_without_underline_keeps_target(self) -> None:
        mark = Link(href="/a", target="_blank")
        assert render(Text("x", marks=[mark]), {"typography": {}}) == '<a href="/a" target="_blank">x</a>'

    def test_context_not_sticky_between_calls(self) -> None:
        renderer = HtmlRenderer()
        leaf = Text("x", marks=[Link(href="/a", target="_t")])
        renderer.generate(leaf, UNDERLINE)
        assert renderer.generate(leaf) == '<a href="/a" target="_t">x</a>'

    def test_shared_renderer_across_threads(self) -> None:
        renderer = HtmlRenderer()
        doc = Paragraph(children=[Text(str(i), marks=[Link(href="/a", target="_t")]) for i in range(2000)])

        def run(context) -> bool:
            outputs = [renderer.generate(doc, context) for _ in range(20)]
            expected = 0 if context else 2000
            return all(html.count("target=") == expected for html in outputs)

        with ThreadPoolExecutor(max_workers=2) as pool:
            results = list(pool.map(run, [UNDERLINE, None] * 4))
        assert all(results)


@pytest.mark.unit
class TestHtmlRendererApi:
    """Test renderer entry points."""

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(LatexRendererOptions())  # type: ignore[arg-type]

    def test_render_to_stream(self, sample_doc) -> None:
        buffer = io.StringIO()
        HtmlRenderer().render(sample_doc, buffer)
        assert buffer.getvalue() == HtmlRenderer().render_to_string(sample_doc)

    def test_render_to_path(self, sample_doc, tmp_path) -> None:
        target = tmp_path / "out.html"
        HtmlRenderer().render(sample_doc, target)
        assert target.read_text(encoding="utf-8").startswith("<p>Built")

    def test_render_to_missing_directory(self, sample_doc, tmp_path) -> None:
        with pytest.raises(RenderingError) as exc_info:
            HtmlRenderer().render(sample_doc, tmp_path / "missing" / "out.html")
        assert exc_info.value.output_path is not None
