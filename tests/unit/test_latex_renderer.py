#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the LaTeX renderer."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from resumark.ast import Bold, BulletList, Doc, Italic, Link, ListItem, OrderedList, Paragraph, Text, Underline
from resumark.exceptions import InvalidOptionsError
from resumark.options import HtmlRendererOptions, LatexRendererOptions
from resumark.renderers import LatexRenderer, cventry_argument

UNDERLINE = {"typography": {"links": {"underline": True}}}


def render(node, context=None, **options) -> str:
    return LatexRenderer(LatexRendererOptions(**options)).generate(node, context)


def item(*texts: str) -> ListItem:
    return ListItem(children=[Paragraph(children=[Text(t) for t in texts])])


@pytest.mark.unit
class TestLatexBlocks:
    """Test paragraph and list spacing."""

    def test_empty_doc(self) -> None:
        assert render(Doc()) == ""

    def test_paragraph_ends_with_blank_line(self) -> None:
        assert render(Paragraph(children=[Text("Hello")])) == "Hello\n\n"

    def test_empty_paragraph_single_newline(self) -> None:
        assert render(Paragraph()) == "\n"
        assert render(Paragraph(children=None)) == "\n"

    def test_two_paragraphs(self) -> None:
        doc = Doc(children=[Paragraph(children=[Text("Hello, ")]), Paragraph(children=[Text("world!")])])
        assert render(doc) == "Hello, \n\nworld!\n\n"

    def test_empty_bullet_list(self) -> None:
        assert render(BulletList(children=[])) == "\\begin{itemize}\n\\end{itemize}\n"

    def test_bullet_list(self) -> None:
        bullet = BulletList(children=[item("Hello, "), item("world!")])
        assert render(bullet) == "\\begin{itemize}\n\\item Hello, \n\\item world!\n\\end{itemize}\n"

    def test_ordered_list(self) -> None:
        ordered = OrderedList(children=[item("one")])
        assert render(ordered) == "\\begin{enumerate}\n\\item one\n\\end{enumerate}\n"

    def test_list_item_with_empty_paragraph(self) -> None:
        assert render(ListItem(children=[Paragraph()])) == "\\item \n"

    def test_list_item_joins_texts(self) -> None:
        assert render(item("Hello, ", "world!")) == "\\item Hello, world!\n"

    def test_list_item_collapses_only_first_blank_line(self) -> None:
        two = ListItem(children=[Paragraph(children=[Text("a")]), Paragraph(children=[Text("b")])])
        assert render(two) == "\\item a\nb\n\n"
        three = ListItem(children=[Paragraph(children=[Text(t)]) for t in "abc"])
        assert render(three) == "\\item a\nb\n\nc\n\n"

    def test_nested_list(self) -> None:
        inner = BulletList(children=[item("inner")])
        outer = BulletList(children=[ListItem(children=[Paragraph(children=[Text("outer")]), inner])])
        assert render(outer) == (
            "\\begin{itemize}\n\\item outer\n\\begin{itemize}\n\\item inner\n\\end{itemize}\n\\end{itemize}\n"
        )


@pytest.mark.unit
class TestLatexText:
    """Test escaping and marks."""

    def test_special_characters_escaped(self) -> None:
        assert render(Text("& % $ # _ { } ~ ^ \\")) == (
            "\\& \\% \\$ \\# \\_ \\{ \\} \\textasciitilde{} \\textasciicircum{} \\textbackslash{}"
        )

    def test_escaping_disabled(self) -> None:
        assert render(Text("$x^2$"), escape_special=False) == "$x^2$"

    def test_marks(self) -> None:
        assert render(Text("b", marks=[Bold()])) == "\\textbf{b}"
        assert render(Text("i", marks=[Italic()])) == "\\textit{i}"
        assert render(Text("u", marks=[Underline()])) == "\\underline{u}"

    def test_first_mark_is_innermost(self) -> None:
        assert render(Text("x", marks=[Bold(), Italic()])) == "\\textit{\\textbf{x}}"

    def test_escape_before_marks(self) -> None:
        assert render(Text("50%", marks=[Bold()])) == "\\textbf{50\\%}"


@pytest.mark.unit
class TestLatexLinks:
    """Test hyperlink rendering."""

    def test_link(self) -> None:
        assert render(Text("site", marks=[Link(href="https://x.test")])) == "\\href{https://x.test}{site}"

    def test_link_underline_context(self) -> None:
        leaf = Text("site", marks=[Link(href="https://x.test")])
        assert render(leaf, UNDERLINE) == "\\href{https://x.test}{\\underline{site}}"

    def test_shared_renderer_keeps_contexts_apart(self) -> None:
        renderer = LatexRenderer()
        doc = Paragraph(children=[Text("s", marks=[Link(href="/a")]) for _ in range(500)])

        def run(context) -> bool:
            expected = 500 if context else 0
            return all(renderer.generate(doc, context).count("\\underline") == expected for _ in range(10))

        with ThreadPoolExecutor(max_workers=2) as pool:
            assert all(pool.map(run, [UNDERLINE, None] * 4))

    def test_link_url_escaped_by_default(self) -> None:
        leaf = Text("x", marks=[Link(href="https://x.test/a%20b#top")])
        assert render(leaf) == "\\href{https://x.test/a\\%20b\\#top}{x}"

    def test_raw_link_url(self) -> None:
        leaf = Text("x", marks=[Link(href="https://x.test/a%20b#top")])
        assert render(leaf, escape_link_urls=False) == "\\href{https://x.test/a%20b#top}{x}"

    def test_missing_href(self) -> None:
        assert render(Text("x", marks=[Link()])) == "\\href{}{x}"

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            LatexRenderer(HtmlRendererOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestCventryArgument:
    """Test preparation of fragments for moderncv arguments."""

    @pytest.mark.parametrize(
        "content,expected",
        [
            ("", ""),
            ("\n", ""),
            ("a\n\nb", "a\n%\nb"),
            ("a\n\n\nb", "a\n%\n%\nb"),
            ("a\n\t\t\n\nb", "a\n%\n%\nb"),
            ("Hello, \n\nworld!\n\n", "Hello, \n%\nworld!"),
        ],
    )
    def test_blank_lines_commented_out(self, content, expected) -> None:
        assert cventry_argument(content) == expected
