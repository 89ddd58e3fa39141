#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/renderers/html.py
"""HTML rendering from document trees.

Output is an HTML fragment with no document wrapper: paragraphs become
``<p>``, lists ``<ul>``/``<ol>`` with ``<li>`` items, and the marks of a
text leaf wrap its escaped content one after another, so the first mark
ends up innermost.

"""

from __future__ import annotations

import logging
from typing import Iterable

from resumark.ast import (
    Bold,
    BulletList,
    Doc,
    Italic,
    Link,
    ListItem,
    MarkVisitor,
    Node,
    NodeVisitor,
    OrderedList,
    Paragraph,
    Text,
    Underline,
)
from resumark.context import GenerationContext
from resumark.options.html import HtmlRendererOptions
from resumark.renderers.base import BaseRenderer, ContextLike
from resumark.utils.escape import escape_html

logger = logging.getLogger(__name__)


class HtmlRenderer(BaseRenderer):
    """Render document trees to HTML fragments.

    Each :meth:`generate` call walks the tree with its own writer, so one
    renderer can serve concurrent callers with different contexts.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from resumark.ast import Bold, Paragraph, Text
        >>> para = Paragraph(children=[Text("This is "), Text("bold", marks=[Bold()]), Text(" text")])
        >>> HtmlRenderer().generate(para)
        '<p>This is <strong>bold</strong> text</p>'

    Links drop their ``target`` when the document underlines links:

        >>> from resumark.ast import Link
        >>> leaf = Text("site", marks=[Link(href="https://x.test", target="_blank")])
        >>> HtmlRenderer().generate(leaf, {"typography": {"links": {"underline": True}}})
        '<a href="https://x.test">site</a>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        super().__init__(options)
        self.options: HtmlRendererOptions = options

    def generate(self, node: Node, context: ContextLike = None) -> str:
        """Generate HTML for ``node`` and its subtree."""
        writer = _HtmlWriter(self.options, GenerationContext.coerce(context))
        result = node.accept(writer)
        logger.debug("Generated %d characters of HTML from %s", len(result), type(node).__name__)
        return result


class _HtmlWriter(NodeVisitor, MarkVisitor):
    """Tree walk for a single :meth:`HtmlRenderer.generate` call."""

    def __init__(self, options: HtmlRendererOptions, context: GenerationContext):
        self.options = options
        self.context = context

    def _escape(self, text: str) -> str:
        return escape_html(text, enabled=self.options.escape_html)

    def _join(self, children: Iterable[Node]) -> str:
        return "".join(child.accept(self) for child in children)

    def visit_doc(self, node: Doc) -> str:
        """Render the children with no wrapper tag."""
        return self._join(node.children)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a paragraph; an empty one still yields ``<p></p>``."""
        return f"<p>{self._join(node.children)}</p>"

    def visit_bullet_list(self, node: BulletList) -> str:
        return f"<ul>{self._join(node.children)}</ul>"

    def visit_ordered_list(self, node: OrderedList) -> str:
        return f"<ol>{self._join(node.children)}</ol>"

    def visit_list_item(self, node: ListItem) -> str:
        return f"<li>{self._join(node.children)}</li>"

    def visit_text(self, node: Text) -> str:
        """Escape the content, then apply marks innermost first."""
        result = self._escape(node.content)
        for mark in node.marks:
            result = mark.accept(self, result)
        return result

    def visit_bold(self, mark: Bold, text: str) -> str:
        return f"<strong>{text}</strong>"

    def visit_italic(self, mark: Italic, text: str) -> str:
        return f"<em>{text}</em>"

    def visit_underline(self, mark: Underline, text: str) -> str:
        return f"<u>{text}</u>"

    def visit_link(self, mark: Link, text: str) -> str:
        """Render an anchor.

        ``href`` falls back to the configured placeholder when missing or
        empty. ``target`` and ``class`` appear only when non-empty, and
        ``target`` is left out whenever the context underlines links.
        """
        attributes = [f'href="{self._escape(mark.href or self.options.default_href)}"']
        if mark.target and not self.context.link_underline:
            attributes.append(f'target="{self._escape(mark.target)}"')
        if mark.class_:
            attributes.append(f'class="{self._escape(mark.class_)}"')
        return f"<a {' '.join(attributes)}>{text}</a>"
