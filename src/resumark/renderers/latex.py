#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/renderers/latex.py
r"""LaTeX rendering from document trees.

The output is a fragment placed verbatim inside a ``moderncv``
``\cventry`` or ``\cvitem`` argument, which shapes the spacing rules:

- a paragraph ends with a blank line (two newlines), but an empty paragraph
  yields a single newline so no spurious blank paragraph appears;
- list environments open and close on their own lines;
- inside ``\item`` the first blank line is collapsed, because the list
  macros do not accept a blank line directly inside an item.

"""

from __future__ import annotations

import logging
import re
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
from resumark.options.latex import LatexRendererOptions
from resumark.renderers.base import BaseRenderer, ContextLike
from resumark.utils.escape import escape_latex, escape_latex_url

logger = logging.getLogger(__name__)

_BLANK_LINE = re.compile(r"^[ \t]*\n", re.MULTILINE)


class LatexRenderer(BaseRenderer):
    r"""Render document trees to LaTeX fragments.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options

    Examples
    --------
        >>> from resumark.ast import ListItem, Paragraph, Text
        >>> item = ListItem(children=[Paragraph(children=[Text("a")]), Paragraph(children=[Text("b")])])
        >>> LatexRenderer().generate(item)
        '\\item a\nb\n\n'

    """

    def __init__(self, options: LatexRendererOptions | None = None):
        """Initialize the LaTeX renderer with options."""
        BaseRenderer._validate_options_type(options, LatexRendererOptions, "latex")
        options = options or LatexRendererOptions()
        super().__init__(options)
        self.options: LatexRendererOptions = options

    def generate(self, node: Node, context: ContextLike = None) -> str:
        """Generate LaTeX for ``node`` and its subtree."""
        writer = _LatexWriter(self.options, GenerationContext.coerce(context))
        result = node.accept(writer)
        logger.debug("Generated %d characters of LaTeX from %s", len(result), type(node).__name__)
        return result


class _LatexWriter(NodeVisitor, MarkVisitor):
    def __init__(self, options: LatexRendererOptions, context: GenerationContext):
        self.options = options
        self.context = context

    def _escape(self, text: str) -> str:
        if not self.options.escape_special:
            return text
        return escape_latex(text)

    def _join(self, children: Iterable[Node]) -> str:
        return "".join(child.accept(self) for child in children)

    def visit_doc(self, node: Doc) -> str:
        return self._join(node.children)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a paragraph followed by a blank line, or a lone newline if empty."""
        if not node.children:
            return "\n"
        return f"{self._join(node.children)}\n\n"

    def visit_bullet_list(self, node: BulletList) -> str:
        return f"\\begin{{itemize}}\n{self._join(node.children)}\\end{{itemize}}\n"

    def visit_ordered_list(self, node: OrderedList) -> str:
        return f"\\begin{{enumerate}}\n{self._join(node.children)}\\end{{enumerate}}\n"

    def visit_list_item(self, node: ListItem) -> str:
        content = self._join(node.children).replace("\n\n", "\n", 1)
        return f"\\item {content}"

    def visit_text(self, node: Text) -> str:
        """Escape the content, then apply marks innermost first."""
        result = self._escape(node.content)
        for mark in node.marks:
            result = mark.accept(self, result)
        return result

    def visit_bold(self, mark: Bold, text: str) -> str:
        return f"\\textbf{{{text}}}"

    def visit_italic(self, mark: Italic, text: str) -> str:
        return f"\\textit{{{text}}}"

    def visit_underline(self, mark: Underline, text: str) -> str:
        return f"\\underline{{{text}}}"

    def visit_link(self, mark: Link, text: str) -> str:
        r"""Render ``\href``; the body is underlined when the context underlines links."""
        href = mark.href or ""
        if self.options.escape_link_urls:
            href = escape_latex_url(href)
        if self.context.link_underline:
            text = f"\\underline{{{text}}}"
        return f"\\href{{{href}}}{{{text}}}"


def cventry_argument(content: str) -> str:
    r"""Prepare generated LaTeX for use as a ``moderncv`` command argument.

    ``\cventry`` and ``\cvitem`` arguments may not contain blank lines
    (LaTeX stops with "Paragraph ended before \cventry was complete"), so the
    fragment is stripped and every remaining blank or whitespace-only line is
    replaced by a lone ``%``.

    Parameters
    ----------
    content : str
        Output of :class:`LatexRenderer`

    Returns
    -------
    str
        The fragment with blank lines commented out

    Examples
    --------
        >>> cventry_argument("a\n\nb\n\n")
        'a\n%\nb'
        >>> cventry_argument("\n")
        ''

    """
    return _BLANK_LINE.sub("%\n", content.strip())
