#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/parsers/markdown.py
"""Markdown to document tree parser.

Markdown is tokenized by mistune and the token tree is then transformed into
the document model. Inline formatting does not produce nodes of its own:
bold, italic and link spans push a mark onto an accumulator that is handed
down to their children, and every text leaf records the accumulator as it
stands when the leaf is reached. A leaf's marks therefore list the outermost
enclosing span first.

Only a small subset of Markdown is kept: paragraphs, bold, italic, links,
bullet and ordered lists (nested by indentation) and plain text. Every other
construct, such as headings, block quotes and inline code, is dropped
without a node and without a diagnostic.

"""

from __future__ import annotations

import html
import logging
from typing import Any, Iterable, Sequence

import mistune

from resumark.ast import Bold, BulletList, Doc, Italic, Link, ListItem, Mark, Node, OrderedList, Paragraph, Text
from resumark.options.markdown import MarkdownParserOptions
from resumark.parsers.base import BaseParser

logger = logging.getLogger(__name__)

# Tokens whose text joins the surrounding run instead of starting a new leaf
_RUN_TOKENS = frozenset({"text", "softbreak"})


class MarkdownParser(BaseParser):
    """Convert Markdown text to a :class:`~resumark.ast.Doc`.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Examples
    --------
    Basic usage:

        >>> doc = MarkdownParser().parse("This is **bold** text")
        >>> [leaf.content for leaf in doc.children[0].children]
        ['This is ', 'bold', ' text']
        >>> doc.children[0].children[1].marks
        (Bold(),)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        # renderer=None makes mistune return its token tree
        self._markdown = mistune.create_markdown(renderer=None)

    def parse(self, source: str) -> Doc:
        """Parse Markdown text into a document tree.

        Never raises for string input; text with no supported construct
        yields an empty Doc.

        Parameters
        ----------
        source : str
            Markdown text

        Returns
        -------
        Doc
            Document tree

        """
        tokens, _state = self._markdown.parse(source)
        children = self._transform_all(tokens if isinstance(tokens, list) else [], ())
        logger.debug("Parsed Markdown into %d block node(s)", len(children))
        return Doc(children=children)

    def _transform_all(self, tokens: Iterable[dict[str, Any]], marks: Sequence[Mark]) -> list[Node]:
        """Transform sibling tokens, flattening each result one level.

        Adjacent ``text`` and ``softbreak`` tokens form a single run and
        become one Text leaf; any other token ends the run.
        """
        nodes: list[Node] = []
        run: list[str] = []

        def flush() -> None:
            content = "".join(run)
            run.clear()
            # mistune leaves empty text tokens around nested spans
            if content:
                nodes.append(Text(content=content, marks=marks))

        for token in tokens:
            if not isinstance(token, dict):
                continue
            token_type = token.get("type", "")
            if token_type in _RUN_TOKENS:
                # Entities are decoded per token so an escaped "\&" stays literal
                run.append("\n" if token_type == "softbreak" else html.unescape(token.get("raw", "")))
                continue
            flush()
            nodes.extend(self._transform(token, marks))
        flush()

        return nodes

    def _transform(self, token: dict[str, Any], marks: Sequence[Mark]) -> list[Node]:
        """Transform one token into zero or more nodes."""
        token_type = token.get("type", "")
        children = token.get("children")
        if not isinstance(children, list):
            children = []

        if token_type in ("paragraph", "block_text"):
            return [Paragraph(children=self._transform_all(children, marks))]
        if token_type == "strong":
            return self._transform_all(children, (*marks, Bold()))
        if token_type == "emphasis":
            return self._transform_all(children, (*marks, Italic()))
        if token_type == "link":
            return self._transform_all(children, (*marks, self._make_link(token)))
        if token_type == "list":
            return [self._transform_list(token, children, marks)]
        if token_type == "list_item":
            return [ListItem(children=self._transform_all(children, marks))]

        return []

    def _transform_list(self, token: dict[str, Any], children: list[Any], marks: Sequence[Mark]) -> Node:
        attrs = token.get("attrs")
        if not isinstance(attrs, dict):
            attrs = {}

        items = self._transform_all(children, marks)
        if attrs.get("ordered", False):
            start = attrs.get("start", 1)
            return OrderedList(children=items, start=start if isinstance(start, int) else 1)
        return BulletList(children=items)

    def _make_link(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs")
        url = attrs.get("url") if isinstance(attrs, dict) else None
        return Link(href=url, target=self.options.link_target, class_=self.options.link_class)


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Doc:
    """Convert a Markdown string to a document tree.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Doc
        Document tree

    """
    return MarkdownParser(options).parse(markdown_content)
