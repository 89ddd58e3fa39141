#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/api.py
"""High-level conversion functions.

Each call creates its own parser or renderer, so these functions can be
used from several threads at once.

Examples
--------
    >>> compile_text("This is **bold** text", "markdown", "html")
    '<p>This is <strong>bold</strong> text</p>'
    >>> compile_text("*hi*", "markdown", "latex")
    '\\\\textit{hi}\\n\\n'

"""

from __future__ import annotations

import logging
from typing import Optional

from resumark.ast import Doc, Node
from resumark.constants import SourceFormat, TargetFormat
from resumark.options.base import BaseParserOptions, BaseRendererOptions
from resumark.registry import get_parser, get_renderer
from resumark.renderers.base import ContextLike

logger = logging.getLogger(__name__)


def parse(source: str, source_format: SourceFormat = "markdown", options: Optional[BaseParserOptions] = None) -> Doc:
    """Parse source text into a document tree.

    Parameters
    ----------
    source : str
        Markdown or editor JSON text
    source_format : {"markdown", "tree"}, default "markdown"
        Format of ``source``
    options : BaseParserOptions, optional
        Options matching ``source_format``

    Returns
    -------
    Doc
        Document tree

    Raises
    ------
    FormatError
        If ``source_format`` is unknown
    ParsingError
        If editor JSON is not valid JSON

    """
    return get_parser(source_format, options).parse(source)


def generate(
    node: Node,
    target_format: TargetFormat = "html",
    context: ContextLike = None,
    options: Optional[BaseRendererOptions] = None,
) -> str:
    """Generate output text for a document tree or any subtree.

    Parameters
    ----------
    node : Node
        Tree to render
    target_format : {"html", "latex", "tree"}, default "html"
        Output format
    context : GenerationContext or mapping, optional
        Presentation settings such as ``{"typography": {"links": {"underline": True}}}``
    options : BaseRendererOptions, optional
        Options matching ``target_format``

    Returns
    -------
    str
        Generated text

    """
    return get_renderer(target_format, options).generate(node, context)


def compile_text(
    source: str,
    source_format: SourceFormat = "markdown",
    target_format: TargetFormat = "html",
    context: ContextLike = None,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
) -> str:
    """Parse ``source`` and generate ``target_format`` output in one step."""
    logger.debug("Compiling %s to %s", source_format, target_format)
    doc = parse(source, source_format, parser_options)
    return generate(doc, target_format, context, renderer_options)
