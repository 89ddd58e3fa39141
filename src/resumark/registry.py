#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/registry.py
"""Lookup of parsers and renderers by format name."""

from __future__ import annotations

from typing import Optional

from resumark.constants import SOURCE_FORMATS, TARGET_FORMATS
from resumark.exceptions import FormatError
from resumark.options.base import BaseParserOptions, BaseRendererOptions
from resumark.parsers import BaseParser, MarkdownParser, TreeParser
from resumark.renderers import BaseRenderer, HtmlRenderer, LatexRenderer, TreeJsonRenderer

PARSERS: dict[str, type[BaseParser]] = {
    "markdown": MarkdownParser,
    "tree": TreeParser,
}

RENDERERS: dict[str, type[BaseRenderer]] = {
    "html": HtmlRenderer,
    "latex": LatexRenderer,
    "tree": TreeJsonRenderer,
}


def get_parser(source_format: str, options: Optional[BaseParserOptions] = None) -> BaseParser:
    """Create a parser for ``source_format``.

    Raises
    ------
    FormatError
        If no parser handles the format
    InvalidOptionsError
        If ``options`` belong to another parser

    """
    parser_class = PARSERS.get(source_format)
    if parser_class is None:
        raise FormatError(source_format, supported_formats=list(SOURCE_FORMATS))
    return parser_class(options)  # type: ignore[call-arg]


def get_renderer(target_format: str, options: Optional[BaseRendererOptions] = None) -> BaseRenderer:
    """Create a renderer for ``target_format``.

    Raises
    ------
    FormatError
        If no renderer handles the format
    InvalidOptionsError
        If ``options`` belong to another renderer

    """
    renderer_class = RENDERERS.get(target_format)
    if renderer_class is None:
        raise FormatError(target_format, supported_formats=list(TARGET_FORMATS))
    return renderer_class(options)  # type: ignore[call-arg]
