#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for resumark parsers and renderers."""

from resumark.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from resumark.options.html import HtmlRendererOptions
from resumark.options.latex import LatexRendererOptions
from resumark.options.markdown import MarkdownParserOptions
from resumark.options.tree import TreeParserOptions, TreeRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "MarkdownParserOptions",
    "TreeParserOptions",
    "TreeRendererOptions",
    "HtmlRendererOptions",
    "LatexRendererOptions",
]
