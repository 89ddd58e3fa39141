#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Source parsers producing document trees."""

from resumark.parsers.base import BaseParser
from resumark.parsers.markdown import MarkdownParser, markdown_to_ast
from resumark.parsers.tree import TreeParser

__all__ = ["BaseParser", "MarkdownParser", "TreeParser", "markdown_to_ast"]
