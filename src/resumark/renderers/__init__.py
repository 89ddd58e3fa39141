#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Code generators turning document trees into output text."""

from resumark.renderers.base import BaseRenderer, write_text_output
from resumark.renderers.html import HtmlRenderer
from resumark.renderers.latex import LatexRenderer, cventry_argument
from resumark.renderers.tree import TreeJsonRenderer

__all__ = ["BaseRenderer", "HtmlRenderer", "LatexRenderer", "TreeJsonRenderer", "cventry_argument", "write_text_output"]
