#  Copyright (c) 2025 Tom Villani, Ph.D.

# resumark/options/latex.py
"""Configuration options for LaTeX rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from resumark.constants import DEFAULT_LATEX_ESCAPE_LINK_URLS, DEFAULT_LATEX_ESCAPE_SPECIAL
from resumark.options.base import BaseRendererOptions


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    r"""Configuration options for tree-to-LaTeX rendering.

    The output is a fragment meant to be placed verbatim inside a
    ``moderncv`` ``\cventry``/``\cvitem`` argument.

    Parameters
    ----------
    escape_special : bool, default True
        Escape LaTeX special characters (``& % $ # _ { } ~ ^ \``) in text.
    escape_link_urls : bool, default True
        Escape the characters that break the URL argument of ``\href``
        (``\ # % { }``). Set to False to emit hrefs exactly as stored.

    """

    escape_special: bool = field(
        default=DEFAULT_LATEX_ESCAPE_SPECIAL,
        metadata={"help": "Escape LaTeX special characters in text", "importance": "core"},
    )
    escape_link_urls: bool = field(
        default=DEFAULT_LATEX_ESCAPE_LINK_URLS,
        metadata={"help": "Escape characters in link URLs that break \\href", "importance": "advanced"},
    )
