#  Copyright (c) 2025 Tom Villani, Ph.D.

# resumark/options/markdown.py
"""Configuration options for Markdown parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from resumark.constants import DEFAULT_MARKDOWN_LINK_CLASS, DEFAULT_MARKDOWN_LINK_TARGET
from resumark.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-tree parsing.

    Parameters
    ----------
    link_target : str or None, default None
        Value stored in the ``target`` attribute of every parsed link
        (e.g. ``"_blank"``). None leaves the attribute unset.
    link_class : str or None, default None
        Value stored in the ``class`` attribute of every parsed link.

    """

    link_target: Optional[str] = field(
        default=DEFAULT_MARKDOWN_LINK_TARGET,
        metadata={"help": "Target attribute given to parsed links (e.g. _blank)", "importance": "advanced"},
    )
    link_class: Optional[str] = field(
        default=DEFAULT_MARKDOWN_LINK_CLASS,
        metadata={"help": "CSS class given to parsed links", "importance": "advanced"},
    )
