#  Copyright (c) 2025 Tom Villani, Ph.D.

# resumark/options/html.py
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from resumark.constants import DEFAULT_HTML_ESCAPE, DEFAULT_LINK_HREF
from resumark.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for tree-to-HTML rendering.

    Parameters
    ----------
    escape_html : bool, default True
        Entity-escape text content and attribute values.
    default_href : str, default "#"
        Placeholder used for links whose href is missing or empty.

    """

    escape_html: bool = field(
        default=DEFAULT_HTML_ESCAPE,
        metadata={"help": "Escape HTML special characters in text and attributes", "importance": "security"},
    )
    default_href: str = field(
        default=DEFAULT_LINK_HREF,
        metadata={"help": "Placeholder href for links without a destination", "importance": "advanced"},
    )
