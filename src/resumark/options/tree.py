#  Copyright (c) 2025 Tom Villani, Ph.D.

# resumark/options/tree.py
"""Configuration options for the editor JSON tree format."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from resumark.constants import DEFAULT_TREE_INDENT, DEFAULT_TREE_STRICT_MODE
from resumark.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class TreeParserOptions(BaseParserOptions):
    """Configuration options for editor JSON parsing.

    Parameters
    ----------
    strict_mode : bool, default False
        Validate the decoded tree (known node and mark types, list children
        are list items, and so on) and raise ValidationError on violations.
        The default trusts the producer and performs no structural checks.

    """

    strict_mode: bool = field(
        default=DEFAULT_TREE_STRICT_MODE,
        metadata={"help": "Validate tree structure instead of trusting the producer", "importance": "security"},
    )


@dataclass(frozen=True)
class TreeRendererOptions(BaseRendererOptions):
    """Configuration options for editor JSON output.

    Parameters
    ----------
    indent : int or None, default None
        Indentation for pretty-printed JSON; None produces a single line.

    """

    indent: Optional[int] = field(
        default=DEFAULT_TREE_INDENT,
        metadata={"help": "JSON indentation (None for compact output)", "type": int, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the indentation width."""
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
