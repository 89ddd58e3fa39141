#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/constants.py
"""Constants and default values shared across resumark.

Defaults for every option dataclass live here so that the CLI, the config
loader and the option classes agree on a single value.

"""

from __future__ import annotations

from typing import Literal

SourceFormat = Literal["markdown", "tree"]
TargetFormat = Literal["html", "latex", "tree"]

SOURCE_FORMATS: tuple[str, ...] = ("markdown", "tree")
TARGET_FORMATS: tuple[str, ...] = ("html", "latex", "tree")

# Markdown parser
DEFAULT_MARKDOWN_LINK_TARGET: str | None = None
DEFAULT_MARKDOWN_LINK_CLASS: str | None = None

# Tree (editor JSON) parser
DEFAULT_TREE_STRICT_MODE = False

# Tree (editor JSON) renderer
DEFAULT_TREE_INDENT: int | None = None

# HTML renderer
DEFAULT_HTML_ESCAPE = True
DEFAULT_LINK_HREF = "#"

# LaTeX renderer
DEFAULT_LATEX_ESCAPE_SPECIAL = True
DEFAULT_LATEX_ESCAPE_LINK_URLS = True

# Generation context
DEFAULT_LINK_UNDERLINE = False

# Single-pass replacement table for LaTeX text content
LATEX_SPECIAL_CHARS: dict[str, str] = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "_": r"\_",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

# Characters that break the URL argument of hyperref's \href
LATEX_URL_SPECIAL_CHARS: dict[str, str] = {
    "\\": r"\\",
    "#": r"\#",
    "%": r"\%",
    "{": r"\{",
    "}": r"\}",
}

# Environment variables consulted by the CLI
ENV_PREFIX = "RESUMARK_"
