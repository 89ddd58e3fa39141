#  Copyright (c) 2025 Tom Villani, Ph.D.
"""resumark - rich-text compiler for resume summaries.

resumark converts short rich-text fragments, such as the summary of a work
or education entry, between Markdown, the JSON tree stored by the resume
editor, HTML and LaTeX.

Every conversion goes through one document tree: a parser builds it and a
code generator walks it. Parsers and generators know nothing of each other,
so any source format can be combined with any target format.

Supported Formats
-----------------
- **Sources**: Markdown (paragraphs, bold, italic, links, nested lists), editor JSON
- **Targets**: HTML fragments, LaTeX fragments for ``moderncv``, editor JSON

Examples
--------
One-step conversion:

    >>> from resumark import compile_text
    >>> compile_text("Led **three** teams", target_format="html")
    '<p>Led <strong>three</strong> teams</p>'

Parse once, render twice:

    >>> from resumark import generate, parse
    >>> doc = parse("- one\\n- two")
    >>> generate(doc, "latex")
    '\\\\begin{itemize}\\n\\\\item one\\n\\\\item two\\n\\\\end{itemize}\\n'

"""

__version__ = "1.0.0"

from resumark.api import compile_text, generate, parse
from resumark.ast import Doc, Node
from resumark.context import GenerationContext
from resumark.exceptions import (
    FormatError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    ResumarkError,
    ValidationError,
)
from resumark.parsers import MarkdownParser, TreeParser
from resumark.renderers import HtmlRenderer, LatexRenderer, TreeJsonRenderer

__all__ = [
    "__version__",
    "parse",
    "generate",
    "compile_text",
    "Doc",
    "Node",
    "GenerationContext",
    "MarkdownParser",
    "TreeParser",
    "HtmlRenderer",
    "LatexRenderer",
    "TreeJsonRenderer",
    "ResumarkError",
    "ValidationError",
    "InvalidOptionsError",
    "FormatError",
    "ParsingError",
    "RenderingError",
]
