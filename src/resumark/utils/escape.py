#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/utils/escape.py
"""Format-specific text escaping utilities.

Every function here replaces each special character in a single pass, so the
output of one replacement is never escaped again (``\\`` becomes
``\\textbackslash{}``, not ``\\textbackslash\\{\\}``).

"""

from __future__ import annotations

import html
import re

from resumark.constants import LATEX_SPECIAL_CHARS, LATEX_URL_SPECIAL_CHARS

_LATEX_PATTERN = re.compile("|".join(re.escape(char) for char in LATEX_SPECIAL_CHARS))
_LATEX_URL_PATTERN = re.compile("|".join(re.escape(char) for char in LATEX_URL_SPECIAL_CHARS))


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape ``& < > " '`` when enabled."""
    if not enabled:
        return text
    return html.escape(text, quote=True)


def escape_latex(text: str) -> str:
    r"""Escape LaTeX special characters in text content.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for LaTeX

    Examples
    --------
        >>> escape_latex("R&D at 100% for $5")
        'R\\&D at 100\\% for \\$5'
        >>> escape_latex("a\\b")
        'a\\textbackslash{}b'

    """
    if not text:
        return text
    return _LATEX_PATTERN.sub(lambda match: LATEX_SPECIAL_CHARS[match.group(0)], text)


def escape_latex_url(url: str) -> str:
    r"""Escape the characters that break the URL argument of ``\href``.

    hyperref reads ``#`` and ``%`` literally inside ``\href`` only when they
    are escaped, and unbalanced braces end the argument early.

    Parameters
    ----------
    url : str
        URL to escape

    Returns
    -------
    str
        Escaped URL

    Examples
    --------
        >>> escape_latex_url("https://x.test/a#b")
        'https://x.test/a\\#b'

    """
    if not url:
        return url
    return _LATEX_URL_PATTERN.sub(lambda match: LATEX_URL_SPECIAL_CHARS[match.group(0)], url)
