#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for resumark."""

from resumark.utils.escape import escape_html, escape_latex, escape_latex_url

__all__ = ["escape_html", "escape_latex", "escape_latex_url"]
