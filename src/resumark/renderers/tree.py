#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/renderers/tree.py
"""Editor JSON rendering from document trees.

Serializes a tree back into the JSON shape read by
:class:`~resumark.parsers.tree.TreeParser`, so Markdown can be converted for
the rich-text editor.

"""

from __future__ import annotations

import logging

from resumark.ast import Node, ast_to_json
from resumark.options.tree import TreeRendererOptions
from resumark.renderers.base import BaseRenderer, ContextLike

logger = logging.getLogger(__name__)


class TreeJsonRenderer(BaseRenderer):
    """Render document trees to editor JSON.

    Parameters
    ----------
    options : TreeRendererOptions or None, default = None
        JSON formatting options

    """

    def __init__(self, options: TreeRendererOptions | None = None):
        """Initialize the editor JSON renderer."""
        BaseRenderer._validate_options_type(options, TreeRendererOptions, "tree")
        options = options or TreeRendererOptions()
        super().__init__(options)
        self.options: TreeRendererOptions = options

    def generate(self, node: Node, context: ContextLike = None) -> str:
        """Serialize ``node`` to JSON; the context does not affect the tree."""
        result = ast_to_json(node, indent=self.options.indent)
        logger.debug("Serialized %s to %d characters of editor JSON", type(node).__name__, len(result))
        return result
