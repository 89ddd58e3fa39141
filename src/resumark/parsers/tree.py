#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/parsers/tree.py
"""Editor JSON tree parser.

The rich-text editor of the resume front end stores fragments as JSON trees
that already follow the document model. By default they are decoded without
any structural re-validation: the editor is a trusted producer, and a tree
that is valid JSON but structurally odd is passed through as it is. Only
input that is not JSON at all fails.

``TreeParserOptions(strict_mode=True)`` selects the validating variant for
trees from producers that are not trusted.

"""

from __future__ import annotations

import json
import logging

from resumark.ast import Doc, ValidationVisitor, dict_to_doc
from resumark.exceptions import ParsingError
from resumark.options.tree import TreeParserOptions
from resumark.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class TreeParser(BaseParser):
    """Convert editor JSON to a :class:`~resumark.ast.Doc`.

    Parameters
    ----------
    options : TreeParserOptions or None, default = None
        Parser configuration

    Examples
    --------
        >>> source = '{"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "hi"}]}]}'
        >>> TreeParser().parse(source).children[0].children[0].content
        'hi'

    """

    def __init__(self, options: TreeParserOptions | None = None):
        """Initialize the tree parser."""
        BaseParser._validate_options_type(options, TreeParserOptions, "tree")
        options = options or TreeParserOptions()
        super().__init__(options)
        self.options: TreeParserOptions = options

    def parse(self, source: str) -> Doc:
        """Decode editor JSON into a document tree.

        Parameters
        ----------
        source : str
            JSON text

        Returns
        -------
        Doc
            Document tree

        Raises
        ------
        ParsingError
            If ``source`` is not valid JSON or is nested too deeply
        ValidationError
            In strict mode, if the tree does not follow the document model

        """
        try:
            data = json.loads(source)
        except json.JSONDecodeError as e:
            raise ParsingError(f"Invalid editor JSON: {e}", parsing_stage="json_parsing", original_error=e) from e
        except RecursionError as e:
            raise ParsingError("Editor JSON is nested too deeply", parsing_stage="json_parsing", original_error=e) from e

        strict_mode = self.options.strict_mode
        try:
            doc = dict_to_doc(data, strict_mode=strict_mode)
            if strict_mode:
                doc.accept(ValidationVisitor(strict=True))
        except RecursionError as e:
            raise ParsingError(
                "Editor JSON tree is nested too deeply", parsing_stage="tree_building", original_error=e
            ) from e

        logger.debug("Decoded editor JSON into %d block node(s)", len(doc.children))
        return doc
