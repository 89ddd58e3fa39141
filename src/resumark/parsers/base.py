#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/parsers/base.py
"""Base class for source parsers.

Every parser turns source text into a :class:`~resumark.ast.Doc`. Parsers
are independent of the output format; nothing in a tree records which
parser built it.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from resumark.ast import Doc
from resumark.exceptions import InvalidOptionsError
from resumark.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all source parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
        >>> class NullParser(BaseParser):
        ...     def parse(self, source):
        ...         return Doc()
        >>> NullParser().parse("anything")
        Doc(children=())

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, source: str) -> Doc:
        """Parse source text into a document tree.

        Parameters
        ----------
        source : str
            Source text

        Returns
        -------
        Doc
            Root of the parsed tree

        Raises
        ------
        ParsingError
            Only where the format can be syntactically invalid

        """
        pass
