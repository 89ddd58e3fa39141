#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/options/base.py
"""Base classes for parser and renderer options.

Options are frozen dataclasses. A modified copy is made with
:meth:`CloneFrozenMixin.create_updated`; :meth:`CloneFrozenMixin.from_mapping`
builds an instance from a config-file section, ignoring unknown keys.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> Self:
        """Build an instance from a mapping such as a config-file section.

        Keys that are not fields of the class are logged and ignored.

        Parameters
        ----------
        values : Mapping or None
            Field values keyed by field name (hyphens are accepted for underscores)

        Returns
        -------
        Self
            New instance

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in (values or {}).items():
            name = str(key).replace("-", "_")
            if name in known:
                kwargs[name] = value
            else:
                logger.warning("Ignoring unknown option '%s' for %s", key, cls.__name__)
        return cls(**kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Subclasses define format-specific rendering options as frozen dataclass
    fields.
    """


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Subclasses define format-specific parsing options as frozen dataclass
    fields.
    """
