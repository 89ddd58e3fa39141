#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/context.py
"""Generation context shared by the code generators.

The context carries presentation settings that come from the surrounding
resume rather than from the fragment itself. Only link typography is
consulted today: with ``typography.links.underline`` set, HTML output drops
the ``target`` attribute and LaTeX output underlines the link body.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from resumark.constants import DEFAULT_LINK_UNDERLINE
from resumark.exceptions import ValidationError


@dataclass(frozen=True)
class LinkTypography:
    """Link presentation settings."""

    underline: bool = DEFAULT_LINK_UNDERLINE


@dataclass(frozen=True)
class Typography:
    """Typography settings."""

    links: LinkTypography = field(default_factory=LinkTypography)


@dataclass(frozen=True)
class GenerationContext:
    """Context handed to :meth:`BaseRenderer.generate`.

    Parameters
    ----------
    typography : Typography
        Typography settings of the enclosing document

    Examples
    --------
        >>> GenerationContext.from_dict({"typography": {"links": {"underline": True}}}).link_underline
        True

    """

    typography: Typography = field(default_factory=Typography)

    @property
    def link_underline(self) -> bool:
        """Whether links are underlined by the enclosing document."""
        return self.typography.links.underline

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> GenerationContext:
        """Build a context from a nested mapping.

        Missing levels fall back to their defaults, so ``{}`` and
        ``{"typography": {}}`` both give the default context.

        Parameters
        ----------
        data : Mapping or None
            Mapping shaped like ``{"typography": {"links": {"underline": bool}}}``

        Returns
        -------
        GenerationContext
            The context

        Raises
        ------
        ValidationError
            If a level of the mapping is not itself a mapping, or
            ``underline`` is not a boolean

        """
        typography = _section(data, "typography")
        links = _section(typography, "links")
        underline = links.get("underline")
        if underline is None:
            underline = DEFAULT_LINK_UNDERLINE
        elif not isinstance(underline, bool):
            raise ValidationError(
                f"'underline' must be true or false, got {underline!r}",
                parameter_name="underline",
                parameter_value=underline,
            )
        return cls(typography=Typography(links=LinkTypography(underline=underline)))

    @classmethod
    def coerce(cls, context: Union[GenerationContext, Mapping[str, Any], None]) -> GenerationContext:
        """Return ``context`` as a GenerationContext, accepting None or a mapping."""
        if context is None:
            return cls()
        if isinstance(context, GenerationContext):
            return context
        if isinstance(context, Mapping):
            return cls.from_dict(context)
        raise ValidationError(
            f"context must be a GenerationContext or a mapping, got {type(context).__name__}",
            parameter_name="context",
            parameter_value=context,
        )


def _section(data: Mapping[str, Any] | None, key: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValidationError(
            f"'{key}' must be a mapping, got {type(value).__name__}",
            parameter_name=key,
            parameter_value=value,
        )
    return value
