#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/renderers/base.py
"""Base classes for code generators.

A renderer turns a document tree into an output string. Renderers never
look at how a tree was produced, and every node and mark value of the
document model has a defined rendering, so :meth:`BaseRenderer.generate`
does not raise for model values. Only :meth:`BaseRenderer.render`, which
writes to a destination, can fail.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Mapping, Union

from resumark.ast import Doc, Node
from resumark.context import GenerationContext
from resumark.exceptions import InvalidOptionsError, RenderingError
from resumark.options.base import BaseRendererOptions

logger = logging.getLogger(__name__)

ContextLike = Union[GenerationContext, Mapping[str, Any], None]


class BaseRenderer(ABC):
    """Abstract base class for all code generators.

    Renderers keep no per-call state, so one instance may be shared across
    threads.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def generate(self, node: Node, context: ContextLike = None) -> str:
        """Generate output for ``node`` and its subtree.

        Parameters
        ----------
        node : Node
            Any document node, not only a Doc
        context : GenerationContext, mapping or None, default = None
            Presentation settings of the enclosing document

        Returns
        -------
        str
            Generated output

        """
        pass

    def render_to_string(self, doc: Doc, context: ContextLike = None) -> str:
        """Render a whole document to a string."""
        return self.generate(doc, context)

    def render(self, doc: Doc, output: Union[str, Path, IO[str]], context: ContextLike = None) -> None:
        """Render a document and write it to a file path or text stream.

        Parameters
        ----------
        doc : Doc
            Document to render
        output : str, Path or IO[str]
            Destination file path or writable text stream
        context : GenerationContext, mapping or None, default = None
            Presentation settings of the enclosing document

        Raises
        ------
        RenderingError
            If the output cannot be written

        """
        write_text_output(self.render_to_string(doc, context), output)


def write_text_output(content: str, output: Union[str, Path, IO[str]]) -> None:
    """Write ``content`` to a file path or text stream.

    Raises
    ------
    RenderingError
        If the destination cannot be written

    """
    if isinstance(output, (str, Path)):
        path = Path(output)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise RenderingError(f"Could not write output to {path}: {e}", output_path=str(path), original_error=e) from e
        logger.debug("Wrote %d characters to %s", len(content), path)
        return

    if not hasattr(output, "write"):
        raise RenderingError(f"Unsupported output destination: {type(output).__name__}")
    try:
        output.write(content)
    except (OSError, TypeError) as e:
        raise RenderingError(f"Could not write output: {e}", original_error=e) from e
