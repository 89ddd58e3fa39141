#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/ast/nodes.py
"""Document node and mark classes.

This module defines the closed set of node and mark variants that make up a
rich-text fragment such as a resume summary. Parsers build these trees and
renderers consume them; nothing else is shared between the two sides.

Node Hierarchy
--------------
Block-level nodes:
    - Doc (the root), Paragraph
    - BulletList, OrderedList, ListItem

Leaf nodes:
    - Text, carrying an ordered sequence of marks

Marks
-----
Inline formatting attached to a Text leaf:
    - Bold, Italic, Underline, Link

The order of ``Text.marks`` is significant: the mark at index 0 is applied
first, so it ends up innermost in rendered output.

All classes are frozen dataclasses. Sequence fields accept any iterable or
``None`` and are stored as tuples, so an absent and an empty sequence are the
same value.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Optional, Sequence

if TYPE_CHECKING:
    from resumark.ast.visitors import MarkVisitor, NodeVisitor


def _as_tuple(value: Optional[Iterable[Any]]) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, tuple):
        return value
    return tuple(value)


# ============================================================================
# Marks
# ============================================================================


class Mark(ABC):
    """Base class for inline formatting marks.

    A mark wraps the already rendered text of a leaf. Dispatch is done through
    :meth:`accept`, which hands the text to the matching ``visit_*`` method of
    a :class:`~resumark.ast.visitors.MarkVisitor`.

    """

    mark_type: ClassVar[str]

    @abstractmethod
    def accept(self, visitor: MarkVisitor, text: str) -> str:
        """Apply this mark to ``text`` using ``visitor``.

        Parameters
        ----------
        visitor : MarkVisitor
            Visitor providing the output-format specific wrapping
        text : str
            Rendered content to wrap

        Returns
        -------
        str
            The wrapped text

        """
        pass


@dataclass(frozen=True)
class Bold(Mark):
    """Bold (strong) formatting."""

    mark_type: ClassVar[str] = "bold"

    def accept(self, visitor: MarkVisitor, text: str) -> str:
        return visitor.visit_bold(self, text)


@dataclass(frozen=True)
class Italic(Mark):
    """Italic (emphasis) formatting."""

    mark_type: ClassVar[str] = "italic"

    def accept(self, visitor: MarkVisitor, text: str) -> str:
        return visitor.visit_italic(self, text)


@dataclass(frozen=True)
class Underline(Mark):
    """Underline formatting."""

    mark_type: ClassVar[str] = "underline"

    def accept(self, visitor: MarkVisitor, text: str) -> str:
        return visitor.visit_underline(self, text)


@dataclass(frozen=True)
class Link(Mark):
    """Hyperlink formatting.

    Parameters
    ----------
    href : str or None, default = None
        Link destination. Missing or empty is valid; renderers substitute a
        placeholder where the format needs one.
    target : str or None, default = None
        Browsing context for HTML output (e.g. ``"_blank"``)
    class_ : str or None, default = None
        CSS class for HTML output. Serialized as ``class``.

    """

    mark_type: ClassVar[str] = "link"

    href: Optional[str] = None
    target: Optional[str] = None
    class_: Optional[str] = None

    def accept(self, visitor: MarkVisitor, text: str) -> str:
        return visitor.visit_link(self, text)


# ============================================================================
# Nodes
# ============================================================================


class Node(ABC):
    """Base class for all document nodes.

    Every node supports the visitor pattern; renderers implement one
    ``visit_*`` method per concrete class.

    """

    node_type: ClassVar[str]

    @abstractmethod
    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : NodeVisitor
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass(frozen=True)
class Text(Node):
    """Text leaf.

    Parameters
    ----------
    content : str
        Text content
    marks : sequence of Mark, default = ()
        Formatting marks, outermost-first as produced by the parsers

    """

    node_type: ClassVar[str] = "text"

    content: str
    marks: Sequence[Mark] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "marks", _as_tuple(self.marks))

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_text(self)


@dataclass(frozen=True)
class _ContainerNode(Node):
    """Shared storage for nodes that hold an ordered sequence of children."""

    children: Sequence[Node] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", _as_tuple(self.children))


@dataclass(frozen=True)
class Doc(_ContainerNode):
    """Root node of a fragment.

    Parameters
    ----------
    children : sequence of Node, default = ()
        Block-level nodes (Paragraph, BulletList, OrderedList)

    """

    node_type: ClassVar[str] = "doc"

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_doc(self)


@dataclass(frozen=True)
class Paragraph(_ContainerNode):
    """Paragraph block; children are normally Text leaves."""

    node_type: ClassVar[str] = "paragraph"

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class BulletList(_ContainerNode):
    """Unordered list; children are ListItem nodes."""

    node_type: ClassVar[str] = "bulletList"

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_bullet_list(self)


@dataclass(frozen=True)
class OrderedList(_ContainerNode):
    """Ordered list; children are ListItem nodes.

    Parameters
    ----------
    children : sequence of Node, default = ()
        ListItem nodes
    start : int, default = 1
        Number of the first item

    """

    node_type: ClassVar[str] = "orderedList"

    start: int = 1

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_ordered_list(self)


@dataclass(frozen=True)
class ListItem(_ContainerNode):
    """List item; children are Paragraph or nested list nodes."""

    node_type: ClassVar[str] = "listItem"

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_list_item(self)


NODE_CLASSES: dict[str, type[Node]] = {
    cls.node_type: cls for cls in (Doc, Paragraph, BulletList, OrderedList, ListItem, Text)
}

MARK_CLASSES: dict[str, type[Mark]] = {cls.mark_type: cls for cls in (Bold, Italic, Underline, Link)}


def get_node_children(node: Node) -> tuple[Node, ...]:
    """Return the children of ``node``, or an empty tuple for a leaf.

    Parameters
    ----------
    node : Node
        Any document node

    Returns
    -------
    tuple of Node
        Child nodes in document order

    """
    if isinstance(node, _ContainerNode):
        return tuple(node.children)
    return ()
