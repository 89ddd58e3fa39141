#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/ast/visitors.py
"""Visitor pattern implementation for document trees.

Renderers subclass both :class:`NodeVisitor` and :class:`MarkVisitor`. Every
``visit_*`` method is abstract, so a renderer that forgets a node or mark
variant cannot be instantiated and a type checker reports the omission.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from resumark.ast.nodes import (
    Bold,
    BulletList,
    Doc,
    Italic,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Text,
    Underline,
)
from resumark.exceptions import ValidationError


class NodeVisitor(ABC):
    """Abstract base class for document node visitors.

    Examples
    --------
    Visitor that collects the plain text of a tree:

        >>> class PlainText(NodeVisitor):
        ...     def visit_doc(self, node):
        ...         return "".join(child.accept(self) for child in node.children)
        ...     visit_paragraph = visit_bullet_list = visit_ordered_list = visit_list_item = visit_doc
        ...     def visit_text(self, node):
        ...         return node.content
        >>> Doc(children=[Paragraph(children=[Text("hi")])]).accept(PlainText())
        'hi'

    """

    @abstractmethod
    def visit_doc(self, node: Doc) -> Any:
        """Visit a Doc node.

        Parameters
        ----------
        node : Doc
            The root node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text leaf.

        Parameters
        ----------
        node : Text
            The leaf to visit, including its marks

        Returns
        -------
        Any
            Result of processing this node

        """
        pass


class MarkVisitor(ABC):
    """Abstract base class for mark visitors.

    Each method receives the mark and the text rendered so far and returns
    the wrapped text.

    """

    @abstractmethod
    def visit_bold(self, mark: Bold, text: str) -> str:
        """Wrap ``text`` in bold formatting."""
        pass

    @abstractmethod
    def visit_italic(self, mark: Italic, text: str) -> str:
        """Wrap ``text`` in italic formatting."""
        pass

    @abstractmethod
    def visit_underline(self, mark: Underline, text: str) -> str:
        """Wrap ``text`` in underline formatting."""
        pass

    @abstractmethod
    def visit_link(self, mark: Link, text: str) -> str:
        """Wrap ``text`` in a hyperlink.

        Parameters
        ----------
        mark : Link
            Link mark with href/target/class attributes
        text : str
            Already rendered link body

        Returns
        -------
        str
            The hyperlink markup

        """
        pass


class ValidationVisitor(NodeVisitor):
    """Check a tree against the structural rules of the document model.

    The trusted tree parser never runs this; it backs the opt-in strict mode
    of :class:`~resumark.parsers.tree.TreeParser` and can be used directly by
    callers that receive trees from untrusted producers.

    Rules
    -----
    - Doc children are Paragraph, BulletList or OrderedList
    - Paragraph children are Text
    - BulletList / OrderedList children are ListItem
    - ListItem children are Paragraph, BulletList or OrderedList
    - Text content is a string and every mark is a Mark

    Parameters
    ----------
    strict : bool, default = True
        Raise on the first violation. When False, violations are collected in
        ``errors`` instead.

    Examples
    --------
        >>> validator = ValidationVisitor(strict=False)
        >>> Doc(children=[Text("loose")]).accept(validator)
        >>> validator.errors
        ['Doc children must be block nodes, got Text']

    """

    _BLOCKS = (Paragraph, BulletList, OrderedList)

    def __init__(self, strict: bool = True):
        """Initialize the validator."""
        self.strict = strict
        self.errors: list[str] = []

    def _add_error(self, message: str) -> None:
        if self.strict:
            raise ValidationError(message)
        self.errors.append(message)

    def _check_children(self, node: Node, children: Any, allowed: tuple[type, ...], description: str) -> None:
        name = type(node).__name__
        for child in children:
            if not isinstance(child, allowed):
                self._add_error(f"{name} children must be {description}, got {type(child).__name__}")
                continue
            child.accept(self)

    def visit_doc(self, node: Doc) -> None:
        self._check_children(node, node.children, self._BLOCKS, "block nodes")

    def visit_paragraph(self, node: Paragraph) -> None:
        self._check_children(node, node.children, (Text,), "text nodes")

    def visit_bullet_list(self, node: BulletList) -> None:
        self._check_children(node, node.children, (ListItem,), "list items")

    def visit_ordered_list(self, node: OrderedList) -> None:
        if not isinstance(node.start, int) or isinstance(node.start, bool):
            self._add_error(f"OrderedList start must be an integer, got {node.start!r}")
        self._check_children(node, node.children, (ListItem,), "list items")

    def visit_list_item(self, node: ListItem) -> None:
        self._check_children(node, node.children, self._BLOCKS, "block nodes")

    def visit_text(self, node: Text) -> None:
        if not isinstance(node.content, str):
            self._add_error(f"Text content must be a string, got {type(node.content).__name__}")
        for mark in node.marks:
            if not isinstance(mark, (Bold, Italic, Underline, Link)):
                self._add_error(f"Text marks must be marks, got {type(mark).__name__}")
