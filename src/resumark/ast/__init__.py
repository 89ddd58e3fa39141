#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/ast/__init__.py
"""Document model for rich-text resume fragments.

The model is a small closed set of node and mark classes shared by every
parser and renderer in resumark:

    >>> from resumark.ast import Bold, Doc, Paragraph, Text
    >>> doc = Doc(children=[
    ...     Paragraph(children=[
    ...         Text("This is "),
    ...         Text("bold", marks=[Bold()]),
    ...         Text(" text"),
    ...     ])
    ... ])

"""

from resumark.ast.nodes import (
    MARK_CLASSES,
    NODE_CLASSES,
    Bold,
    BulletList,
    Doc,
    Italic,
    Link,
    ListItem,
    Mark,
    Node,
    OrderedList,
    Paragraph,
    Text,
    Underline,
    get_node_children,
)
from resumark.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, dict_to_doc
from resumark.ast.visitors import MarkVisitor, NodeVisitor, ValidationVisitor

__all__ = [
    # Nodes
    "Node",
    "Doc",
    "Paragraph",
    "BulletList",
    "OrderedList",
    "ListItem",
    "Text",
    # Marks
    "Mark",
    "Bold",
    "Italic",
    "Underline",
    "Link",
    # Registries
    "NODE_CLASSES",
    "MARK_CLASSES",
    "get_node_children",
    # Visitors
    "NodeVisitor",
    "MarkVisitor",
    "ValidationVisitor",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "dict_to_doc",
]
