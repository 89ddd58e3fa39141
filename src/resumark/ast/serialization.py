#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumark/ast/serialization.py
"""Editor JSON serialization and deserialization for document trees.

The wire format is the JSON document produced by the rich-text editor in the
resume web front end: every node is an object with a ``type`` discriminant,
container nodes list their children under ``content``, text leaves carry
``text`` and an optional ``marks`` array, and links and ordered lists keep
their attributes under ``attrs``.

Examples
--------
Serialize a tree:

    >>> from resumark.ast import Bold, Doc, Paragraph, Text
    >>> doc = Doc(children=[Paragraph(children=[Text("hi", marks=[Bold()])])])
    >>> ast_to_json(doc)
    '{"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "hi", "marks": [{"type": "bold"}]}]}]}'

Deserialize it again:

    >>> dict_to_ast(json.loads(ast_to_json(doc))) == doc
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from resumark.ast.nodes import (
    MARK_CLASSES,
    NODE_CLASSES,
    Doc,
    Link,
    Mark,
    Node,
    OrderedList,
    Text,
    get_node_children,
)
from resumark.exceptions import ValidationError

logger = logging.getLogger(__name__)


def mark_to_dict(mark: Mark) -> dict[str, Any]:
    """Convert a mark to its editor JSON object.

    Parameters
    ----------
    mark : Mark
        Mark to convert

    Returns
    -------
    dict
        ``{"type": ...}`` plus ``attrs`` for links

    """
    result: dict[str, Any] = {"type": mark.mark_type}
    if isinstance(mark, Link):
        result["attrs"] = {"href": mark.href, "target": mark.target, "class": mark.class_}
    return result


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node (and its subtree) to editor JSON objects.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        JSON-compatible dictionary

    """
    if isinstance(node, Text):
        result: dict[str, Any] = {"type": node.node_type, "text": node.content}
        if node.marks:
            result["marks"] = [mark_to_dict(mark) for mark in node.marks]
        return result

    result = {"type": node.node_type, "content": [ast_to_dict(child) for child in get_node_children(node)]}
    if isinstance(node, OrderedList):
        result["attrs"] = {"start": node.start}
    return result


def ast_to_json(node: Node, indent: Optional[int] = None) -> str:
    """Serialize a node to an editor JSON string.

    Parameters
    ----------
    node : Node
        Node to serialize
    indent : int or None, default = None
        Indentation passed to ``json.dumps``

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


def _fail(message: str, strict_mode: bool, value: Any = None) -> None:
    if strict_mode:
        raise ValidationError(message, parameter_name="tree", parameter_value=value)


def dict_to_mark(data: Any, strict_mode: bool = False) -> Optional[Mark]:
    """Build a mark from an editor JSON object.

    Parameters
    ----------
    data : Any
        Decoded JSON value
    strict_mode : bool, default = False
        Raise ValidationError on malformed input instead of skipping it

    Returns
    -------
    Mark or None
        The mark, or None when the value is not a recognizable mark

    """
    if not isinstance(data, dict):
        _fail(f"Mark must be an object, got {type(data).__name__}", strict_mode, data)
        return None

    mark_type = data.get("type")
    mark_class = MARK_CLASSES.get(mark_type) if isinstance(mark_type, str) else None
    if mark_class is None:
        _fail(f"Unknown mark type: {mark_type!r}", strict_mode, data)
        return None

    if mark_class is Link:
        attrs = data.get("attrs")
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(href=attrs.get("href"), target=attrs.get("target"), class_=attrs.get("class"))

    return mark_class()


def _children_from(data: dict[str, Any], strict_mode: bool) -> list[Node]:
    content = data.get("content")
    if content is None:
        return []
    if not isinstance(content, list):
        _fail(f"'content' must be an array, got {type(content).__name__}", strict_mode, content)
        return []

    children: list[Node] = []
    for child in content:
        node = dict_to_ast(child, strict_mode=strict_mode)
        if node is not None:
            children.append(node)
    return children


def dict_to_ast(data: Any, strict_mode: bool = False) -> Optional[Node]:
    """Build a node (and its subtree) from editor JSON objects.

    No structural rules are enforced: a paragraph may hold a list, a list may
    hold text, and so on. Values that cannot be mapped to any node at all
    (unknown ``type``, non-object entries) are skipped unless ``strict_mode``
    is set.

    Parameters
    ----------
    data : Any
        Decoded JSON value
    strict_mode : bool, default = False
        Raise ValidationError on unknown types and malformed fields

    Returns
    -------
    Node or None
        The node, or None when the value is not a recognizable node

    """
    if not isinstance(data, dict):
        _fail(f"Node must be an object, got {type(data).__name__}", strict_mode, data)
        return None

    node_type = data.get("type")
    node_class = NODE_CLASSES.get(node_type) if isinstance(node_type, str) else None
    if node_class is None:
        _fail(f"Unknown node type: {node_type!r}", strict_mode, data)
        return None

    if node_class is Text:
        text = data.get("text")
        if not isinstance(text, str):
            _fail(f"Text node 'text' must be a string, got {type(text).__name__}", strict_mode, text)
            text = "" if text is None else str(text)
        raw_marks = data.get("marks")
        if raw_marks is not None and not isinstance(raw_marks, list):
            _fail(f"'marks' must be an array, got {type(raw_marks).__name__}", strict_mode, raw_marks)
            raw_marks = None
        marks = [mark for mark in (dict_to_mark(m, strict_mode) for m in raw_marks or []) if mark is not None]
        return Text(content=text, marks=marks)

    children = _children_from(data, strict_mode)

    if node_class is OrderedList:
        attrs = data.get("attrs")
        start = attrs.get("start", 1) if isinstance(attrs, dict) else 1
        if not isinstance(start, int) or isinstance(start, bool):
            _fail(f"orderedList 'start' must be an integer, got {start!r}", strict_mode, start)
            start = 1
        return OrderedList(children=children, start=start)

    return node_class(children=children)  # type: ignore[call-arg]


def dict_to_doc(data: Any, strict_mode: bool = False) -> Doc:
    """Build a Doc from the decoded root of an editor JSON document.

    The root's ``content`` is read as the document body whatever its ``type``
    says; a root that is not an object yields an empty Doc. In strict mode the
    root must be a ``doc`` object.

    Parameters
    ----------
    data : Any
        Decoded JSON root
    strict_mode : bool, default = False
        Raise ValidationError on a malformed root or subtree

    Returns
    -------
    Doc
        The document

    """
    if not isinstance(data, dict):
        _fail(f"Document root must be an object, got {type(data).__name__}", strict_mode, data)
        logger.debug("Editor JSON root is %s, returning empty document", type(data).__name__)
        return Doc()

    if data.get("type") != Doc.node_type:
        _fail(f"Document root must have type 'doc', got {data.get('type')!r}", strict_mode, data)

    return Doc(children=_children_from(data, strict_mode))
