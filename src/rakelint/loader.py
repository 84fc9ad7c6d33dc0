"""Load parsed Ruby syntax trees from YAML or JSON dumps.

Nodes follow the ``parser`` gem s-expression layout and may be written as a
list (``["send", null, "task", ["sym", "build"]]``) or as a mapping with a
location (``{type: send, children: [...], loc: {line: 1, column: 0}}``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml

from . import validate
from .tree import (
    BlockNode,
    CallNode,
    Location,
    MappingNode,
    Node,
    OtherNode,
    PairNode,
    StringNode,
    SymbolNode,
    link_parents,
)
from .validate import TreeFormatError

_CALL_TYPES = {"send", "csend"}


def _is_node_data(raw: Any) -> bool:
    return isinstance(raw, dict) or (isinstance(raw, list) and bool(raw))


def _split(raw: Any) -> tuple[str, List[Any], Optional[Location]]:
    if isinstance(raw, dict):
        node_type = validate.require_type(raw.get("type"))
        children = raw.get("children", [])
        if not isinstance(children, list):
            raise TreeFormatError(f"'{node_type}' node children must be a list.")
        location = None
        if raw.get("loc") is not None:
            location = Location(*validate.require_location(raw["loc"]))
        return node_type, children, location
    if isinstance(raw, list) and raw:
        return validate.require_type(raw[0]), list(raw[1:]), None
    raise TreeFormatError(f"Expected a node, got {raw!r}.")


def _build_optional(raw: Any) -> Optional[Node]:
    if raw is None:
        return None
    return _build(raw)


def _build_all(raw_children: Sequence[Any]) -> tuple[Node, ...]:
    return tuple(_build(child) for child in raw_children if child is not None)


def _build(raw: Any) -> Node:
    node_type, children, location = _split(raw)

    if node_type in _CALL_TYPES:
        validate.require_arity(node_type, children, minimum=2)
        return CallNode(
            method_name=validate.require_name(node_type, children[1]),
            receiver=_build_optional(children[0]),
            arguments=_build_all(children[2:]),
            location=location,
        )
    if node_type == "block":
        validate.require_arity(node_type, children, minimum=1)
        return BlockNode(call=_build(children[0]), body=_build_all(children[1:]), location=location)
    if node_type == "sym":
        validate.require_arity(node_type, children, minimum=1, maximum=1)
        return SymbolNode(value=validate.require_name(node_type, children[0]), location=location)
    if node_type == "str":
        validate.require_arity(node_type, children, minimum=1, maximum=1)
        return StringNode(value=validate.require_name(node_type, children[0]), location=location)
    if node_type == "hash":
        return MappingNode(entries=_build_all(children), location=location)
    if node_type == "pair":
        validate.require_arity(node_type, children, minimum=2, maximum=2)
        return PairNode(key=_build(children[0]), value=_build(children[1]), location=location)
    # Scalar children (variable names, integer values) carry nothing the rule reads.
    nodes = tuple(_build(child) for child in children if _is_node_data(child))
    return OtherNode(type=node_type, nodes=nodes, location=location)


def build_tree(data: Any) -> Node:
    """Build a tree from already-decoded dump data and link parents."""

    try:
        root = _build(data)
    except RecursionError as exc:
        raise TreeFormatError(f"Tree dump nests too deeply: {exc}") from exc
    return link_parents(root)


def load_tree(path: str | Path) -> Node:
    """Read a YAML or JSON tree dump from *path*."""

    try:
        text = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(text)
    except (UnicodeDecodeError, yaml.YAMLError, RecursionError) as exc:
        raise TreeFormatError(f"Could not decode tree dump {path}: {exc}") from exc
    if data is None:
        raise TreeFormatError(f"Tree dump {path} is empty.")
    return build_tree(data)


__all__ = ["TreeFormatError", "build_tree", "load_tree"]
