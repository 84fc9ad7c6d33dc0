"""Classification of ``task`` and ``desc`` calls."""

from __future__ import annotations

from .tree import CallNode, Node

TASK_METHOD = "task"
DESC_METHOD = "desc"
DEFAULT_TASK = "default"


def _is_bare_call(node: Node | None, method_name: str) -> bool:
    return isinstance(node, CallNode) and node.receiver is None and node.method_name == method_name


def is_task_declaration(node: Node | None) -> bool:
    """``task ...`` with no explicit receiver and any arguments."""

    return _is_bare_call(node, TASK_METHOD)


def is_description(node: Node | None) -> bool:
    """``desc ...`` with no explicit receiver."""

    return _is_bare_call(node, DESC_METHOD)
