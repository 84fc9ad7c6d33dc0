"""Task name extraction."""

from __future__ import annotations

from typing import Optional

from .tree import CallNode, MappingNode, Node, PairNode, StringNode, SymbolNode


def _literal_value(node: Node) -> Optional[str]:
    if isinstance(node, (SymbolNode, StringNode)):
        return node.value
    return None


def extract_task_name(call: Node) -> Optional[str]:
    """Return the name a ``task`` call declares, or ``None`` if unknown.

    Handles ``task :name``, ``task "name"`` and ``task name => [deps]``; in
    the last form the sole key of the hash is the name.
    """

    if not isinstance(call, CallNode) or not call.arguments:
        return None
    first_arg = call.arguments[0]
    if isinstance(first_arg, MappingNode):
        if len(first_arg.entries) != 1:
            return None
        pair = first_arg.entries[0]
        if not isinstance(pair, PairNode):
            return None
        return _literal_value(pair.key)
    return _literal_value(first_arg)
