"""Syntax tree model consumed by the rule.

Trees come from an external Ruby parser. Each node kind is its own class and
exposes only the fields meaningful to it; ``children`` gives the generic
ordered view used for sibling reasoning.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Tuple


class NodeKind(enum.Enum):
    CALL = "call"
    BLOCK = "block"
    SYMBOL = "symbol"
    STRING = "string"
    MAPPING = "mapping"
    PAIR = "pair"
    OTHER = "other"


@dataclass(frozen=True)
class Location:
    """Source position of a node (1-based line, 0-based column)."""

    line: int
    column: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class Node:
    """Base class for every node variant.

    ``parent`` is filled in by :func:`link_parents`; nodes never own their
    parent, they only point back at it.
    """

    kind: ClassVar[NodeKind] = NodeKind.OTHER
    parent: Optional["Node"] = None
    location: Optional[Location] = None

    @property
    def children(self) -> Tuple["Node", ...]:
        return ()


@dataclass(eq=False)
class CallNode(Node):
    """Method call: ``receiver.method_name(*arguments)``."""

    kind: ClassVar[NodeKind] = NodeKind.CALL

    method_name: str
    receiver: Optional[Node] = None
    arguments: Tuple[Node, ...] = ()
    location: Optional[Location] = None

    @property
    def children(self) -> Tuple[Node, ...]:
        if self.receiver is None:
            return tuple(self.arguments)
        return (self.receiver, *self.arguments)


@dataclass(eq=False)
class BlockNode(Node):
    """Call with an attached ``do ... end`` block.

    The call the block belongs to sits at index 0 of ``children``.
    """

    kind: ClassVar[NodeKind] = NodeKind.BLOCK

    call: Node
    body: Tuple[Node, ...] = ()
    location: Optional[Location] = None

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.call, *self.body)


@dataclass(eq=False)
class SymbolNode(Node):
    kind: ClassVar[NodeKind] = NodeKind.SYMBOL

    value: str
    location: Optional[Location] = None


@dataclass(eq=False)
class StringNode(Node):
    kind: ClassVar[NodeKind] = NodeKind.STRING

    value: str
    location: Optional[Location] = None


@dataclass(eq=False)
class PairNode(Node):
    kind: ClassVar[NodeKind] = NodeKind.PAIR

    key: Node
    value: Node
    location: Optional[Location] = None

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.key, self.value)


@dataclass(eq=False)
class MappingNode(Node):
    """Hash literal; entries are usually :class:`PairNode` instances."""

    kind: ClassVar[NodeKind] = NodeKind.MAPPING

    entries: Tuple[Node, ...] = ()
    location: Optional[Location] = None

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self.entries)


@dataclass(eq=False)
class OtherNode(Node):
    """Any construct the rule does not inspect (``begin``, ``args``, ...)."""

    type: str
    nodes: Tuple[Node, ...] = ()
    location: Optional[Location] = None

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self.nodes)


def link_parents(root: Node) -> Node:
    """Point every descendant of *root* at its parent and return *root*."""

    root.parent = None
    stack = [root]
    while stack:
        node = stack.pop()
        for child in node.children:
            child.parent = node
            stack.append(child)
    return root


def walk(root: Node) -> Iterator[Node]:
    """Yield *root* and its descendants depth-first, in child order."""

    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def index_of(nodes: Tuple[Node, ...], node: Node) -> Optional[int]:
    """Position of *node* in *nodes* by identity, or ``None``."""

    for idx, candidate in enumerate(nodes):
        if candidate is node:
            return idx
    return None


__all__ = [
    "BlockNode",
    "CallNode",
    "Location",
    "MappingNode",
    "Node",
    "NodeKind",
    "OtherNode",
    "PairNode",
    "StringNode",
    "SymbolNode",
    "index_of",
    "link_parents",
    "walk",
]
