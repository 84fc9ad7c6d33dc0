"""Resolve the statement list a ``task`` call is declared in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from . import matcher
from .tree import BlockNode, Node, index_of


@dataclass(frozen=True)
class EffectiveSequence:
    """Sibling statements around an anchor node.

    ``index`` is ``None`` when the anchor is missing from its parent's
    children, which only happens for inconsistent trees.
    """

    nodes: Tuple[Node, ...]
    index: Optional[int]

    @property
    def anchor(self) -> Optional[Node]:
        if self.index is None:
            return None
        return self.nodes[self.index]

    def preceding(self) -> Optional[Node]:
        if not self.index:
            return None
        return self.nodes[self.index - 1]


def _sequence_around(anchor: Node) -> EffectiveSequence:
    parent = anchor.parent
    if parent is None:
        return EffectiveSequence(nodes=(anchor,), index=0)
    siblings = parent.children
    return EffectiveSequence(nodes=siblings, index=index_of(siblings, anchor))


def resolve_effective_sequence(call: Node) -> Tuple[EffectiveSequence, bool]:
    """Return the effective sequence of *call* and whether a ``desc`` precedes it.

    When *call* is the call a block is attached to (``task :x do ... end``),
    the whole block expression is the statement that needs the description,
    so adjacency is checked one level up. Only one block level is unwrapped.
    """

    parent = call.parent
    anchor = call
    if isinstance(parent, BlockNode) and index_of(parent.children, call) == 0:
        anchor = parent
    sequence = _sequence_around(anchor)
    return sequence, matcher.is_description(sequence.preceding())


__all__ = ["EffectiveSequence", "resolve_effective_sequence"]
