"""Require a ``desc`` before every Rake task definition.

A description documents the task and makes ``rake -T`` list it. The default
task is exempt because it runs as plain ``rake`` without a task name.

Bad::

    task :do_something

    task :do_something do
    end

Good::

    desc 'Do something'
    task :do_something

    desc 'Do something'
    task :do_something do
    end
"""

from __future__ import annotations

from typing import Callable, Optional

from . import matcher, types
from .context import resolve_effective_sequence
from .names import extract_task_name
from .tree import Node, link_parents, walk

MESSAGE = "Describe the task with the description-annotation method."

Sink = Callable[[types.Diagnostic], None]


def inspect_task(node: Node) -> Optional[types.TaskCandidate]:
    """Derive the name and description status of a ``task`` call."""

    if not matcher.is_task_declaration(node):
        return None
    _sequence, has_description = resolve_effective_sequence(node)
    return types.TaskCandidate(
        node=node,
        name=extract_task_name(node),
        has_description=has_description,
    )


def evaluate(node: Node, *, path: str | None = None) -> Optional[types.Diagnostic]:
    """Return a diagnostic if *node* is an undocumented, non-default task."""

    candidate = inspect_task(node)
    if candidate is None or candidate.has_description:
        return None
    if candidate.name == matcher.DEFAULT_TASK:
        return None
    return types.Diagnostic(message=MESSAGE, location=node.location, path=path, node=node)


def check_tree(root: Node, sink: Sink, *, path: str | None = None) -> int:
    """Evaluate every node under *root* and feed offenses to *sink* in order."""

    link_parents(root)
    count = 0
    for node in walk(root):
        diagnostic = evaluate(node, path=path)
        if diagnostic is not None:
            sink(diagnostic)
            count += 1
    return count


__all__ = ["MESSAGE", "Sink", "check_tree", "evaluate", "inspect_task"]
