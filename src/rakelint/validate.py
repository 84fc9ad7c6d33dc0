"""Shape checks for dumped syntax trees."""

from __future__ import annotations

from typing import Any, Sequence


class TreeFormatError(ValueError):
    """Raised when a tree dump does not describe a valid node."""


def require_type(raw: Any) -> str:
    if not isinstance(raw, str) or not raw:
        raise TreeFormatError(f"Node type must be a non-empty string, got {raw!r}.")
    return raw


def require_arity(node_type: str, children: Sequence[Any], *, minimum: int, maximum: int | None = None) -> None:
    """Ensure a node has between *minimum* and *maximum* children."""

    count = len(children)
    if count < minimum:
        raise TreeFormatError(f"'{node_type}' node needs at least {minimum} children, got {count}.")
    if maximum is not None and count > maximum:
        raise TreeFormatError(f"'{node_type}' node takes at most {maximum} children, got {count}.")


def require_name(node_type: str, raw: Any) -> str:
    """Method names and literal values are strings (symbols lose their colon)."""

    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise TreeFormatError(f"'{node_type}' node expects a scalar value, got {raw!r}.")
    if isinstance(raw, str) and node_type != "str" and raw.startswith(":"):
        return raw[1:]
    return str(raw)


def require_location(raw: Any) -> tuple[int, int]:
    """Accept ``{line, column}`` mappings or ``[line, column]`` pairs."""

    if isinstance(raw, dict):
        line, column = raw.get("line"), raw.get("column", 0)
    elif isinstance(raw, (list, tuple)) and 1 <= len(raw) <= 2:
        line = raw[0]
        column = raw[1] if len(raw) == 2 else 0
    else:
        raise TreeFormatError(f"Malformed location {raw!r}.")
    if not isinstance(line, int) or not isinstance(column, int) or isinstance(line, bool):
        raise TreeFormatError(f"Location line and column must be integers, got {raw!r}.")
    if line < 1 or column < 0:
        raise TreeFormatError(f"Location out of range: {raw!r}.")
    return line, column
