"""Core datatypes for rakelint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .tree import Location, Node


@dataclass(frozen=True)
class TaskCandidate:
    """A ``task`` call under evaluation together with what was derived from it."""

    node: Node
    name: Optional[str]
    has_description: bool


@dataclass(frozen=True)
class Diagnostic:
    """Offense reported for a single node."""

    message: str
    location: Optional[Location] = None
    path: Optional[str] = None
    node: Optional[Node] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "line": self.location.line if self.location else None,
            "column": self.location.column if self.location else None,
            "message": self.message,
        }

    def __str__(self) -> str:
        prefix = ":".join(part for part in (self.path, str(self.location) if self.location else None) if part)
        return f"{prefix}: {self.message}" if prefix else self.message
