"""Collect and render diagnostics."""

from __future__ import annotations

import json
from typing import Dict, List

from . import types


class Reporter:
    """Diagnostic sink that keeps offenses in the order they arrive."""

    def __init__(self) -> None:
        self.diagnostics: List[types.Diagnostic] = []
        self.errors: Dict[str, str] = {}
        self.files_checked = 0

    def __call__(self, diagnostic: types.Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def file_checked(self) -> None:
        self.files_checked += 1

    def file_failed(self, path: str, message: str) -> None:
        self.errors[path] = message

    def summary(self) -> Dict[str, int]:
        return {
            "files": self.files_checked,
            "offenses": len(self.diagnostics),
            "errors": len(self.errors),
        }

    def render_text(self) -> str:
        lines = [str(diagnostic) for diagnostic in self.diagnostics]
        counts = self.summary()
        noun = "file" if counts["files"] == 1 else "files"
        tail = f"{counts['files']} {noun} inspected, {counts['offenses']} offenses detected"
        if counts["errors"]:
            tail += f", {counts['errors']} could not be loaded"
        lines.append(tail)
        return "\n".join(lines) + "\n"

    def render_json(self) -> str:
        payload = {
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
            "errors": dict(self.errors),
            "summary": self.summary(),
        }
        return json.dumps(payload, indent=2, sort_keys=True) + "\n"

    def render(self, fmt: str) -> str:
        if fmt == "json":
            return self.render_json()
        return self.render_text()
