"""Run the rule over tree dumps on disk."""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from . import config as config_module, loader, rule, types
from .logging import RunLogger
from .report import Reporter


@dataclass
class LintResult:
    """Outcome of linting a set of paths."""

    diagnostics: List[types.Diagnostic] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.diagnostics and not self.errors


def _matches(name: str, patterns: Sequence[str]) -> bool:
    return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)


def _walk_dump_files(root: Path, include: Sequence[str], exclude: Sequence[str]) -> Iterable[Path]:
    for path in root.rglob("*"):
        if not path.is_file() or not _matches(path.name, include):
            continue
        if _matches(path.relative_to(root).as_posix(), exclude):
            continue
        yield path


def discover_files(
    paths: Iterable[str | Path],
    include: Sequence[str] = config_module.FilesConfig.include,
    exclude: Sequence[str] = (),
) -> List[Path]:
    """Expand *paths* into the tree dumps to lint.

    Files named explicitly are always kept; directories are searched
    recursively for names matching *include*.
    """

    found: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found.update(_walk_dump_files(path, include, exclude))
        else:
            found.add(path)
    return sorted(found)


def lint_file(path: str | Path, *, sink: rule.Sink | None = None) -> List[types.Diagnostic]:
    """Lint a single dump; raises :class:`loader.TreeFormatError` or ``OSError``."""

    diagnostics: List[types.Diagnostic] = []

    def collect(diagnostic: types.Diagnostic) -> None:
        diagnostics.append(diagnostic)
        if sink is not None:
            sink(diagnostic)

    tree = loader.load_tree(path)
    rule.check_tree(tree, collect, path=Path(path).as_posix())
    return diagnostics


def lint_paths(
    paths: Iterable[str | Path],
    config: config_module.Config | None = None,
    logger: RunLogger | None = None,
    *,
    reporter: Reporter | None = None,
) -> LintResult:
    """Lint every dump under *paths*, continuing past files that fail to load."""

    cfg = config or config_module.Config.default()
    files = discover_files(paths, cfg.files.include, cfg.files.exclude)
    result = LintResult()
    if logger:
        logger.log_event("lint.start", files=len(files), enabled=cfg.rule.enabled)

    for path in files:
        display = path.as_posix()
        result.files.append(display)
        if reporter is not None:
            reporter.file_checked()
        if not cfg.rule.enabled:
            continue
        try:
            diagnostics = lint_file(path, sink=reporter)
        except (loader.TreeFormatError, OSError) as exc:
            result.errors[display] = str(exc)
            if reporter is not None:
                reporter.file_failed(display, str(exc))
            if logger:
                logger.log_event("file.error", path=display, error=str(exc))
            continue
        result.diagnostics.extend(diagnostics)
        if logger:
            logger.log_event("file.checked", path=display, offenses=len(diagnostics))

    if logger:
        logger.log_json("diagnostics", [diagnostic.to_dict() for diagnostic in result.diagnostics])
        logger.log_event(
            "lint.finish",
            files=len(result.files),
            offenses=len(result.diagnostics),
            errors=len(result.errors),
        )
    return result


__all__ = ["LintResult", "discover_files", "lint_file", "lint_paths"]
