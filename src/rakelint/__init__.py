"""rakelint package."""

from . import (
    config,
    context,
    lint,
    loader,
    logging,
    main,
    matcher,
    names,
    report,
    rule,
    tree,
    types,
    validate,
)  # noqa: F401

__all__ = [
    "config",
    "context",
    "lint",
    "loader",
    "logging",
    "main",
    "matcher",
    "names",
    "report",
    "rule",
    "tree",
    "types",
    "validate",
]
