"""CLI entrypoint for rakelint."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Iterable

from . import config as config_module, lint
from .logging import RunLogger
from .report import Reporter


def _parse_args(args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rakelint",
        description="Report Rake tasks that are not preceded by a desc call.",
    )
    parser.add_argument("paths", nargs="+", help="Tree dump files or directories to search")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML configuration file (defaults to ./rakelint.yaml if omitted)",
    )
    parser.add_argument("--format", choices=config_module.OUTPUT_FORMATS, default=None, help="Report format")
    parser.add_argument("--log-dir", default=None, help="Persist run events and diagnostics under this directory")
    return parser.parse_args(list(args) if args is not None else None)


def main(argv: Iterable[str] | None = None) -> int:
    ns = _parse_args(argv)
    cfg = config_module.Config.load(ns.config)
    if ns.format:
        cfg = replace(cfg, output=config_module.OutputConfig(format=ns.format))
    if ns.log_dir:
        cfg = replace(cfg, logging=replace(cfg.logging, enabled=True, dir=ns.log_dir))

    logger = None
    if cfg.logging.enabled:
        logger = RunLogger(base_dir=cfg.logging.dir, stream=cfg.logging.stream or None)

    reporter = Reporter()
    result = lint.lint_paths(ns.paths, config=cfg, logger=logger, reporter=reporter)
    for path, error in result.errors.items():
        print(f"{path}: {error}", file=sys.stderr)
    rendered = reporter.render(cfg.output.format)
    sys.stdout.write(rendered)
    if logger:
        logger.log_text("report", rendered)

    if result.diagnostics:
        return 1
    if result.errors:
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
