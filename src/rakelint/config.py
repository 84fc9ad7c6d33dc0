"""Configuration loading helpers for rakelint."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

OUTPUT_FORMATS = ("text", "json")


def _filter_kwargs(data: Dict[str, Any], *, allowed: set[str]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if key in allowed}


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping.")
    return section


def _patterns(value: Any, *, key: str) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{key}' must be a glob or a list of globs.")
    return tuple(value)


@dataclass(frozen=True)
class RuleConfig:
    enabled: bool = True


@dataclass(frozen=True)
class FilesConfig:
    include: Tuple[str, ...] = ("*.yaml", "*.yml", "*.json")
    exclude: Tuple[str, ...] = ()


@dataclass(frozen=True)
class OutputConfig:
    format: str = "text"

    def __post_init__(self) -> None:
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format '{self.format}', expected one of {', '.join(OUTPUT_FORMATS)}.")


@dataclass(frozen=True)
class LoggingConfig:
    enabled: bool = False
    dir: str = ".rakelint_runs"
    stream: bool = False


@dataclass(frozen=True)
class Config:
    """Aggregated configuration for a lint run."""

    rule: RuleConfig = field(default_factory=RuleConfig)
    files: FilesConfig = field(default_factory=FilesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> "Config":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        rule = RuleConfig(**_filter_kwargs(_section(data, "rule"), allowed=set(RuleConfig.__annotations__.keys())))
        files_raw = _filter_kwargs(_section(data, "files"), allowed=set(FilesConfig.__annotations__.keys()))
        files = FilesConfig(**{key: _patterns(value, key=key) for key, value in files_raw.items()})
        output = OutputConfig(**_filter_kwargs(_section(data, "output"), allowed=set(OutputConfig.__annotations__.keys())))
        logging_cfg = LoggingConfig(
            **_filter_kwargs(_section(data, "logging"), allowed=set(LoggingConfig.__annotations__.keys()))
        )
        return cls(rule=rule, files=files, output=output, logging=logging_cfg)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Config":
        """Load configuration from *path* if it exists, otherwise defaults."""

        if path is None:
            path = Path("rakelint.yaml")
        else:
            path = Path(path)
        if not path.exists():
            return cls.default()
        raw = yaml.safe_load(path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ValueError("Config file must contain a mapping at the top level.")
        return cls.from_dict(raw)


__all__ = [
    "Config",
    "FilesConfig",
    "LoggingConfig",
    "OutputConfig",
    "RuleConfig",
]
