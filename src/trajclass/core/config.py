from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

_KNOWN_KEYS = {"dataset", "show_classifications", "log_level"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(slots=True)
class RunConfig:
    dataset: Path | None = None
    show_classifications: bool = False
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _load_yaml(path: Path) -> dict[str, Any]:
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    return loaded


def _parse_bool(raw: Any, *, field_name: str) -> bool:
    if raw is None:
        return False
    if not isinstance(raw, bool):
        raise ValueError(f"{field_name} must be a boolean")
    return raw


def _parse_log_level(raw: Any) -> str:
    level = str(raw or "WARNING").strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"log_level must be one of {'|'.join(sorted(_LOG_LEVELS))}; got: {level}")
    return level


def _parse_dataset_path(raw: Any, *, source_path: Path) -> Path | None:
    if raw is None:
        return None
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError("dataset must be a non-empty string")
    path = Path(raw)
    if path.is_absolute():
        return path
    return (source_path.parent / path).resolve()


def parse_config(data: dict[str, Any], *, source_path: Path) -> RunConfig:
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return RunConfig(
        dataset=_parse_dataset_path(data.get("dataset"), source_path=source_path),
        show_classifications=_parse_bool(data.get("show_classifications"), field_name="show_classifications"),
        log_level=_parse_log_level(data.get("log_level")),
    )


def load_config(path: Path) -> RunConfig:
    return parse_config(_load_yaml(path), source_path=path.resolve())


__all__ = ["RunConfig", "load_config", "parse_config"]
