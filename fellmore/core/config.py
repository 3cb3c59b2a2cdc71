from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
import yaml


CONFIG_FILENAME = "fellmore.yaml"
CONFIG_ENV = "FELLMORE_CONFIG"


@dataclass(frozen=True)
class FellmoreConfig:
    prompt: str = "> "
    clear_screen: bool = True
    audit_enabled: bool = False
    audit_path: str = "./fellmore_audit.jsonl"


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {p} must contain a mapping")
    return raw


def resolve_config_path(config_path: str | None) -> Path | None:
    if config_path:
        # An explicit path is returned even when missing so load_config reports it.
        return Path(config_path)

    env_path = os.getenv(CONFIG_ENV)
    if env_path:
        env_candidate = Path(env_path)
        if env_candidate.exists():
            return env_candidate

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate

    return None


def _section(raw: dict[str, Any], name: str, config_path: Path) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' in {config_path} must be a mapping")
    return section


def _flag(section: dict[str, Any], key: str, default: bool, config_path: Path) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Config value '{key}' in {config_path} must be true or false, got {value!r}")
    return value


def load_config(path: str | Path | None) -> FellmoreConfig:
    if path is None:
        return FellmoreConfig()

    config_path = Path(path).resolve()
    raw = load_yaml(config_path)
    game = _section(raw, "game", config_path)
    audit = _section(raw, "audit", config_path)
    defaults = FellmoreConfig()

    audit_path = str(audit.get("path", defaults.audit_path))
    if not Path(audit_path).is_absolute():
        audit_path = str((config_path.parent / audit_path).resolve())

    return FellmoreConfig(
        prompt=str(game.get("prompt", defaults.prompt)),
        clear_screen=_flag(game, "clear_screen", defaults.clear_screen, config_path),
        audit_enabled=_flag(audit, "enabled", defaults.audit_enabled, config_path),
        audit_path=audit_path,
    )
