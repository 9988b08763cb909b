"""Load env and settings.yaml configuration."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from grindbreaker.log import get_logger

log = get_logger(__name__)

load_dotenv()

APP_NAME = "GrindBreaker"
CONFIG_DIR: Path = Path(__file__).resolve().parent.parent / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
DEFAULT_BINDING_PREFIX = "GRIND_BREAKER_"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Read settings.yaml; a missing or unreadable file means no overrides."""
    path = path or SETTINGS_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: expected a mapping", path)
        return {}
    return data


def _app_data_root() -> Path:
    if sys.platform.startswith("win"):
        appdata = get_env("APPDATA")
        if appdata:
            return Path(appdata)
    xdg = get_env("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


def get_data_dir(settings: dict[str, Any] | None = None) -> Path:
    """Env var, then settings.yaml, then the platform app-data directory."""
    override = get_env("GRIND_BREAKER_DATA_DIR")
    if override:
        return Path(override).expanduser()
    settings = load_settings() if settings is None else settings
    if settings.get("data_dir"):
        return Path(str(settings["data_dir"])).expanduser()
    return _app_data_root() / APP_NAME


def get_binding_prefix(settings: dict[str, Any] | None = None) -> str:
    override = get_env("GRIND_BREAKER_BINDING_PREFIX")
    if override:
        return override
    settings = load_settings() if settings is None else settings
    return str(settings.get("binding_prefix") or DEFAULT_BINDING_PREFIX)


DATA_DIR: Path = get_data_dir()


def ensure_dirs(data_dir: Path | None = None) -> Path:
    d = data_dir or DATA_DIR
    d.mkdir(parents=True, exist_ok=True)
    return d
