"""
Tool settings and config file resolution.

Settings live in an optional YAML file; everything has a default so the tool
works without one.
"""
import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, ValidationError

APP_VERSION = "1.0.0"

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "touch.conf"
DEFAULT_SETTINGS_PATH = Path("~/.autotouch.yml")

CONFIG_ENV = "AUTOTOUCH_CONFIG"
SETTINGS_ENV = "AUTOTOUCH_SETTINGS"


class SettingsError(Exception):
    pass


class Settings(BaseModel):
    config_path: Optional[Path] = None
    comment_styles: Dict[str, str] = {}
    debug: bool = False


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from ``path``, $AUTOTOUCH_SETTINGS or ~/.autotouch.yml.

    A missing file gives the defaults. Unparseable YAML or values of the wrong
    shape raise SettingsError.
    """
    raw = path or os.environ.get(SETTINGS_ENV) or DEFAULT_SETTINGS_PATH
    settings_path = Path(raw).expanduser()
    if not settings_path.is_file():
        return Settings()
    try:
        data = yaml.safe_load(settings_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Could not read settings file {settings_path}: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {settings_path} must contain a mapping")
    try:
        return Settings(**data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e


def resolve_config_path(explicit: Optional[Path] = None, settings: Optional[Settings] = None) -> Path:
    # --config > $AUTOTOUCH_CONFIG > settings file > touch.conf shipped with the package
    if explicit:
        return Path(explicit).expanduser()
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env).expanduser()
    if settings is not None and settings.config_path:
        return settings.config_path.expanduser()
    return DEFAULT_CONFIG_PATH
