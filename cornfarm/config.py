# -*- coding: utf-8 -*-
"""Save location config (flag > env > settings.ini > $HOME/corn)."""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_SAVE_FILE = "save.txt"
CONFIG_NAME = "settings.ini"


@dataclass(frozen=True)
class GameConfig:
    save_dir: Path
    save_file: str = DEFAULT_SAVE_FILE

    @property
    def save_path(self) -> Path:
        return self.save_dir / self.save_file


def home_dir() -> Path:
    home = os.environ.get("HOME", "").strip()
    return Path(home) if home else Path.home()


def default_save_dir() -> Path:
    return home_dir() / "corn"


def default_config_path() -> Path:
    return default_save_dir() / CONFIG_NAME


def _expand(val: Optional[str]) -> Optional[str]:
    if not val:
        return None
    return os.path.expanduser(val.strip())


def _cfg_get(cfg: configparser.ConfigParser, section: str, key: str) -> Optional[str]:
    try:
        val = cfg.get(section, key, fallback="").strip()
    except configparser.Error:
        val = ""
    return _expand(val) if val else None


def load_ini(path: Path, *, required: bool = False) -> configparser.ConfigParser:
    cfg = configparser.ConfigParser()
    if not path.exists():
        if required:
            raise SystemExit(f"Missing config: {path}")
        return cfg
    try:
        cfg.read(path, encoding="utf-8")
    except configparser.Error as exc:
        raise SystemExit(f"Bad config {path}: {exc}")
    return cfg


def resolve_config(
    *,
    save_dir: Optional[str] = None,
    config_path: Optional[str] = None,
) -> GameConfig:
    explicit = config_path or os.environ.get("CORN_CONFIG")
    path = Path(_expand(explicit)) if explicit else default_config_path()
    cfg = load_ini(path, required=bool(explicit))

    save_dir = (
        _expand(save_dir)
        or _expand(os.environ.get("CORN_SAVE_DIR"))
        or _cfg_get(cfg, "PATHS", "SAVE_DIR")
    )
    save_file = _cfg_get(cfg, "PATHS", "SAVE_FILE") or DEFAULT_SAVE_FILE

    return GameConfig(
        save_dir=Path(save_dir) if save_dir else default_save_dir(),
        save_file=save_file,
    )
