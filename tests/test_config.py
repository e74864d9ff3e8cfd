# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path

import pytest

from cornfarm.config import resolve_config


def test_defaults_to_home_corn(_isolated_home):
    cfg = resolve_config()
    assert cfg.save_dir == _isolated_home / "corn"
    assert cfg.save_path == _isolated_home / "corn" / "save.txt"


def test_ini_in_save_dir_is_read(_isolated_home, tmp_path):
    conf = _isolated_home / "corn"
    conf.mkdir()
    (conf / "settings.ini").write_text(
        f"[PATHS]\nSAVE_DIR = {tmp_path / 'farm'}\nSAVE_FILE = slot1.txt\n",
        encoding="utf-8",
    )

    cfg = resolve_config()

    assert cfg.save_path == tmp_path / "farm" / "slot1.txt"


def test_ini_expands_user(_isolated_home, tmp_path):
    ini = tmp_path / "custom.ini"
    ini.write_text("[PATHS]\nSAVE_DIR = ~/elsewhere\n", encoding="utf-8")

    cfg = resolve_config(config_path=str(ini))

    assert cfg.save_dir == _isolated_home / "elsewhere"


def test_env_beats_ini_and_flag_beats_env(tmp_path, monkeypatch):
    ini = tmp_path / "custom.ini"
    ini.write_text(f"[PATHS]\nSAVE_DIR = {tmp_path / 'ini'}\n", encoding="utf-8")
    monkeypatch.setenv("CORN_CONFIG", str(ini))
    assert resolve_config().save_dir == tmp_path / "ini"

    monkeypatch.setenv("CORN_SAVE_DIR", str(tmp_path / "env"))
    assert resolve_config().save_dir == tmp_path / "env"

    assert resolve_config(save_dir=str(tmp_path / "flag")).save_dir == tmp_path / "flag"


def test_missing_explicit_config_exits(tmp_path):
    with pytest.raises(SystemExit):
        resolve_config(config_path=str(tmp_path / "nope.ini"))


def test_missing_default_config_is_fine(_isolated_home):
    assert not Path(_isolated_home / "corn" / "settings.ini").exists()
    assert resolve_config().save_file == "save.txt"
