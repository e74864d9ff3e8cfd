# -*- coding: utf-8 -*-
from __future__ import annotations

import json
import time

import pytest

from cornfarm.channels import MemoryChannel, Severity
from cornfarm.cli.main import main
from cornfarm.state.models import PlayerState
from cornfarm.state.store import encode

from conftest import read_save


def _seed(save_dir, **fields):
    corn = fields.pop("corn", 0)
    seeds = fields.pop("seeds", 0)
    state = PlayerState(last_run=int(time.time()), **fields)
    state.corn.amount = corn
    state.seeds.amount = seeds
    save_dir.mkdir(parents=True, exist_ok=True)
    (save_dir / "save.txt").write_text(encode(state), encoding="utf-8")


def test_no_command_shows_and_uses_home(_isolated_home):
    channel = MemoryChannel()

    assert main([], channel=channel) == 0

    assert "Energy: 100/100" in channel.output
    assert (_isolated_home / "corn" / "save.txt").is_file()


def test_purchase_through_cli(tmp_path):
    save_dir = tmp_path / "farm"
    _seed(save_dir, money=100)

    assert main(["--save-dir", str(save_dir), "purchase", "seeds", "5"], channel=MemoryChannel()) == 0

    saved = read_save(save_dir / "save.txt")
    assert saved[1] == 50
    assert saved[4] == 5


def test_failure_exits_nonzero(tmp_path):
    save_dir = tmp_path / "farm"
    _seed(save_dir, corn=1)
    channel = MemoryChannel()

    assert main(["--save-dir", str(save_dir), "sell", "2"], channel=channel) == 1
    assert channel.texts(Severity.WARNING) == ["You do not have enough corn to sell!"]


def test_negative_quantity_is_rejected(tmp_path):
    save_dir = tmp_path / "farm"
    _seed(save_dir, corn=5)
    channel = MemoryChannel()

    assert main(["--save-dir", str(save_dir), "sell", "-3"], channel=channel) == 1
    assert channel.texts(Severity.ERROR) == ['Invalid argument "-3" for number of items to sell.']
    assert read_save(save_dir / "save.txt")[2] == 5


def test_unknown_command_exits_nonzero(tmp_path):
    channel = MemoryChannel()

    assert main(["--save-dir", str(tmp_path), "flibber"], channel=channel) == 1
    assert channel.texts(Severity.WARNING) == ['"flibber" not recognized as a valid argument']
    assert not (tmp_path / "save.txt").exists()


def test_reset_reads_confirmation(tmp_path):
    save_dir = tmp_path / "farm"
    _seed(save_dir, money=42)

    assert main(["--save-dir", str(save_dir), "reset"], channel=MemoryChannel(responses=["y"])) == 0
    assert read_save(save_dir / "save.txt")[1] == 0


def test_json_snapshot(tmp_path):
    save_dir = tmp_path / "farm"
    _seed(save_dir, money=8, seeds=2)
    channel = MemoryChannel()

    assert main(["--json", "--save-dir", str(save_dir)], channel=channel) == 0

    doc = json.loads(channel.texts()[0])
    assert doc["money"] == 8
    assert doc["seeds"] == 2


def test_help_lists_commands(capsys):
    with pytest.raises(SystemExit) as err:
        main(["--help"])
    assert err.value.code == 0
    assert "corn purchase <corn|seeds|RedBull> [n]" in capsys.readouterr().out
