import pytest

import app
from core.state import RawDeviceState
from database import Database
from gamepad import get_gamepads


class StaticReader:
    def __init__(self, hz=60):
        self.hz = hz

    def poll(self):
        return [
            RawDeviceState(id="std", index=0, mapping="standard", timestamp=5.0,
                           axes=[0.5, 0.0, 0.0, 0.0], buttons=[True] + [False] * 16),
            RawDeviceState(id="odd", index=1, timestamp=5.0, axes=[0.0], buttons=[False, True]),
        ]


def test_main_once(monkeypatch, tmp_path, capsys):
    db_path = tmp_path / "maps.db"
    Database().save(str(db_path))
    monkeypatch.setattr(app, "PygameSnapshotReader", StaticReader)
    assert app.main(["--db", str(db_path), "--once"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("[0] 'std' L=(+0.50,+0.00)")
    assert "held=a" in out[0]
    assert out[1] == "[1] unknown 'odd' active=b1"


def test_cli_overrides_config(tmp_path):
    cfg = tmp_path / "padmap.yaml"
    cfg.write_text("database: from_file.db\nhz: 30\n", encoding="utf-8")
    parser_args = type("Args", (), {
        "config": str(cfg), "database": None, "hz": 120,
        "log_level": None, "log_format": None, "debug_modules": ["mapper"],
    })()
    settings = app.build_settings(parser_args)
    assert settings.database == "from_file.db"
    assert settings.hz == 120
    assert settings.debug_modules == ["mapper"]


def test_main_rejects_bad_log_level_in_config(tmp_path):
    cfg = tmp_path / "padmap.yaml"
    cfg.write_text("log_level: debug\n", encoding="utf-8")
    with pytest.raises(ValueError):
        app.main(["--config", str(cfg), "--once"])


def test_describe_rejects_other_objects():
    with pytest.raises(TypeError):
        app.describe(object())


def test_changed_lines_reports_changes_and_prunes_gone_slots():
    db = Database()
    pad = RawDeviceState(id="odd", index=7, timestamp=1.0, buttons=[True])
    last = {}
    assert app.changed_lines(last, get_gamepads([pad], db)) == ["[7] unknown 'odd' active=b0"]
    assert app.changed_lines(last, get_gamepads([pad], db)) == []
    assert app.changed_lines(last, get_gamepads([], db)) == []
    assert last == {}
