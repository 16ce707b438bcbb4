"""Tests for the CLI entry point."""

from __future__ import annotations

import json

import pytest

from slugpath.__main__ import main as cli_main
from slugpath.config import AppConfig


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))


def _output(capsys):
    return json.loads(capsys.readouterr().out)


def test_cli_slugify(capsys):
    cli_main(["slugify", "Test Phrase", "Crème Brûlée!"])

    payload = _output(capsys)
    assert payload == [
        {"text": "Test Phrase", "slug": "test-phrase"},
        {"text": "Crème Brûlée!", "slug": "creme-brulee"},
    ]


def test_cli_next_name(tmp_path, capsys):
    (tmp_path / "alfa.txt").write_text("x", encoding="utf-8")

    cli_main(["next-name", str(tmp_path), "alfa.txt"])

    assert _output(capsys) == {"path": str(tmp_path / "alfa-1.txt")}


def test_cli_next_name_uses_configured_separator(tmp_path, capsys):
    config_path = tmp_path / "settings.json"
    AppConfig(separator="_").save(config_path)
    (tmp_path / "alfa.txt").write_text("x", encoding="utf-8")

    cli_main(["--config", str(config_path), "next-name", str(tmp_path), "alfa.txt"])

    assert _output(capsys) == {"path": str(tmp_path / "alfa_1.txt")}


def test_cli_next_name_rejects_blank_file_name(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["next-name", str(tmp_path), "  "])
    assert excinfo.value.code == 2


def test_cli_move_and_skip(tmp_path, capsys):
    source = tmp_path / "bravo.txt"
    source.write_text("b", encoding="utf-8")
    target = tmp_path / "archive"

    cli_main(["move", str(source), str(target)])
    assert _output(capsys) == {"source": str(source), "destination": str(target / "bravo.txt")}

    cli_main(["move", str(source), str(target)])
    assert _output(capsys) == {"source": str(source), "destination": None}


def test_cli_rename(tmp_path, capsys):
    source = tmp_path / "charlie.txt"
    source.write_text("c", encoding="utf-8")

    cli_main(["rename", str(source), "delta.txt"])

    assert _output(capsys)["destination"] == str(tmp_path / "delta.txt")


def test_cli_size(capsys):
    cli_main(["size", "15000", "15430800", "--decimals", "2"])

    assert _output(capsys) == [
        {"bytes": 15000, "display": "15 kB"},
        {"bytes": 15430800, "display": "15.43 MB"},
    ]


def test_cli_rejects_invalid_config(tmp_path):
    config_path = tmp_path / "bad.json"
    config_path.write_text(json.dumps({"separator": "::"}), encoding="utf-8")

    with pytest.raises(SystemExit):
        cli_main(["--config", str(config_path), "slugify", "x"])


def test_cli_requires_command():
    with pytest.raises(SystemExit):
        cli_main([])


def test_cli_rejects_missing_config_file(tmp_path):
    with pytest.raises(SystemExit):
        cli_main(["--config", str(tmp_path / "missing.yaml"), "slugify", "x"])


def test_cli_settings_set_and_show(tmp_path, capsys):
    config_path = tmp_path / "settings.yaml"

    cli_main(["--config", str(config_path), "settings", "set", "separator", "_"])
    payload = _output(capsys)
    assert payload["path"] == str(config_path)
    assert payload["settings"]["separator"] == "_"

    cli_main(["--config", str(config_path), "settings", "show"])
    assert _output(capsys)["settings"]["separator"] == "_"
    assert AppConfig.load(config_path).separator == "_"


def test_cli_settings_set_rejects_invalid_value(tmp_path):
    with pytest.raises(SystemExit):
        cli_main(["--config", str(tmp_path / "s.yaml"), "settings", "set", "slug_max_chars", "0"])


def test_cli_settings_set_rejects_unknown_key(tmp_path):
    with pytest.raises(SystemExit):
        cli_main(["--config", str(tmp_path / "s.yaml"), "settings", "set", "colour", "red"])


def test_cli_size_rejects_out_of_range_decimals():
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["size", "425720", "--decimals", "40"])
    assert excinfo.value.code == 2


def test_cli_size_handles_huge_values(capsys):
    cli_main(["size", str(10**42)])

    assert _output(capsys)[0]["display"].endswith(" PB")
