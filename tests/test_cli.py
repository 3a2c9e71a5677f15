from __future__ import annotations

import pytest
from typer.testing import CliRunner

from keepwire import cli
from keepwire.codec import dumps, dumps_nodes
from keepwire.models import Reminder, Time
from keepwire.tokens import Period

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr(cli.console, "width", 200)
    monkeypatch.delenv("KEEPWIRE_LOG_LEVEL", raising=False)
    monkeypatch.setenv("KEEPWIRE_TIMEZONE", "")


def test_inspect_nodes(tmp_path, groceries, milk):
    path = tmp_path / "nodes.json"
    path.write_text(dumps_nodes([groceries, milk]), encoding="utf-8")

    result = runner.invoke(cli.app, ["inspect", str(path)])
    assert result.exit_code == 0
    assert "Groceries" in result.output
    assert "GREEN" in result.output
    assert "LIST_ITEM" in result.output
    assert "checked" in result.output


def test_inspect_incompatible_payload(tmp_path, groceries):
    path = tmp_path / "nodes.json"
    path.write_text(dumps(groceries).replace('"GREEN"', '"PURPLE"'), encoding="utf-8")

    result = runner.invoke(cli.app, ["inspect", str(path)])
    assert result.exit_code == 1
    assert "Incompatible wire data" in result.output


def test_inspect_missing_file(tmp_path):
    result = runner.invoke(cli.app, ["inspect", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_reminder(tmp_path):
    path = tmp_path / "reminder.json"
    rem = Reminder(description="Buy milk", time=Time(year=2024, month=3, day=5, period=Period.EVENING))
    path.write_text(dumps(rem), encoding="utf-8")

    result = runner.invoke(cli.app, ["reminder", str(path)])
    assert result.exit_code == 0
    assert "pending" in result.output
    assert "2024-03-05T17:00:00" in result.output
    assert "evening" in result.output


def test_timestamp_sentinel():
    result = runner.invoke(cli.app, ["timestamp", "1970-01-01T00:00:00.000Z"])
    assert result.exit_code == 0
    assert "unset" in result.output


def test_timestamp_value():
    result = runner.invoke(cli.app, ["timestamp", "2024-03-05T17:04:09.123Z"])
    assert result.exit_code == 0
    assert "2024-03-05T17:04:09.123000+00:00" in result.output


def test_timestamp_malformed():
    result = runner.invoke(cli.app, ["timestamp", "2024-03-05T17:04:09Z"])
    assert result.exit_code == 1
    assert "malformed timestamp" in result.output


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("KEEPWIRE_LOG_LEVEL", "chatty")
    result = runner.invoke(cli.app, ["timestamp", "1970-01-01T00:00:00.000Z"])
    assert result.exit_code == 1
    assert "KEEPWIRE_LOG_LEVEL" in result.output
    assert "Traceback" not in result.output
