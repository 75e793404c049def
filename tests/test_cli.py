import csv
from pathlib import Path

from mocks import FakeProvider
from phone_validator import cli


def test_normalize_command(capsys):
    assert cli.main(["normalize", "(202) 555-0143"]) == 0
    assert capsys.readouterr().out.strip() == "2025550143 +12025550143"


def test_normalize_command_rejects(capsys):
    assert cli.main(["normalize", "555-888-8888"]) == 1
    assert capsys.readouterr().out.startswith("fake-pattern")


def test_check_command(tmp_path: Path, monkeypatch):
    provider = FakeProvider()
    monkeypatch.setattr(cli, "build_provider", lambda: provider)
    source = tmp_path / "phones.txt"
    source.write_text("202-555-0143\n555-123-0000\n", encoding="utf-8")
    output = tmp_path / "out.csv"

    assert cli.main(["check", "-i", str(source), "-o", str(output)]) == 0
    with output.open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["reason"] for r in rows] == ["ok", "fake-pattern"]
    assert provider.calls == [("lookup", "+12025550143")]


def test_check_missing_input(tmp_path: Path):
    assert cli.main(["check", "-i", str(tmp_path / "nope.txt")]) == 1


def test_serve_command(monkeypatch):
    called = {}
    monkeypatch.setattr(cli, "run_serve", lambda host, port: called.update(host=host, port=port) or 0)
    assert cli.main(["serve", "--port", "9000"]) == 0
    assert called["port"] == 9000
