import json

from comphub.presentation.cli import main as cli_main


def test_cli_parser_flags():
    parser = cli_main.create_parser()

    parsed = parser.parse_args(["serve", "--host", "127.0.0.1", "-p", "8080"])
    assert parsed.command == "serve"
    assert parsed.host == "127.0.0.1"
    assert parsed.port == 8080

    parsed = parser.parse_args(["config", "--json"])
    assert parsed.command == "config"
    assert parsed.json is True


def test_cli_version(capsys):
    assert cli_main.run_cli(["--version"]) == 0
    assert "CompHub v" in capsys.readouterr().out


def test_cli_seed_writes_catalog_tasks(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("COMPHUB_DATA_DIR", str(tmp_path / "data"))

    exit_code = cli_main.run_cli(["seed"])

    assert exit_code == 0
    assert "Database reset. Seeded 40 tasks across 9 boards." in capsys.readouterr().out
    tasks = json.loads((tmp_path / "data" / "tasks.json").read_text(encoding="utf-8"))
    assert [t["id"] for t in tasks] == list(range(1, 41))
    assert json.loads((tmp_path / "data" / "activity.json").read_text(encoding="utf-8")) == {}


def test_cli_seed_reports_storage_failure(tmp_path, monkeypatch, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.setenv("COMPHUB_DATA_DIR", str(blocker))

    exit_code = cli_main.run_cli(["seed"])

    assert exit_code == 1
    assert "Seeding failed" in capsys.readouterr().err


def test_cli_config_json(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("COMPHUB_DATA_DIR", str(tmp_path / "data"))

    assert cli_main.run_cli(["config", "--json"]) == 0

    summary = json.loads(capsys.readouterr().out)
    assert summary["totalTemplates"] == 40
    assert len(summary["boards"]) == 9
    assert "planning" in summary["domains"]
    assert not (tmp_path / "data").exists()


def test_cli_config_table(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("COMPHUB_DATA_DIR", str(tmp_path / "data"))

    assert cli_main.run_cli(["config"]) == 0

    out = capsys.readouterr().out
    assert "merit-cycle" in out
    assert "9 boards, 40 templates" in out


def test_cli_without_command_prints_help(capsys):
    assert cli_main.run_cli([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
