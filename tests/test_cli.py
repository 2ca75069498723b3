from __future__ import annotations

import pytest

from breakthrough_solver import settings
from breakthrough_solver.logging_setup import LOG_FILE_NAME, reset_logging
from breakthrough_solver.tools import cli, perft_cli


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings, "CONFIG_PATH", tmp_path / "missing.toml")
    reset_logging()
    yield
    reset_logging()


def test_quiet_prints_score(capsys):
    assert cli.main(["--quiet", "--no-log-file"]) == 0
    assert capsys.readouterr().out.strip() == "11"


def test_board_size_from_flags(capsys):
    assert cli.main(["--rows", "3", "--columns", "3", "--quiet", "--no-log-file"]) == 0
    assert capsys.readouterr().out.strip() == "-6"


def test_full_report(capsys):
    rc = cli.main(["--position", "BBB/.../WWW", "--algorithm", "minmax", "--best-move", "--no-log-file"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "white to move: -6 (loss in 6)" in out
    assert "nodes=" in out and "lookups=" in out
    assert "best: " in out
    assert out.startswith("┏")


def test_side_and_hashing_flags(capsys):
    rc = cli.main(["--position", ".BBB/..../.BW./W..W", "--hash-side-to-move", "--quiet", "--no-log-file"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "-8"
    rc = cli.main(["--side", "black", "--seed", "0x1234", "--quiet", "--no-log-file"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "11"


def test_config_file(tmp_path, capsys):
    path = tmp_path / "small.toml"
    path.write_text("[board]\nrows = 3\ncolumns = 4\n")
    assert cli.main(["--config", str(path), "--quiet", "--no-log-file"]) == 0
    assert capsys.readouterr().out.strip() == "5"


def test_log_file_gets_solve_event(tmp_path, capsys):
    assert cli.main(["--rows", "3", "--columns", "3", "--quiet"]) == 0
    log = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert '"event":"solve"' in log
    assert '"score":-6' in log


@pytest.mark.parametrize(
    "argv",
    [
        ["--position", "BBXB/..../..../WWWW"],
        ["--side", "purple"],
        ["--rows", "1"],
        ["--algorithm", "mcts"],
        ["--config", "does-not-exist.toml"],
    ],
)
def test_bad_input_exits_with_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv + ["--no-log-file"])
    assert exc.value.code == 2


def test_perft_cli(capsys):
    assert perft_cli.main(["--depth", "3"]) == 0
    assert capsys.readouterr().out.startswith("perft(d=3)=66 in ")


def test_perft_cli_divide(capsys):
    assert perft_cli.main(["--depth", "2", "--rows", "5", "--columns", "5", "--divide"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:5] == ["a1-a2: 5", "b1-b2: 5", "c1-c2: 5", "d1-d2: 5", "e1-e2: 5"]
    assert lines[5].startswith("perft(d=2)=25 ")


def test_perft_cli_bad_position():
    with pytest.raises(SystemExit):
        perft_cli.main(["--depth", "1", "--position", "BW"])
