# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from saver_lib import __version__
from saver_lib.core.config import CFG
from saver_lib.saver import cli


def _invoke(args, home):
    runner = CliRunner()
    return runner.invoke(cli, args, env={"HOME": str(home)})


def _default_db(home):
    return home / ".saver" / "db"


def test_cli_version(tmp_path):
    result = _invoke(["--version"], tmp_path)

    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_cli_help_lists_actions_and_database_option(tmp_path, flag):
    result = _invoke([flag], tmp_path)

    assert result.exit_code == 0
    for example in [
        "saver s curl-example curl https://example.com",
        "saver l",
        "saver g curl-example",
        "saver r curl-example",
        "saver d curl-example",
    ]:
        assert example in result.stdout
    assert "--saver-db" in result.stdout


@pytest.mark.parametrize(
    "args", [[], ["x"], ["s"], ["s", "name"], ["g"], ["r"], ["d"], ["s", "", "ls"]]
)
def test_cli_invalid_invocation_prints_help_and_exits(tmp_path, args):
    result = _invoke(args, tmp_path)

    assert result.exit_code == CFG.exit_codes.default == 1
    assert "Usage:" in result.stdout
    assert "--saver-db" in result.stdout
    assert not (tmp_path / ".saver").exists()


def test_cli_missing_home_reports_on_stderr(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["l"], env={"HOME": None})

    assert result.exit_code == 1
    assert "Failed to get home directory" in result.stderr
    assert "Failed to get home directory" not in result.stdout


def test_cli_list_empty_creates_default_database(tmp_path):
    result = _invoke(["l"], tmp_path)

    assert result.exit_code == 0
    assert result.stdout == ""
    assert _default_db(tmp_path).is_dir()


def test_cli_list_records(tmp_path):
    db = _default_db(tmp_path)
    db.mkdir(parents=True)
    (db / "a").write_text("echo a")
    (db / "b").write_text("echo b")

    result = _invoke(["l"], tmp_path)

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 2
    assert sorted(line.split(") ")[0] for line in lines) == ["1", "2"]
    assert sorted(line.split(") ")[1] for line in lines) == ["a", "b"]


def test_cli_save_persists_and_returns_child_exit_code(tmp_path):
    result = _invoke(["s", "fail", "sh", "-c", "exit 3"], tmp_path)

    assert result.exit_code == 3
    assert (_default_db(tmp_path) / "fail").read_text() == "sh -c exit 3"
    assert result.stdout == "\n"


def test_cli_save_without_arguments(tmp_path):
    result = _invoke(["s", "t", "true"], tmp_path)

    assert result.exit_code == 0
    assert (_default_db(tmp_path) / "t").read_text() == "true "


def test_cli_save_passes_options_through(tmp_path):
    with patch("saver_lib.executor.executor.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0)
        result = _invoke(["s", "g", "grep", "--help", "-h"], tmp_path)

    assert result.exit_code == 0
    mock_run.assert_called_once_with(["grep", "--help", "-h"])
    assert (_default_db(tmp_path) / "g").read_text() == "grep --help -h"


def test_cli_save_twice_overwrites(tmp_path):
    _invoke(["s", "n", "true", "first"], tmp_path)
    _invoke(["s", "n", "true", "second"], tmp_path)

    result = _invoke(["g", "n"], tmp_path)

    assert result.exit_code == 0
    assert result.stdout == "true second\n"


def test_cli_show_prints_content(tmp_path):
    db = _default_db(tmp_path)
    db.mkdir(parents=True)
    (db / "n").write_text("echo hi")

    result = _invoke(["g", "n"], tmp_path)

    assert result.exit_code == 0
    assert result.stdout == "echo hi\n"


def test_cli_show_missing_record(tmp_path):
    result = _invoke(["g", "nope"], tmp_path)

    assert result.exit_code == 1
    assert (
        result.stdout
        == f"Command nope not found in database {_default_db(tmp_path)}\n"
    )


def test_cli_run_reconstructs_saved_command(tmp_path):
    db = _default_db(tmp_path)
    db.mkdir(parents=True)
    (db / "p").write_text("printf %s x")

    with patch("saver_lib.executor.executor.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=5)
        result = _invoke(["r", "p"], tmp_path)

    assert result.exit_code == 5
    mock_run.assert_called_once_with(["printf", "%s", "x"])
    assert (db / "p").read_text() == "printf %s x"


def test_cli_run_missing_record(tmp_path):
    with patch("saver_lib.executor.executor.subprocess.run") as mock_run:
        result = _invoke(["r", "nope"], tmp_path)

    assert result.exit_code == 1
    assert "Command nope not found in database" in result.stdout
    mock_run.assert_not_called()


def test_cli_run_spawn_failure_reports_on_stderr(tmp_path):
    db = _default_db(tmp_path)
    db.mkdir(parents=True)
    (db / "bad").write_text("definitely-not-an-existing-program-1234 ")

    result = _invoke(["r", "bad"], tmp_path)

    assert result.exit_code == 1
    assert "definitely-not-an-existing-program-1234" in result.stderr
    assert result.stdout == "\n"


def test_cli_delete(tmp_path):
    db = _default_db(tmp_path)
    db.mkdir(parents=True)
    (db / "n").write_text("echo ")

    result = _invoke(["d", "n"], tmp_path)

    assert result.exit_code == 0
    assert result.stdout == ""
    assert not (db / "n").exists()


def test_cli_delete_missing_record(tmp_path):
    result = _invoke(["d", "nope"], tmp_path)

    assert result.exit_code == 1
    assert (
        result.stdout
        == f"Command nope not found in database {_default_db(tmp_path)}\n"
    )


def test_cli_custom_database_directory(tmp_path):
    custom = tmp_path / "custom" / "path"

    result = _invoke(["s", "n", "true", "--saver-db", str(custom)], tmp_path)

    assert result.exit_code == 0
    assert (custom / "n").read_text() == "true "
    assert not _default_db(tmp_path).exists()

    result = _invoke(["l", "--saver-db", str(custom)], tmp_path)
    assert result.stdout == "1) n\n"


def test_cli_directory_creation_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    result = _invoke(["l", "--saver-db", str(blocker / "db")], tmp_path)

    assert result.exit_code == 1
    assert "Not a directory" in result.stdout


def test_cli_unexpected_error(tmp_path):
    with (
        patch("saver_lib.saver.Dispatcher", side_effect=RuntimeError("boom")),
        patch("saver_lib.saver.logger") as mock_logger,
    ):
        result = _invoke(["l"], tmp_path)

    assert result.exit_code == CFG.exit_codes.unexpected_error
    mock_logger.critical.assert_called_once()


def test_cli_not_found_reports_database_directory_verbatim(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = _invoke(["g", "nope", "--saver-db", "./db/"], tmp_path)

    assert result.exit_code == 1
    assert result.stdout == "Command nope not found in database ./db/\n"
    assert (tmp_path / "db").is_dir()


def test_cli_empty_database_directory_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "unrelated.txt").write_text("")

    result = _invoke(["l", "--saver-db", ""], tmp_path)

    assert result.exit_code == 1
    assert "unrelated.txt" not in result.stdout
    assert result.stdout == "Database directory path is empty\n"
