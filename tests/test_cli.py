from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from pytweetsplit.cli import app

runner = CliRunner()


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_prints_posts_with_lengths(tmp_path: Path) -> None:
    path = _write(tmp_path, "short.txt", "hello world\n")

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        f"Sourcing post text from file: {path}",
        ">hello world",
        "11 chars",
        "=====",
    ]


def test_cli_handles_several_files_and_limit(tmp_path: Path) -> None:
    first = _write(tmp_path, "one.txt", "one two three four five six")
    second = _write(tmp_path, "two.txt", "tiny")

    result = runner.invoke(
        app, ["--limit", "12", "--no-show-length", str(first), str(second)]
    )

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[1:7] == [
        ">(1/5)one two",
        ">(2/5)three",
        ">(3/5)four",
        ">(4/5)five",
        ">(5/5)six",
        "=====",
    ]
    assert lines[7:] == [f"Sourcing post text from file: {second}", ">tiny", "====="]


def test_cli_reads_stdin() -> None:
    result = runner.invoke(app, [], input="hi there")

    assert result.exit_code == 0, result.output
    assert ">hi there" in result.output.splitlines()


def test_cli_newlines_space(tmp_path: Path) -> None:
    path = _write(tmp_path, "lines.txt", "hello\nworld")

    result = runner.invoke(app, ["--newlines", "space", str(path)])

    assert result.exit_code == 0, result.output
    assert ">hello world" in result.output.splitlines()


def test_cli_limit_too_small_exits_with_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "long.txt", "x" * 50)

    result = runner.invoke(app, ["--limit", "5", str(path)])

    assert result.exit_code == 2
    assert "prefix does not fit" in result.output
    assert ">" not in result.output


def test_cli_rejects_bad_options(tmp_path: Path) -> None:
    path = _write(tmp_path, "short.txt", "hello")

    result = runner.invoke(app, ["--newlines", "keep", str(path)])
    assert result.exit_code == 2

    result = runner.invoke(app, ["--limit", "0", str(path)])
    assert result.exit_code == 2


def test_cli_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing.txt")])

    assert result.exit_code == 2
    assert "Cannot read" in result.output


def test_cli_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("pytweetsplit ")


def test_cli_help_lists_newline_modes() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "strip" in result.output
    assert "space" in result.output
