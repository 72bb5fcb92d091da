"""Tests for the numspeak command-line interface."""

# ruff: noqa: RUF001
import os
from pathlib import Path
import subprocess
import sys

import pytest

import numspeak
from numspeak.cli import build_parser, main


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["42"], "forty-two"),
        (["-5"], "minus five"),
        (["1999", "--locale", "de", "--mode", "year"], "neunzehnhundertneunundneunzig"),
        (["2.50", "-l", "pl", "-m", "currency"], "dwa złote i pięćdziesiąt groszy"),
        (["2.345", "-m", "currency", "--no-round"], "two dollars and thirty-four cents"),
        (["1", "-l", "ru", "--gender", "feminine"], "одна"),
        (["1.5", "--separator", "comma"], "one comma five"),
        (["-3", "--negative-prefix", "negative"], "negative three"),
        (["115", "--include-and"], "one hundred and fifteen"),
        (["2023", "-m", "year", "--include-era"], "twenty twenty-three AD"),
        (["nan"], "Not a Number"),
        (["1.5", "-m", "currency", "--currency", "EUR"], "one euro and fifty cents"),
        (["21", "-l", "ru", "-m", "currency", "--currency", "usd"], "двадцать один доллар"),
        (["101", "-l", "vi", "--zero-tens", "le"], "một trăm lẻ một"),
    ],
)
def test_main(argv: list[str], expected: str, capsys: pytest.CaptureFixture[str]) -> None:
    """
    Test that main prints the spoken form and exits with status 0.

    Parameters:
        argv (list[str]): Command-line arguments
        expected (str): Expected line on stdout
        capsys (pytest.CaptureFixture[str]): Pytest output capture
    """
    assert main(argv) == 0
    assert capsys.readouterr().out == f"{expected}\n"


def test_list_locales(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--list-locales"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "en\tEnglish" in lines
    assert "ru\tРусский" in lines
    assert len(lines) == 10


def test_unknown_locale_fails() -> None:
    assert main(["5", "-l", "xx"]) == 1


def test_too_large_fails() -> None:
    assert main([str(10**36)]) == 1


def test_unknown_currency_fails() -> None:
    assert main(["5", "-m", "currency", "--currency", "XYZ"]) == 1


def test_verbose_logs_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["2000", "-l", "ru", "-m", "year", "-v"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "две тысячи\n"
    assert "DEBUG" in captured.err


def test_library_import_does_not_log() -> None:
    """
    Test that using numspeak as a library writes nothing to stderr, even for calls that log at debug level.

    Raises:
        AssertionError: If anything reaches stderr
    """
    script = "from numspeak import NumberVerbalizer; print(NumberVerbalizer('ru')(2000, mode='year'))"
    env = {**os.environ, "PYTHONPATH": str(Path(numspeak.__file__).parents[1]), "PYTHONIOENCODING": "utf-8"}
    result = subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True, encoding="utf-8", env=env, check=True
    )
    assert result.stdout == "две тысячи\n"
    assert result.stderr == ""


def test_number_is_required(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2
    assert "number argument is required" in capsys.readouterr().err


def test_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("numspeak:\n  locale: de\n  log_level: ERROR\n", encoding="utf-8")
    assert main(["7", "--config", str(path)]) == 0
    assert capsys.readouterr().out == "sieben\n"


def test_parser_choices() -> None:
    args = build_parser().parse_args(["1", "-m", "decimal", "--separator", "generic"])
    assert args.mode == "decimal"
    assert args.separator == "generic"
