"""Tests for the command-line entry point."""

import io
import math

import pytest

from zcb_pricer.cli import EXIT_INPUT_ERROR, EXIT_OK, main


def _feed(monkeypatch: pytest.MonkeyPatch, text: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_main_prints_prompts_and_report(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """No flags: prompt sequence, then the report, exit 0."""
    _feed(monkeypatch, "100\n0.05\n2\n")
    assert main([]) == EXIT_OK
    out = capsys.readouterr().out
    assert out.startswith("Face Value : Interest Rate  :Year Fraction :Face Value : 100\n")
    lines = out.splitlines()
    assert lines[-2] == "============="
    price = float(lines[-1].split(" : ")[1])
    assert price == 100.0 * math.exp(-0.05 * 2.0)


def test_main_zero_rate(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """1000 at 0% for 5Y reports a price of exactly 1000."""
    _feed(monkeypatch, "1000\n0\n5\n")
    assert main([]) == EXIT_OK
    assert capsys.readouterr().out.endswith("=============\nPrice : 1000\n")


def test_main_malformed_input_exits_nonzero(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """Malformed input: no report, error on stderr, exit 1."""
    _feed(monkeypatch, "100\n0.05\ntwo\n")
    assert main([]) == EXIT_INPUT_ERROR
    captured = capsys.readouterr()
    assert "Price :" not in captured.out
    assert "Year Fraction: cannot parse" in captured.err
    assert "[input_parse_error]" in captured.err


def test_main_retry_recovers(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """--retry re-prompts after a bad line and completes the run."""
    _feed(monkeypatch, "oops\n100\n0.05\n2\n")
    assert main(["--retry"]) == EXIT_OK
    captured = capsys.readouterr()
    assert "Invalid number, try again." in captured.out
    assert "Price :" in captured.out
    assert "attempt 1 of 3" in captured.err


def test_main_precision_flag(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """--precision below 15 digits is a usage error; 20 digits is accepted."""
    _feed(monkeypatch, "100\n0.05\n2\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["--precision", "6"])
    assert excinfo.value.code == 2
    assert "Price :" not in capsys.readouterr().out

    _feed(monkeypatch, "100\n0.05\n2\n")
    assert main(["--precision", "20"]) == EXIT_OK
    price = float(capsys.readouterr().out.splitlines()[-1].split(" : ")[1])
    assert price == 100.0 * math.exp(-0.05 * 2.0)


def test_main_rejects_invalid_precision(monkeypatch: pytest.MonkeyPatch) -> None:
    """An invalid setting is a usage error (exit 2)."""
    _feed(monkeypatch, "")
    with pytest.raises(SystemExit) as excinfo:
        main(["--precision", "0"])
    assert excinfo.value.code == 2


def test_main_end_of_input(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """Input ending early is reported as end of input, exit 1."""
    _feed(monkeypatch, "100\n")
    assert main([]) == EXIT_INPUT_ERROR
    assert "Interest Rate: unexpected end of input" in capsys.readouterr().err
