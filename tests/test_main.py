"""Unit tests for the command line entry point."""

import io
import sys

import pytest

from levellog import config
from levellog.__main__ import main


def test_main_writes_message(capsys):
    """Message words are joined into one line."""
    code = main(["--level", "warning", "--flags", "none", "disk", "full"])

    assert code == 0
    assert capsys.readouterr().err == "WARN disk full\n"


def test_main_reads_stdin(capsys, monkeypatch):
    """Without a message, each stdin line is logged."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("a\nb\n"))

    assert main(["--flags", "none"]) == 0
    assert capsys.readouterr().err == "a\nb\n"


def test_main_level_gated(capsys):
    """Disabled severity writes nothing."""
    assert main(["--level", "info", "--levels", "error", "--flags", "none", "x"]) == 0
    assert capsys.readouterr().err == ""


def test_main_levels_default_from_env(capsys, monkeypatch):
    """LEVELLOG_LEVELS supplies the default severity mask."""
    monkeypatch.setattr(config, "LEVELLOG_LEVELS", "error")

    assert main(["--level", "info", "--flags", "none", "hidden"]) == 0
    assert main(["--level", "error", "--flags", "none", "shown"]) == 0
    assert capsys.readouterr().err == "ERRO shown\n"


def test_main_bad_flags(capsys):
    """Unknown flag name is a usage error."""
    assert main(["--flags", "bogus", "x"]) == 2
    assert "unknown flag 'bogus'" in capsys.readouterr().err


def test_main_fatal_exits(capsys):
    """Fatal level exits with status 1 after writing."""
    with pytest.raises(SystemExit) as exc:
        main(["--level", "fatal", "--flags", "none", "bye"])

    assert exc.value.code == 1
    assert capsys.readouterr().err == "FATA bye\n"
