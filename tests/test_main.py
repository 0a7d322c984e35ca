import io
import json
import logging
from pathlib import Path

import pytest

import main


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    monkeypatch.setenv("TABIFY_TAB_WIDTH", "4")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    main.load_config(reload=True)


def test_files_in_place(tmp_path: Path, capsys):
    p = tmp_path / "a.c"
    p.write_text("    x;  // y\n", encoding="utf-8")

    rc = main.main([str(p)])
    assert rc == 0
    assert p.read_text(encoding="utf-8") == "\tx;\t// y\n"
    out = json.loads(capsys.readouterr().out.strip())
    assert out["status"] == "CHANGED"


def test_check_reports_and_exits_1(tmp_path: Path, capsys):
    p = tmp_path / "a.c"
    p.write_text("    x;\n", encoding="utf-8")

    assert main.main(["--check", str(p)]) == 1
    assert p.read_text(encoding="utf-8") == "    x;\n"


def test_tab_width_and_lines(tmp_path: Path):
    p = tmp_path / "a.c"
    p.write_text("  a\n  b\n  c\n", encoding="utf-8")

    assert main.main(["--tab-width", "2", "--lines", "2:3", str(p)]) == 0
    assert p.read_text(encoding="utf-8") == "  a\n\tb\n\tc\n"


def test_missing_file_exit_1(tmp_path: Path):
    assert main.main([str(tmp_path / "missing.c")]) == 1


def test_invalid_tab_width_exit_2(tmp_path: Path, capsys):
    assert main.main(["--tab-width", "0", str(tmp_path / "a.c")]) == 2
    assert "tab_width" in capsys.readouterr().err


def test_bad_lines_argument():
    with pytest.raises(SystemExit):
        main.main(["--lines", "abc"])


def test_stdin_to_stdout(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("     x = 1;   // set\n"))
    assert main.main([]) == 0
    assert capsys.readouterr().out == "\t\tx = 1;\t// set\n"


def test_single_line_range_touches_only_that_line(tmp_path: Path):
    p = tmp_path / "a.c"
    p.write_text("  a\n  b\n  c\n", encoding="utf-8")

    assert main.main(["--tab-width", "2", "--lines", "2:2", str(p)]) == 0
    assert p.read_text(encoding="utf-8") == "  a\n\tb\n  c\n"


def test_malformed_config_width_exit_2(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setenv("TABIFY_TAB_WIDTH", "wide")
    main.load_config(reload=True)
    p = tmp_path / "a.c"
    p.write_text("    x;\n", encoding="utf-8")

    assert main.main([str(p)]) == 2
    assert "wide" in capsys.readouterr().err
    assert p.read_text(encoding="utf-8") == "    x;\n"


def test_stdin_run_logs_summary(monkeypatch, capsys, caplog):
    caplog.set_level(logging.INFO, logger="tabify")
    monkeypatch.setattr("sys.stdin", io.StringIO("    a\nb\n"))
    assert main.main([]) == 0
    assert "stdin: 1 of 1 candidate lines changed" in caplog.text
