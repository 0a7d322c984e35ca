from pathlib import Path
from types import SimpleNamespace

import pytest

pytest.importorskip("tkinter")

import gui_min
from src.config.api import Config


def _worker(files):
    messages = []
    fake = SimpleNamespace(
        selected_files=files,
        cfg=Config(),
        _is_running=True,
        _log=messages.append,
        _set_status=lambda msg: None,
        _enable_run_button=lambda: None,
    )
    return fake, messages


def test_run_batch_logs_results(tmp_path: Path):
    p = tmp_path / "a.c"
    p.write_text("    x;\n", encoding="utf-8")
    fake, messages = _worker([str(p)])

    gui_min.MinimalBatchGUI._run_batch(fake, 4, False)

    assert "  -> status=CHANGED" in messages
    assert "     Kandidaten: 1" in messages
    assert "     Zeilen: [1]" in messages
    assert fake._is_running is False


def test_run_batch_survives_unexpected_error(tmp_path: Path, monkeypatch):
    def _boom(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(gui_min, "tabify_file", _boom)
    fake, messages = _worker([str(tmp_path / "a.c"), str(tmp_path / "b.c")])

    gui_min.MinimalBatchGUI._run_batch(fake, 4, False)

    assert messages.count("  -> EXCEPTION: disk on fire") == 2
    assert messages[-1] == "=== Fertig ==="
    assert fake._is_running is False
