from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from src.lineselector.api import Selection, select_lines
from src.normalizer.api import check_tab_width, normalize_line
from src.textbuffer.api import create_edit, snapshot
from .model import JobResult, TabifyResult

logger = logging.getLogger(__name__)

BOM = "\ufeff"


class TabifierError(RuntimeError):
    pass


class Tabifier:
    def tabify_text(self, text: str, tab_width: int, selection: Optional[Selection] = None) -> TabifyResult:
        check_tab_width(tab_width)

        snap = snapshot(text)
        candidates = select_lines(snap, selection)

        edit = create_edit(snap)
        for line in candidates:
            new_line = normalize_line(line.text, tab_width)
            if new_line != line.text:
                if not edit.replace(line.index, new_line):
                    edit.cancel()
                    raise TabifierError(f"cannot replace line {line.index}")

        changed = edit.changed_lines
        new_text = edit.apply()
        logger.info("tabify: %d candidate lines, %d changed", len(candidates), len(changed))
        return TabifyResult(text=new_text, changed_lines=changed, candidate_lines=len(candidates))

    def tabify_file(
        self,
        path: str,
        tab_width: int,
        selection: Optional[Selection] = None,
        dry_run: bool = False,
        encoding: str = "utf-8",
    ) -> JobResult:
        check_tab_width(tab_width)
        src = Path(path)

        try:
            found = src.is_file()
        except OSError as e:
            logger.error("cannot access %s: %s", src, e)
            return self._result("FAILED", str(src), {"error": str(e)})
        if not found:
            logger.error("file not found: %s", src)
            return self._result("FAILED", str(src), {"error": "file_not_found"})

        lock_path = src.with_name(f".{src.name}.tabify.lock")
        try:
            self._acquire_lock(lock_path)
        except FileExistsError:
            logger.warning("skipping %s: locked by %s", src, lock_path)
            return self._result("SKIPPED", str(src), {"reason": "locked"})
        except OSError as e:
            logger.error("cannot lock %s: %s", src, e)
            return self._result("FAILED", str(src), {"error": str(e)})

        try:
            # newline="" keeps \r\n / \r untouched
            with open(src, "r", encoding=encoding, newline="") as f:
                text = f.read()

            # BOM is not part of line 0; written back unchanged
            bom = ""
            if text.startswith(BOM):
                bom, text = BOM, text[len(BOM):]

            res = self.tabify_text(text, tab_width, selection)
            details = {"changed_lines": res.changed_lines, "candidate_lines": res.candidate_lines}

            if not res.changed:
                return self._result("UNCHANGED", str(src), details)
            if dry_run:
                return self._result("WOULD_CHANGE", str(src), details)

            self._replace_file(src, bom + res.text, encoding)
            logger.info("wrote %s (%d lines changed)", src, len(res.changed_lines))
            return self._result("CHANGED", str(src), details)

        except Exception as e:
            logger.exception("tabify failed for %s", src)
            return self._result("FAILED", str(src), {"error": str(e)})
        finally:
            self._release_lock(lock_path)

    def _replace_file(self, path: Path, text: str, encoding: str) -> None:
        fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
        try:
            with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
                f.write(text)
            try:
                os.chmod(tmp, path.stat().st_mode)
            except OSError:
                logger.debug("could not copy mode to %s", tmp)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def _acquire_lock(self, lock_path: Path) -> None:
        fd = os.open(str(lock_path), os.O_CREAT | os.O_EXCL | os.O_WRONLY)
        os.close(fd)

    def _release_lock(self, lock_path: Path) -> None:
        try:
            lock_path.unlink(missing_ok=True)
        except OSError:
            logger.warning("could not remove lock %s", lock_path)

    def _result(self, status: str, path: str, details: dict) -> JobResult:
        return JobResult(path=path, status=status, details=details)
