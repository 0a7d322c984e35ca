"""
SpacesTabifier CLI.

Converts leading spaces and the spaces in front of a trailing // comment into
tabs, in place.

  python main.py src/a.c src/b.h            # tabify files (config tab width)
  python main.py --tab-width 8 a.c          # explicit tab width
  python main.py --lines 10:42 a.c          # only lines 10..42 (one-based, inclusive)
  python main.py --check a.c b.c            # exit 1 if anything would change
  cat a.c | python main.py > b.c            # stdin -> stdout

Environment / .env:
  TABIFY_TAB_WIDTH, TABIFY_ENCODING, LOG_LEVEL
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from src.config.api import load_config
from src.lineselector.api import Selection, SelectionError
from src.normalizer.api import InvalidConfiguration, check_tab_width
from src.tabifier.api import tabify_file, tabify_text

logger = logging.getLogger("tabify")


def _parse_lines(value: str) -> Selection:
    """'START:END' (one-based, inclusive) -> zero-based Selection."""
    try:
        start_s, end_s = value.split(":", 1)
        start, end = int(start_s), int(end_s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected START:END, got {value!r}")
    if start < 1 or end < 1:
        raise argparse.ArgumentTypeError("line numbers start at 1")
    return Selection(start_line=start - 1, end_line=end - 1)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tabify",
        description="Replace leading spaces and spaces before // comments with tabs.",
    )
    p.add_argument("paths", nargs="*", help="files to tabify in place (none: stdin -> stdout)")
    p.add_argument("--tab-width", type=int, default=None, help="columns per tab (default: TABIFY_TAB_WIDTH or 4)")
    p.add_argument("--lines", type=_parse_lines, default=None, metavar="START:END",
                   help="restrict to a line range, one-based and inclusive")
    p.add_argument("--dry-run", action="store_true", help="report, do not write")
    p.add_argument("--check", action="store_true", help="dry run; exit 1 if any file would change")
    p.add_argument("--encoding", default=None, help="file encoding (default: TABIFY_ENCODING or utf-8)")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ... (default: LOG_LEVEL)")
    return p


def _run_stdin(tab_width: int, selection: Optional[Selection]) -> int:
    text = sys.stdin.read()
    try:
        res = tabify_text(text, tab_width, selection)
    except SelectionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    logger.info("stdin: %d of %d candidate lines changed", len(res.changed_lines), res.candidate_lines)
    sys.stdout.write(res.text)
    return 0


def _run_files(args: argparse.Namespace, tab_width: int, encoding: str) -> int:
    dry_run = args.dry_run or args.check
    rc = 0
    counts: Dict[str, int] = {}
    for path in args.paths:
        res = tabify_file(path, tab_width, args.lines, dry_run=dry_run, encoding=encoding)
        print(json.dumps({"path": res.path, "status": res.status, "details": res.details}, ensure_ascii=False))
        counts[res.status] = counts.get(res.status, 0) + 1
        if res.status == "FAILED":
            rc = 1
        elif args.check and res.status == "WOULD_CHANGE":
            rc = max(rc, 1)
    logger.info("%d file(s): %s", len(args.paths), ", ".join(f"{k}={v}" for k, v in sorted(counts.items())))
    return rc


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config()

    level = (args.log_level or cfg.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        tab_width = check_tab_width(args.tab_width) if args.tab_width is not None else cfg.validate_tab_width()
    except InvalidConfiguration as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if not args.paths:
        return _run_stdin(tab_width, args.lines)
    return _run_files(args, tab_width, args.encoding or cfg.encoding)


if __name__ == "__main__":
    sys.exit(main())
