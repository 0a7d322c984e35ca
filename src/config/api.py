from __future__ import annotations

from .config import DEFAULT_TAB_WIDTH, Config, load_config

__all__ = ["DEFAULT_TAB_WIDTH", "Config", "load_config"]
