"""
SpacesTabifier configuration loader.

- Reads environment variables and .env without failing on import.
- Tab width is validated explicitly by the caller, never on load.

Usage:
    from src.config.api import load_config
    cfg = load_config()
    width = cfg.validate_tab_width()
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from dotenv import load_dotenv

from src.normalizer.api import check_tab_width

DEFAULT_TAB_WIDTH = 4


def _getenv_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    return val


def _getenv_int(name: str, default: int) -> Union[int, str]:
    """int value, or the raw string if it does not parse (rejected on validate)."""
    val = os.getenv(name)
    if val is None or val == "":
        return default
    try:
        return int(val.strip())
    except ValueError:
        return val


@dataclass(frozen=True)
class Config:
    tab_width: Union[int, str] = DEFAULT_TAB_WIDTH
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def validate_tab_width(self) -> int:
        """Return the tab width or raise InvalidConfiguration (not an integer, zero, negative)."""
        return check_tab_width(self.tab_width)


_CONFIG_SINGLETON: Optional[Config] = None


def load_config(reload: bool = False) -> Config:
    """
    Load configuration from environment and .env (once) with defaults.
    Use reload=True to force re-reading.
    """
    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is not None and not reload:
        return _CONFIG_SINGLETON

    # do not override already-set env vars
    load_dotenv(override=False)

    cfg = Config(
        tab_width=_getenv_int("TABIFY_TAB_WIDTH", DEFAULT_TAB_WIDTH),
        encoding=_getenv_str("TABIFY_ENCODING", "utf-8") or "utf-8",
        log_level=(_getenv_str("LOG_LEVEL", "WARNING") or "WARNING").upper(),
    )

    _CONFIG_SINGLETON = cfg
    return cfg
