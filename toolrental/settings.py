"""Runtime settings read from ``TOOLRENTAL_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

# Default settings
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_DATE_FORMAT = "%m/%d/%y"

ENV_CATALOG = "TOOLRENTAL_CATALOG"
ENV_LOG_LEVEL = "TOOLRENTAL_LOG_LEVEL"
ENV_DATE_FORMAT = "TOOLRENTAL_DATE_FORMAT"


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one process.

    Attributes:
        catalog_path: JSON catalog to load instead of the built-in one
        log_level: Logging level name for the CLI
        date_format: strftime format used on receipts
    """

    catalog_path: Optional[Path] = None
    log_level: str = _DEFAULT_LOG_LEVEL
    date_format: str = _DEFAULT_DATE_FORMAT


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment (``os.environ`` if not given)."""
    if environ is None:
        environ = os.environ

    catalog = environ.get(ENV_CATALOG, "").strip()
    return Settings(
        catalog_path=Path(catalog) if catalog else None,
        log_level=environ.get(ENV_LOG_LEVEL, _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL,
        date_format=environ.get(ENV_DATE_FORMAT, _DEFAULT_DATE_FORMAT) or _DEFAULT_DATE_FORMAT,
    )
