# File: weblocscan/core/config/settings.py

import os
import shutil
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}")
        return None


class Settings:
    # --- Paths ---
    # Scan root used when the CLI is invoked without one
    SCAN_ROOT: Path = Path(os.getenv("WEBLOC_SCAN_ROOT", "."))
    # Reports are written to the current working directory unless overridden
    OUTPUT_DIR: Path = Path(os.getenv("WEBLOC_OUTPUT_DIR", "."))

    # --- Report ---
    OUTPUT_PREFIX: str = "webloc_export_"
    OUTPUT_TIMESTAMP_FORMAT: str = "%Y-%m-%d_%H-%M-%S"
    CREATION_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # --- External Tools ---
    # BSD stat (macOS) exposes birth time through `stat -f %B`
    STAT_BINARY: str = os.getenv("STAT_BINARY_PATH", shutil.which("stat") or "stat")
    # Unset means the stat call may block indefinitely
    STAT_TIMEOUT_SECONDS: Optional[float] = _optional_float("STAT_TIMEOUT_SECONDS")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def report_filename(self, started_at) -> str:
        """Name of the CSV report for a run started at `started_at`."""
        return f"{self.OUTPUT_PREFIX}{started_at.strftime(self.OUTPUT_TIMESTAMP_FORMAT)}.csv"


settings = Settings()
