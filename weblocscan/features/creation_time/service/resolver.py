import os
import sys
import shutil
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from weblocscan.core.config.settings import settings

from ..domain.interfaces import IBirthTimeSource
from ..domain.models import CreationTime, TimestampSource, UNKNOWN_CREATION_DATE
from ..data.stat_adapter import StatCommandBirthTime, NullBirthTime

logger = logging.getLogger(__name__)

# GNU stat also accepts `-f %B` but prints filesystem block size, not birth time
BSD_PLATFORMS = ("darwin", "freebsd", "openbsd", "netbsd")

def select_birth_time_source(platform: Optional[str] = None) -> IBirthTimeSource:
    """
    Capability detection: use BSD stat when the platform has it, otherwise
    let the resolver fall straight through to filesystem metadata.
    """
    platform = platform or sys.platform
    if platform.startswith(BSD_PLATFORMS) and shutil.which(settings.STAT_BINARY):
        return StatCommandBirthTime()
    return NullBirthTime()

class CreationTimeResolver:
    """
    Best-effort creation time for a file, formatted in local time.

    The primary source reports true birth time. When it can't, st_ctime
    (last metadata change) is used instead and may be later than the
    actual creation.
    """

    def __init__(self, primary: Optional[IBirthTimeSource] = None,
                 date_format: str = settings.CREATION_DATE_FORMAT):
        self.primary = primary or select_birth_time_source()
        self.date_format = date_format

    def lookup(self, path: Path) -> CreationTime:
        timestamp = self.primary.birth_timestamp(path)
        text = self._format(timestamp) if timestamp is not None else None
        if text is not None:
            return CreationTime(text, TimestampSource.BIRTH_TIME)

        try:
            timestamp = os.stat(path).st_ctime
        except OSError as e:
            logger.debug(f"No timestamp available for {path}: {e}")
            return CreationTime(UNKNOWN_CREATION_DATE, TimestampSource.UNAVAILABLE)

        logger.debug(f"Birth time unavailable for {path}, using metadata change time")
        text = self._format(timestamp)
        if text is None:
            return CreationTime(UNKNOWN_CREATION_DATE, TimestampSource.UNAVAILABLE)
        return CreationTime(text, TimestampSource.METADATA_CHANGE)

    def resolve(self, path: Path) -> str:
        """Formatted creation date, or "Unknown"."""
        return self.lookup(path).text

    def _format(self, timestamp: float) -> Optional[str]:
        try:
            return datetime.fromtimestamp(timestamp).strftime(self.date_format)
        except (OverflowError, OSError, ValueError):
            return None
