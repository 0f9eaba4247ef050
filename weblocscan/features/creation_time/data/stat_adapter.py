import math
import subprocess
import logging
from pathlib import Path
from typing import Optional
from weblocscan.core.config.settings import settings
from ..domain.interfaces import IBirthTimeSource

logger = logging.getLogger(__name__)

class StatCommandBirthTime(IBirthTimeSource):
    """
    Birth time via the BSD/macOS `stat -f %B` command.
    """

    def __init__(self, binary: Optional[str] = None, timeout: Optional[float] = None):
        self.binary = binary or settings.STAT_BINARY
        self.timeout = timeout if timeout is not None else settings.STAT_TIMEOUT_SECONDS

    def birth_timestamp(self, path: Path) -> Optional[float]:
        # Argument list, no shell: paths need no escaping
        cmd = [self.binary, "-f", "%B", str(path)]

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"stat failed for {path}: {e}")
            return None

        output = result.stdout.decode(errors="replace").strip()
        if result.returncode != 0 or not output:
            return None

        try:
            value = float(output)
        except ValueError:
            value = None

        if value is None or not math.isfinite(value):
            logger.debug(f"stat returned non-numeric birth time for {path}: {output!r}")
            return None
        # 0 means the filesystem recorded no birth time
        if value <= 0:
            return None
        return value

class NullBirthTime(IBirthTimeSource):
    """
    Used where no native birth-time query exists; always defers to the fallback.
    """

    def birth_timestamp(self, path: Path) -> Optional[float]:
        return None
