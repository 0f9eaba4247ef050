# File: tests/conftest.py

import pytest
import os
import sys
import time
from pathlib import Path
from typing import Optional

# 1. Add project root to path
sys.path.append(os.getcwd())

from weblocscan.features.creation_time.domain.interfaces import IBirthTimeSource

WEBLOC_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
	<key>URL</key>
	<string>{url}</string>
</dict>
</plist>
"""


class FixedBirthTime(IBirthTimeSource):
    """
    Test double: returns a fixed timestamp and records every lookup.
    Keeps tests from spawning `stat`.
    """

    def __init__(self, timestamp: Optional[float]):
        self.timestamp = timestamp
        self.calls = []

    def birth_timestamp(self, path: Path) -> Optional[float]:
        self.calls.append(Path(path))
        return self.timestamp


@pytest.fixture
def make_webloc():
    """
    Factory writing a Safari-style .webloc file.
    Pass `raw` to write arbitrary content instead of the standard plist.
    """
    def _make(path: Path, url: str = "https://example.com", raw: Optional[str] = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(raw if raw is not None else WEBLOC_TEMPLATE.format(url=url), encoding="utf-8")
        return path

    return _make


@pytest.fixture
def fixed_birth_time():
    # 2021-03-04 05:06:07 local time
    ts = time.mktime((2021, 3, 4, 5, 6, 7, 0, 0, -1))
    return FixedBirthTime(ts)


@pytest.fixture
def no_birth_time():
    return FixedBirthTime(None)
