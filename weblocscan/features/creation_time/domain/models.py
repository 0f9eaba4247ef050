from dataclasses import dataclass
from enum import Enum, unique

UNKNOWN_CREATION_DATE = "Unknown"

@unique
class TimestampSource(str, Enum):
    BIRTH_TIME = "birth_time"
    METADATA_CHANGE = "metadata_change"
    UNAVAILABLE = "unavailable"

@dataclass(frozen=True)
class CreationTime:
    """
    A resolved creation time and where it came from.
    METADATA_CHANGE means st_ctime stood in for a missing birth time,
    so the value may be later than the real creation.
    """
    text: str
    source: TimestampSource
