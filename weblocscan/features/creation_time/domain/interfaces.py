from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

class IBirthTimeSource(ABC):
    """
    Contract for querying a file's creation ("birth") time.
    Abstracts the platform-native query (e.g. BSD stat) from the resolver.
    """
    @abstractmethod
    def birth_timestamp(self, path: Path) -> Optional[float]:
        """
        Returns the birth time as a Unix timestamp, or None if the
        platform/filesystem can't provide one. Must not raise.
        """
        pass
