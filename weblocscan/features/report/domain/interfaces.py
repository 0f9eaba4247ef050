from abc import ABC, abstractmethod
from pathlib import Path
from .models import WeblocRecord

class IReportWriter(ABC):
    """
    Contract for the append-only run report.
    Used as a context manager: opened once, closed on success or abort.
    """
    path: Path

    @abstractmethod
    def write(self, record: WeblocRecord) -> None:
        """Appends one row for the given record."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> "IReportWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
