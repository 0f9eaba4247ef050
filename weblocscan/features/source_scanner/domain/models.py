from dataclasses import dataclass
from pathlib import Path
from typing import Optional

@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to scan a specific directory for .webloc files.
    """
    root_path: Path

    def __post_init__(self):
        # Path() also drops a trailing separator ("links/" -> "links")
        object.__setattr__(self, "root_path", Path(self.root_path))

        if not self.root_path.exists():
            raise FileNotFoundError(f"Base path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Base path is not a directory: {self.root_path}")

@dataclass
class ScanSummary:
    """
    Report returned after scanning completes.
    """
    files_matched: int = 0
    files_succeeded: int = 0
    files_failed: int = 0
    output_path: Optional[Path] = None

    @property
    def is_consistent(self) -> bool:
        return self.files_succeeded + self.files_failed == self.files_matched
