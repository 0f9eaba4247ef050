from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts os.walk vs pathlib.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Yields every non-directory entry under root, recursively, one by one.
        Traversal errors (e.g. unreadable subdirectories) must be raised,
        not skipped.
        """
        pass
