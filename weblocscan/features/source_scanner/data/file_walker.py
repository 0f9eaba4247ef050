import os
from pathlib import Path
from typing import Iterator
from ..domain.interfaces import IFileWalker

def _raise(error: OSError) -> None:
    raise error

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    """

    def walk(self, root: Path) -> Iterator[Path]:
        # os.walk swallows listing errors unless onerror re-raises them.
        # An unreadable subdirectory therefore aborts the walk.
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
            for filename in filenames:
                yield Path(dirpath) / filename
