from dataclasses import dataclass
from typing import List

REPORT_HEADER: List[str] = ["Filename", "URL", "Creation Date", "Relative Path"]
URL_ERROR_MARKER = "[ERROR: Could not extract URL]"

@dataclass(frozen=True)
class WeblocRecord:
    """
    One report row. Built per matched file, written, then discarded.
    """
    filename: str
    url: str
    creation_date: str
    relative_path: str

    def as_row(self) -> List[str]:
        return [self.filename, self.url, self.creation_date, self.relative_path]
