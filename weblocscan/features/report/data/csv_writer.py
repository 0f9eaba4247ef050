import csv
from pathlib import Path
from ..domain.interfaces import IReportWriter
from ..domain.models import REPORT_HEADER, WeblocRecord

class CsvReportWriter(IReportWriter):
    """
    Writes records to a CSV file, header first.
    Opening happens in the constructor so a failure surfaces before any scanning.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        # newline="" lets the csv module handle quoting of embedded newlines
        self._file = self.path.open("w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file, lineterminator="\n")
        self._writer.writerow(REPORT_HEADER)
        self.rows_written = 0

    def write(self, record: WeblocRecord) -> None:
        self._writer.writerow(record.as_row())
        self.rows_written += 1

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
