import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from weblocscan.core.config.settings import settings

# Cross-Feature Imports (Driver wires the scanner, parser and resolver together)
from weblocscan.features.source_scanner.domain.interfaces import IFileWalker
from weblocscan.features.source_scanner.domain.models import ScanRequest, ScanSummary
from weblocscan.features.source_scanner.data.file_walker import LocalFileWalker
from weblocscan.features.source_scanner.data.webloc_rules import WeblocRules
from weblocscan.features.webloc_parser.domain.interfaces import IShortcutParser
from weblocscan.features.webloc_parser.data.xml_plist_parser import XmlPlistParser
from weblocscan.features.webloc_parser.service.api import extract_url
from weblocscan.features.creation_time.service.resolver import CreationTimeResolver

from ..domain.interfaces import IReportWriter
from ..domain.models import WeblocRecord, URL_ERROR_MARKER
from ..data.csv_writer import CsvReportWriter

logger = logging.getLogger(__name__)

SUMMARY_RULE = "=" * 60

class ReportDriver:
    """
    Scans a directory for .webloc files and writes one CSV row per file.
    """

    def __init__(self,
                 walker: Optional[IFileWalker] = None,
                 parser: Optional[IShortcutParser] = None,
                 resolver: Optional[CreationTimeResolver] = None,
                 output_dir: Optional[Path] = None,
                 writer_factory: Callable[[Path], IReportWriter] = CsvReportWriter,
                 clock: Callable[[], datetime] = datetime.now):
        self.walker = walker or LocalFileWalker()
        self.parser = parser or XmlPlistParser()
        self.resolver = resolver or CreationTimeResolver()
        self.output_dir = Path(output_dir) if output_dir is not None else settings.OUTPUT_DIR
        self.writer_factory = writer_factory
        self.clock = clock

    def report_path(self) -> Path:
        return self.output_dir / settings.report_filename(self.clock())

    def run(self, request: ScanRequest) -> ScanSummary:
        """
        Walks request.root_path and writes the report.

        Raises:
            RuntimeError: the report can't be created, or the walk failed
                (e.g. an unreadable directory). In the latter case the report
                is closed first. The original error is chained as __cause__.
        """
        output_path = self.report_path()
        summary = ScanSummary(output_path=output_path)

        logger.info(f"Scanning directory: {request.root_path}")
        logger.info(f"Output file: {output_path}")
        logger.info("")

        try:
            writer = self.writer_factory(output_path)
        except OSError as e:
            raise RuntimeError(f"Error: Could not create CSV file: {output_path}") from e

        with writer:
            try:
                for file_path in self.walker.walk(request.root_path):
                    if not WeblocRules.is_webloc(file_path):
                        continue
                    writer.write(self._process(request.root_path, file_path, summary))
            except Exception as e:
                raise RuntimeError(f"Error scanning directory: {e}") from e

        return summary

    def _process(self, root: Path, file_path: Path, summary: ScanSummary) -> WeblocRecord:
        summary.files_matched += 1
        logger.info(f"Processing: {file_path}")

        url = extract_url(file_path, self.parser)
        # Creation time is recorded even when the URL is missing
        creation_date = self.resolver.resolve(file_path)
        relative_path = WeblocRules.relative_dir(root, file_path)

        if url is None:
            logger.warning(f"  Warning: Could not extract URL from {file_path.name}")
            summary.files_failed += 1
            url = URL_ERROR_MARKER
        else:
            summary.files_succeeded += 1

        return WeblocRecord(
            filename=file_path.name,
            url=url,
            creation_date=creation_date,
            relative_path=relative_path,
        )

def format_summary(summary: ScanSummary) -> str:
    """Console summary block printed at the end of a run."""
    lines = [
        "",
        SUMMARY_RULE,
        "SUMMARY",
        SUMMARY_RULE,
        f"Total .webloc files found: {summary.files_matched}",
        f"Successfully processed: {summary.files_succeeded}",
        f"Errors: {summary.files_failed}",
        f"Output saved to: {summary.output_path}",
    ]
    return "\n".join(lines)

def export_weblocs(root_path: Path, output_dir: Optional[Path] = None) -> ScanSummary:
    """
    Standalone API: scans root_path and writes the CSV report.
    """
    request = ScanRequest(root_path=Path(root_path))
    return ReportDriver(output_dir=output_dir).run(request)
