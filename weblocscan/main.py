import argparse
import sys
from pathlib import Path
from typing import List, Optional

from weblocscan.core.config.settings import settings
from weblocscan.core.logging_setup import configure_logging
from weblocscan.features.source_scanner.domain.models import ScanRequest
from weblocscan.features.report.service.driver import ReportDriver, format_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weblocscan",
        description="Export the URLs of all .webloc files under a directory to CSV.",
    )
    parser.add_argument(
        "root", nargs="?", type=Path, default=settings.SCAN_ROOT,
        help="Directory to scan (default: $WEBLOC_SCAN_ROOT or the current directory)",
    )
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=settings.OUTPUT_DIR,
        help="Where the CSV report is written (default: current directory)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Show debug output (parse failures, birth-time fallbacks)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else settings.LOG_LEVEL)

    try:
        request = ScanRequest(root_path=args.root)
    except (FileNotFoundError, NotADirectoryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    driver = ReportDriver(output_dir=args.output_dir)
    try:
        summary = driver.run(request)
    except RuntimeError as e:
        print(e, file=sys.stderr)
        return 1

    print(format_summary(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
