import logging
from pathlib import Path
from typing import Optional
from ..domain.interfaces import IShortcutParser
from ..data.xml_plist_parser import XmlPlistParser

logger = logging.getLogger(__name__)

def extract_url(file_path: Path, parser: Optional[IShortcutParser] = None) -> Optional[str]:
    """
    Standalone API: Returns the URL stored in a .webloc file, or None.
    Unreadable files are treated like files without a URL.
    """
    parser = parser or XmlPlistParser()

    try:
        content = Path(file_path).read_bytes()
    except OSError as e:
        logger.debug(f"Could not read {file_path}: {e}")
        return None

    return parser.parse(content)
