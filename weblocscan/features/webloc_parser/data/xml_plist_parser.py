import logging
import xml.etree.ElementTree as ET
from typing import Optional
from ..domain.interfaces import IShortcutParser
from ..domain.models import PlistTags, WEBLOC_TAGS

logger = logging.getLogger(__name__)

def _local_name(tag) -> str:
    # "{namespace}dict" -> "dict"; comments/PIs have non-string tags
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]

class XmlPlistParser(IShortcutParser):
    """
    Reads the URL out of an XML property list.
    Only the flat <dict> child list is inspected; no generic plist decoding.
    """

    def __init__(self, tags: PlistTags = WEBLOC_TAGS):
        self.tags = tags

    def parse(self, content: bytes) -> Optional[str]:
        try:
            document = ET.fromstring(content)
        except (ET.ParseError, ValueError) as e:
            # Malformed or non-XML content is a "not found", not an error
            logger.debug(f"Plist parse failed: {e}")
            return None

        container = self._find_dict(document)
        if container is None:
            return None

        # Sequential scan: a <key>URL</key> arms the flag, the next <string> wins.
        # Other elements in between leave the flag untouched.
        url_key_seen = False
        for child in container:
            name = _local_name(child.tag)
            if name == self.tags.key_tag and (child.text or "") == self.tags.url_key:
                url_key_seen = True
            elif url_key_seen and name == self.tags.string_tag:
                return child.text or ""

        return None

    def _find_dict(self, document: ET.Element) -> Optional[ET.Element]:
        """First direct child of the document element named <dict>."""
        for child in document:
            if _local_name(child.tag) == self.tags.dict_tag:
                return child
        return None
