from abc import ABC, abstractmethod
from typing import Optional

class IShortcutParser(ABC):
    """
    Contract for pulling the target URL out of a shortcut file's contents.
    """
    @abstractmethod
    def parse(self, content: bytes) -> Optional[str]:
        """
        Extracts the stored URL.

        Args:
            content: Raw bytes of the shortcut file.

        Returns:
            The URL string, or None when no URL can be found.
            Malformed input must return None, never raise.
        """
        pass
