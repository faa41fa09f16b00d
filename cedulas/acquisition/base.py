from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all text acquisition adapters."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            content: Raw file content.

        Returns:
            Extracted text in the reading order the format exposes; empty
            string when the file carries no text.

        Raises:
            DocumentReadError: if the bytes are not a valid file of the format.
        """
