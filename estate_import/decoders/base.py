from abc import ABC, abstractmethod


class BaseDecoder(ABC):
    """Contract for all format decoders (txt, csv, pdf, docx)."""

    @abstractmethod
    def decode(self, content: bytes) -> str:
        """Flatten raw file content into a single search corpus.

        Args:
            content: Raw file bytes as uploaded.

        Returns:
            Extracted text. Ordering within a page or row is preserved and
            pages/rows keep the order they were encountered in.

        Raises:
            DecodeError: if the underlying library cannot read the content.
        """
