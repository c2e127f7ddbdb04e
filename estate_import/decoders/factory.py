from dataclasses import dataclass
from typing import ClassVar

from estate_import.config.settings import Settings
from estate_import.decoders.base import BaseDecoder
from estate_import.decoders.csv_decoder import CsvDecoder
from estate_import.decoders.docx_decoder import DocxDecoder
from estate_import.decoders.exceptions import UnsupportedFormatError
from estate_import.decoders.pdfplumber_adapter import PdfPlumberAdapter
from estate_import.decoders.pymupdf_adapter import PyMuPdfAdapter
from estate_import.decoders.text_decoder import TextDecoder


@dataclass(frozen=True)
class DecoderConfig:
    """Explicit decoder configuration, fixed at factory construction."""

    pdf_engine: str = "pdfplumber"
    csv_encoding: str = "utf-8-sig"
    text_encoding: str = "utf-8-sig"

    @classmethod
    def from_settings(cls, settings: Settings) -> "DecoderConfig":
        return cls(
            pdf_engine=settings.pdf_engine,
            csv_encoding=settings.csv_encoding,
            text_encoding=settings.text_encoding,
        )


def extension_of(filename: str) -> str:
    """Lowercased text after the last dot, or "" when there is none."""
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].strip().lower()


class DecoderFactory:
    """Creates the decoder for a file extension."""

    PDF_ADAPTERS: ClassVar[dict[str, type[BaseDecoder]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }
    SINGLE_RECORD_EXTENSIONS: ClassVar[frozenset[str]] = frozenset({"txt", "csv", "pdf", "docx"})
    BULK_EXTENSIONS: ClassVar[frozenset[str]] = frozenset({"csv", "pdf", "docx"})

    def __init__(self, config: DecoderConfig) -> None:
        engine = config.pdf_engine.lower()
        pdf_cls = self.PDF_ADAPTERS.get(engine)
        if pdf_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(self.PDF_ADAPTERS)}"
            )
        self._csv = CsvDecoder(encoding=config.csv_encoding)
        self._decoders: dict[str, BaseDecoder] = {
            "txt": TextDecoder(encoding=config.text_encoding),
            "csv": self._csv,
            "pdf": pdf_cls(),
            "docx": DocxDecoder(),
        }

    @classmethod
    def create(cls, settings: Settings) -> "DecoderFactory":
        return cls(DecoderConfig.from_settings(settings))

    def for_extension(self, extension: str, bulk: bool = False) -> BaseDecoder:
        """Return the decoder for *extension*.

        Raises:
            UnsupportedFormatError: if the extension is not accepted for the
                requested workflow (``txt`` is rejected for bulk import).
        """
        ext = extension.lower().lstrip(".")
        allowed = self.BULK_EXTENSIONS if bulk else self.SINGLE_RECORD_EXTENSIONS
        if ext not in allowed:
            raise UnsupportedFormatError(ext)
        return self._decoders[ext]

    def csv_decoder(self) -> CsvDecoder:
        return self._csv
