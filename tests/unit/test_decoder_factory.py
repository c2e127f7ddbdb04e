import pytest

from estate_import.config.settings import Settings
from estate_import.decoders.csv_decoder import CsvDecoder
from estate_import.decoders.docx_decoder import DocxDecoder
from estate_import.decoders.exceptions import UnsupportedFormatError
from estate_import.decoders.factory import DecoderConfig, DecoderFactory, extension_of
from estate_import.decoders.pdfplumber_adapter import PdfPlumberAdapter
from estate_import.decoders.pymupdf_adapter import PyMuPdfAdapter
from estate_import.decoders.text_decoder import TextDecoder


class TestDecoderFactory:
    def test_creates_pdfplumber_adapter_by_default(self) -> None:
        factory = DecoderFactory(DecoderConfig())
        assert isinstance(factory.for_extension("pdf"), PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        factory = DecoderFactory(DecoderConfig(pdf_engine="pymupdf"))
        assert isinstance(factory.for_extension("pdf"), PyMuPdfAdapter)

    def test_engine_is_case_insensitive(self) -> None:
        factory = DecoderFactory(DecoderConfig(pdf_engine="PyMuPDF"))
        assert isinstance(factory.for_extension("pdf"), PyMuPdfAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            DecoderFactory(DecoderConfig(pdf_engine="unknown"))

    def test_create_reads_engine_from_settings(self) -> None:
        factory = DecoderFactory.create(Settings(pdf_engine="pymupdf"))
        assert isinstance(factory.for_extension("pdf"), PyMuPdfAdapter)

    @pytest.mark.parametrize(
        ("extension", "decoder_cls"),
        [("txt", TextDecoder), ("csv", CsvDecoder), ("docx", DocxDecoder), (".DOCX", DocxDecoder)],
    )
    def test_maps_extensions(self, extension: str, decoder_cls: type) -> None:
        factory = DecoderFactory(DecoderConfig())
        assert isinstance(factory.for_extension(extension), decoder_cls)


class TestUnsupportedFormats:
    def test_xlsx_is_rejected(self) -> None:
        factory = DecoderFactory(DecoderConfig())
        with pytest.raises(UnsupportedFormatError, match=r"Unsupported file type: \.xlsx"):
            factory.for_extension("xlsx")

    def test_txt_is_rejected_for_bulk_import(self) -> None:
        factory = DecoderFactory(DecoderConfig())
        with pytest.raises(UnsupportedFormatError):
            factory.for_extension("txt", bulk=True)

    def test_missing_extension_is_rejected(self) -> None:
        factory = DecoderFactory(DecoderConfig())
        with pytest.raises(UnsupportedFormatError, match="Unsupported file type"):
            factory.for_extension("")

    def test_csv_decoder_is_the_bulk_csv_decoder(self) -> None:
        factory = DecoderFactory(DecoderConfig(csv_encoding="latin-1"))
        assert factory.csv_decoder() is factory.for_extension("csv", bulk=True)
        assert factory.csv_decoder().read_rows("Nombre\nJos\xe9\n".encode("latin-1")) == [{"Nombre": "Jos\xe9"}]


class TestExtensionOf:
    def test_lowercases_last_suffix(self) -> None:
        assert extension_of("Listing.Final.PDF") == "pdf"

    def test_no_dot(self) -> None:
        assert extension_of("README") == ""
