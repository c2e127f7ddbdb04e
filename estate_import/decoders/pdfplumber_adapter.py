import io

import pdfplumber

from estate_import.decoders.base import BaseDecoder
from estate_import.decoders.exceptions import DecodeError


class PdfPlumberAdapter(BaseDecoder):
    """Extracts text from PDF using pdfplumber.

    Words on a page are joined with single spaces and every page, including
    blank ones, is terminated by one newline.
    """

    def decode(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [self._page_text(page) for page in pdf.pages]
            return "".join(f"{page}\n" for page in pages)
        except DecodeError:
            raise
        except Exception as exc:
            raise DecodeError(f"pdfplumber extraction failed: {exc}") from exc

    @staticmethod
    def _page_text(page: "pdfplumber.page.Page") -> str:
        words = page.extract_words(keep_blank_chars=False)
        return " ".join(word["text"] for word in words)
