import pymupdf

from estate_import.decoders.base import BaseDecoder
from estate_import.decoders.exceptions import DecodeError

# Index of the word string inside a ``page.get_text("words")`` tuple.
_WORD_TEXT = 4


class PyMuPdfAdapter(BaseDecoder):
    """Extracts text from PDF using PyMuPDF."""

    def decode(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [
                    " ".join(word[_WORD_TEXT] for word in page.get_text("words"))
                    for page in doc
                ]
            return "".join(f"{page}\n" for page in pages)
        except DecodeError:
            raise
        except Exception as exc:
            raise DecodeError(f"pymupdf extraction failed: {exc}") from exc
