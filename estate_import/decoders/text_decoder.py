from estate_import.decoders.base import BaseDecoder
from estate_import.decoders.exceptions import DecodeError


class TextDecoder(BaseDecoder):
    """Plain text passthrough."""

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        self._encoding = encoding

    def decode(self, content: bytes) -> str:
        try:
            return content.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise DecodeError(f"text decoding failed: {exc}") from exc
