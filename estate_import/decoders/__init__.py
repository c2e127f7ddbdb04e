from estate_import.decoders.base import BaseDecoder
from estate_import.decoders.exceptions import DecodeError, DecoderError, UnsupportedFormatError
from estate_import.decoders.factory import DecoderConfig, DecoderFactory, extension_of

__all__ = [
    "BaseDecoder",
    "DecodeError",
    "DecoderConfig",
    "DecoderError",
    "DecoderFactory",
    "UnsupportedFormatError",
    "extension_of",
]
