class DecoderError(Exception):
    """Base exception for all decoding errors."""


class UnsupportedFormatError(DecoderError):
    """Raised when a file extension is not one of the recognized kinds."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file type: .{extension}" if extension else "Unsupported file type")


class DecodeError(DecoderError):
    """Raised when the underlying decoder fails (corrupt file, wrong magic bytes)."""
