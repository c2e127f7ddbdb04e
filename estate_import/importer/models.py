from dataclasses import dataclass

from estate_import.decoders.factory import extension_of


@dataclass(frozen=True)
class RawDocument:
    """An uploaded file, held in memory only for the duration of one import."""

    filename: str
    content: bytes

    @property
    def extension(self) -> str:
        return extension_of(self.filename)
