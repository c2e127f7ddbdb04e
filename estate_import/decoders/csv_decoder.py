import csv
import io

from estate_import.decoders.base import BaseDecoder
from estate_import.decoders.exceptions import DecodeError

_REST_KEY = "__rest__"


class CsvDecoder(BaseDecoder):
    """Header-keyed CSV reader.

    ``decode`` flattens every data row into one line of space-joined values
    for the free-text extractors. ``read_rows`` keeps the header -> value
    mapping for the structured bulk import, which skips flattening entirely.
    """

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        self._encoding = encoding

    def decode(self, content: bytes) -> str:
        rows = self._parse(content)
        return "\n".join(" ".join(self._row_values(row)) for row in rows)

    def read_rows(self, content: bytes) -> list[dict[str, str]]:
        """Return data rows as header-keyed dicts, skipping blank rows."""
        rows: list[dict[str, str]] = []
        for row in self._parse(content):
            mapped = {
                key.strip(): (value or "").strip()
                for key, value in row.items()
                if key is not None and key != _REST_KEY
            }
            if any(mapped.values()):
                rows.append(mapped)
        return rows

    def _parse(self, content: bytes) -> list[dict[str, object]]:
        try:
            text = content.decode(self._encoding)
            reader = csv.DictReader(io.StringIO(text, newline=""), restkey=_REST_KEY)
            return list(reader)
        except (UnicodeDecodeError, csv.Error) as exc:
            raise DecodeError(f"csv parsing failed: {exc}") from exc

    @staticmethod
    def _row_values(row: dict[str, object]) -> list[str]:
        values: list[str] = []
        for key, value in row.items():
            if key == _REST_KEY and isinstance(value, list):
                values.extend(str(v) for v in value)
            else:
                values.append("" if value is None else str(value))
        return values
