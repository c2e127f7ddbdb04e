import io
from collections.abc import Iterator

from docx import Document
from docx.document import Document as DocxDocument
from docx.table import Table, _Cell

from estate_import.decoders.base import BaseDecoder
from estate_import.decoders.exceptions import DecodeError


class DocxDecoder(BaseDecoder):
    """Extracts raw paragraph text from a Word document using python-docx.

    Body paragraphs and tables are read in document order. Paragraphs are
    joined with newlines, so an empty paragraph becomes a blank line and
    therefore a block boundary. Every table row is set off by blank lines,
    one row per block, with its cell paragraphs as the block's lines.
    """

    def decode(self, content: bytes) -> str:
        try:
            document = Document(io.BytesIO(content))
            lines = list(self._container_lines(document))
        except Exception as exc:
            raise DecodeError(f"docx extraction failed: {exc}") from exc
        return "\n".join(lines)

    def _container_lines(self, container: DocxDocument | _Cell) -> Iterator[str]:
        for item in container.iter_inner_content():
            if isinstance(item, Table):
                yield from self._table_lines(item)
            else:
                yield item.text

    def _table_lines(self, table: Table) -> Iterator[str]:
        for row in table.rows:
            yield ""
            for cell in row.cells:
                yield from self._container_lines(cell)
        yield ""
