from estate_import.decoders.factory import DecoderFactory
from estate_import.extraction.block_extractor import extract_records
from estate_import.importer.pipeline import ImportContext, ImportStep, RecordSink
from estate_import.logging.logger import Log
from estate_import.mapping.mapper import RecordMapper


class ReadDocumentStep(ImportStep):
    """Rejects unsupported extensions, then decodes the document.

    CSV keeps its header-keyed rows as candidates directly; every other
    format is flattened to text for block segmentation.
    """

    def __init__(self, decoder_factory: DecoderFactory) -> None:
        self._decoder_factory = decoder_factory

    def run(self, context: ImportContext) -> ImportContext:
        extension = context.document.extension
        decoder = self._decoder_factory.for_extension(extension, bulk=True)
        if extension == "csv":
            context.candidates = self._decoder_factory.csv_decoder().read_rows(
                context.document.content
            )
            context.structured = True
            Log.info(f"Read {len(context.candidates)} rows from {context.document.filename}")
            return context
        context.extracted_text = decoder.decode(context.document.content)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {context.document.filename}"
        )
        return context


class SegmentStep(ImportStep):
    def run(self, context: ImportContext) -> ImportContext:
        if context.structured:
            return context
        context.candidates = extract_records(context.extracted_text)
        Log.info(f"Recognized {len(context.candidates)} candidate records")
        return context


class MapRecordsStep(ImportStep):
    def __init__(self, mapper: RecordMapper) -> None:
        self._mapper = mapper

    def run(self, context: ImportContext) -> ImportContext:
        context.records = self._mapper.map_many(
            context.candidates, context.kind, context.user_id
        )
        if not context.records:
            Log.warning(f"No importable data found in {context.document.filename}")
        return context


class PersistRecordsStep(ImportStep):
    def __init__(self, sink: RecordSink) -> None:
        self._sink = sink

    def run(self, context: ImportContext) -> ImportContext:
        if not context.records:
            return context
        context.saved_count = self._sink.save_records(context.kind, context.records)
        Log.info(f"Saved {context.saved_count} {context.kind.value} records")
        return context
