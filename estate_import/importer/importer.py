from collections.abc import Sequence

from estate_import.config.settings import Settings
from estate_import.decoders.factory import DecoderFactory
from estate_import.extraction.client_extractor import extract_client_info
from estate_import.extraction.property_extractor import extract_property_info
from estate_import.importer.models import RawDocument
from estate_import.importer.pipeline import ImportContext, ImportStep, RecordSink
from estate_import.importer.steps import MapRecordsStep, PersistRecordsStep, ReadDocumentStep, SegmentStep
from estate_import.logging.logger import Log
from estate_import.mapping.mapper import RecordMapper
from estate_import.mapping.models import CanonicalRecord, ImportKind


class DocumentImporter:
    """Bulk import: read -> segment -> map -> persist.

    A failing step aborts the whole document; nothing is persisted and the
    error propagates to the caller after being logged.
    """

    def __init__(self, steps: Sequence[ImportStep]) -> None:
        self._steps = list(steps)

    def run(self, document: RawDocument, kind: ImportKind, user_id: str) -> list[CanonicalRecord]:
        Log.info("Starting import", document=document.filename, kind=kind.value, user_id=user_id)
        context = ImportContext(document=document, kind=kind, user_id=user_id)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            Log.error(f"Import of {document.filename} failed: {context.error_message}")
            raise
        return context.records


class FormExtractor:
    """Single-record extraction used to pre-fill the property and contact forms."""

    def __init__(self, decoder_factory: DecoderFactory) -> None:
        self._decoder_factory = decoder_factory

    def read_text(self, document: RawDocument) -> str:
        decoder = self._decoder_factory.for_extension(document.extension)
        text = decoder.decode(document.content)
        Log.debug("Decoded form document", document=document.filename, chars=len(text))
        return text

    def extract_property(self, document: RawDocument) -> dict[str, object]:
        return extract_property_info(self.read_text(document))

    def extract_client(self, document: RawDocument) -> dict[str, object]:
        return extract_client_info(self.read_text(document))


def build_importer(settings: Settings, sink: RecordSink | None = None) -> DocumentImporter:
    """Build a DocumentImporter; records are only persisted when a sink is given."""
    Log.configure(settings.log_level)
    decoder_factory = DecoderFactory.create(settings)
    steps: list[ImportStep] = [
        ReadDocumentStep(decoder_factory),
        SegmentStep(),
        MapRecordsStep(RecordMapper()),
    ]
    if sink is not None:
        steps.append(PersistRecordsStep(sink))
    return DocumentImporter(steps)


def build_form_extractor(settings: Settings) -> FormExtractor:
    Log.configure(settings.log_level)
    return FormExtractor(DecoderFactory.create(settings))
