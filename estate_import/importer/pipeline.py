from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from estate_import.importer.models import RawDocument
from estate_import.mapping.models import CandidateRecord, CanonicalRecord, ImportKind


class RecordSink(Protocol):
    """Persistence collaborator: anything that can store mapped records."""

    def save_records(self, kind: ImportKind, records: Sequence[CanonicalRecord]) -> int: ...


@dataclass(slots=True)
class ImportContext:
    document: RawDocument
    kind: ImportKind
    user_id: str
    structured: bool = False
    extracted_text: str = ""
    candidates: list[CandidateRecord] = field(default_factory=list)
    records: list[CanonicalRecord] = field(default_factory=list)
    saved_count: int = 0
    error_message: str = ""


class ImportStep(ABC):
    @abstractmethod
    def run(self, context: ImportContext) -> ImportContext:
        raise NotImplementedError
