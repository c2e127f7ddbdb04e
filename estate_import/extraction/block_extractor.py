"""Segment unstructured bulk-import text into candidate records.

Each blank-line separated block is one candidate. A block becomes a record
only when at least one labeled field (price, name, email, phone, type) is
found in it; blocks without any are dropped.
"""

import re

from estate_import.extraction.normalizer import non_empty_lines, split_blocks
from estate_import.extraction.property_extractor import AREA_RE, BATHROOMS_RE, BEDROOMS_RE
from estate_import.mapping.models import CandidateRecord

LABELED_FIELDS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("price", re.compile(r"(?:Price|Precio):[^\S\n]*\$?([\d,]+)", re.IGNORECASE)),
    ("name", re.compile(r"(?:Name|Nombre):[^\S\n]*(.+)", re.IGNORECASE)),
    (
        "email",
        re.compile(
            r"(?:Email|Correo):[^\S\n]*([a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9._-]+)",
            re.IGNORECASE,
        ),
    ),
    ("phone", re.compile(r"(?:Phone|Tel|Telefono|Teléfono):[^\S\n]*([+\d \t()-]+)", re.IGNORECASE)),
    ("property_type", re.compile(r"(?:Type|Tipo):[^\S\n]*(.+)", re.IGNORECASE)),
)

# Filled in only for blocks already accepted through a labeled field.
SUPPLEMENTARY_FIELDS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("location", re.compile(r"(?:Location|Ubicación|Address|Dirección):[^\S\n]*(.+)", re.IGNORECASE)),
    ("bedrooms", BEDROOMS_RE),
    ("bathrooms", BATHROOMS_RE),
    ("area", AREA_RE),
)


def extract_block(block: str) -> CandidateRecord | None:
    """Candidate record for one block, or None when nothing is recognized."""
    item: CandidateRecord = {}
    for key, pattern in LABELED_FIELDS:
        match = pattern.search(block)
        if match is None:
            continue
        value = match.group(1).strip()
        item[key] = value.replace(",", "") if key == "price" else value

    if not item:
        return None

    for key, pattern in SUPPLEMENTARY_FIELDS:
        match = pattern.search(block)
        if match is not None:
            item[key] = match.group(1).strip()

    lines = non_empty_lines(block)
    heading = lines[0] if lines else ""
    if not item.get("name"):
        item["title"] = heading
        item["name"] = heading
    item["description"] = block.strip()
    return item


def extract_records(text: str) -> list[CandidateRecord]:
    records: list[CandidateRecord] = []
    for block in split_blocks(text):
        item = extract_block(block)
        if item is not None:
            records.append(item)
    return records
