"""Pre-fill an edit form from fields extracted out of an uploaded document.

An extracted value replaces the current one only when it is truthy, so a
missed pattern (0 or "") never wipes something the user already typed.
"""

from collections.abc import Mapping

PROPERTY_FORM_FIELDS = (
    "title",
    "description",
    "price",
    "bedrooms",
    "bathrooms",
    "area",
    "location",
    "property_type",
    "operation_type",
)
CLIENT_FORM_FIELDS = ("name", "email", "phone")
EXTRACTED_NOTES_HEADER = "Extracted content:"


def _merge(
    current: Mapping[str, object],
    extracted: Mapping[str, object],
    fields: tuple[str, ...],
) -> dict[str, object]:
    merged = dict(current)
    for key in fields:
        value = extracted.get(key)
        if value:
            merged[key] = value
        else:
            merged.setdefault(key, "")
    return merged


def merge_property_form(
    current: Mapping[str, object],
    extracted: Mapping[str, object],
) -> dict[str, object]:
    return _merge(current, extracted, PROPERTY_FORM_FIELDS)


def merge_client_form(
    current: Mapping[str, object],
    extracted: Mapping[str, object],
) -> dict[str, object]:
    """Merge contact fields and append the extracted notes to existing notes."""
    merged = _merge(current, extracted, CLIENT_FORM_FIELDS)
    previous = str(current.get("notes") or "")
    notes = str(extracted.get("notes") or "")
    merged["notes"] = f"{previous}\n\n{EXTRACTED_NOTES_HEADER}\n{notes}".strip()
    return merged
