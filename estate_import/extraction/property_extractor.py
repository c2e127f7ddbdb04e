import re

from estate_import.extraction.classifiers import document_property_type, operation_type
from estate_import.extraction.normalizer import non_empty_lines
from estate_import.extraction.numbers import leading_float, leading_int, parse_decimal_comma, strip_thousands

PRICE_RE = re.compile(r"(?:Price|Precio|Valor)\s*:?\s*\$?\s*([\d,.]+)", re.IGNORECASE)
BEDROOMS_RE = re.compile(r"(\d+)\s*(?:beds|bedrooms|hab|habitaciones|dormitorios)", re.IGNORECASE)
BATHROOMS_RE = re.compile(r"(\d+)\s*(?:baths|bathrooms|baños)", re.IGNORECASE)
AREA_RE = re.compile(r"(\d+(?:[,.]\d+)?)\s*(?:sqft|m2|sq\s*m|meters|metros)", re.IGNORECASE)
LOCATION_RE = re.compile(r"(?:Location|Ubicación|Address|Dirección)\s*:?\s*(.+)", re.IGNORECASE)

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000


def extract_price(text: str) -> float:
    # Periods are dropped from the whole text first so "1.250.000" reads as
    # 1250000; a decimal part is therefore folded into the integer.
    match = PRICE_RE.search(text.replace(".", ""))
    if match is None:
        return 0.0
    return leading_float(strip_thousands(match.group(1), periods=True))


def extract_bedrooms(text: str) -> int:
    match = BEDROOMS_RE.search(text)
    return leading_int(match.group(1)) if match else 0


def extract_bathrooms(text: str) -> int:
    match = BATHROOMS_RE.search(text)
    return leading_int(match.group(1)) if match else 0


def extract_area(text: str) -> float:
    match = AREA_RE.search(text)
    return parse_decimal_comma(match.group(1)) if match else 0.0


def extract_location(text: str, lines: list[str] | None = None) -> str:
    """Labeled location, else the second non-empty line, else ""."""
    match = LOCATION_RE.search(text)
    if match:
        return match.group(1).strip()
    lines = non_empty_lines(text) if lines is None else lines
    return lines[1] if len(lines) > 1 else ""


def truncate_title(line: str) -> str:
    if len(line) > TITLE_MAX_LENGTH:
        return line[: TITLE_MAX_LENGTH - 3] + "..."
    return line


def extract_property_info(text: str) -> dict[str, object]:
    """Best-effort property fields from a single document.

    Never raises: every field falls back to 0, "" or the default type.
    """
    lines = non_empty_lines(text)
    return {
        "title": truncate_title(lines[0]) if lines else "",
        "description": text[:DESCRIPTION_MAX_LENGTH],
        "price": extract_price(text),
        "bedrooms": extract_bedrooms(text),
        "bathrooms": extract_bathrooms(text),
        "area": extract_area(text),
        "property_type": document_property_type(text).value,
        "operation_type": operation_type(text).value,
        "location": extract_location(text, lines),
    }
