import re

from estate_import.extraction.normalizer import non_empty_lines

EMAIL_RE = re.compile(r"([a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9._-]+)", re.IGNORECASE)
PHONE_RE = re.compile(r"(?:Phone|Tel|Mobile|Cel|Tlf)?\s*:?\s*(\+?[\d\s()-]{7,})", re.IGNORECASE)
# Letters and blanks on the label's own line; accented names are accepted.
# "Name: X" is preferred over an unpunctuated "Client X".
_NAME_VALUE = r"((?:[^\W\d_]|[^\S\n])+)"
NAME_WITH_COLON_RE = re.compile(r"\b(?:Name|Nombre|Client|Cliente)[^\S\n]*:[^\S\n]*" + _NAME_VALUE, re.IGNORECASE)
NAME_RE = re.compile(r"\b(?:Name|Nombre|Client|Cliente)\b[^\S\n]*:?[^\S\n]*" + _NAME_VALUE, re.IGNORECASE)

NAME_FALLBACK_MAX_LENGTH = 50
NOTES_MAX_LENGTH = 500


def extract_email(text: str) -> str:
    match = EMAIL_RE.search(text)
    return match.group(1) if match else ""


def extract_phone(text: str) -> str:
    """First phone-like run containing at least one digit."""
    for match in PHONE_RE.finditer(text):
        candidate = match.group(1).strip()
        if any(ch.isdigit() for ch in candidate):
            return candidate
    return ""


def extract_name(text: str, lines: list[str] | None = None) -> str:
    for pattern in (NAME_WITH_COLON_RE, NAME_RE):
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()
    lines = non_empty_lines(text) if lines is None else lines
    if lines and len(lines[0]) < NAME_FALLBACK_MAX_LENGTH and "@" not in lines[0]:
        return lines[0]
    return ""


def extract_client_info(text: str) -> dict[str, object]:
    lines = non_empty_lines(text)
    return {
        "name": extract_name(text, lines),
        "email": extract_email(text),
        "phone": extract_phone(text),
        "notes": text[:NOTES_MAX_LENGTH],
    }
