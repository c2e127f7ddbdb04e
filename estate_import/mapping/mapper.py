import re
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TypeVar

from estate_import.extraction.classifiers import (
    CELL_PROPERTY_TYPE_RULES,
    document_property_type,
    operation_type,
)
from estate_import.extraction.numbers import leading_float, leading_int, parse_decimal_comma
from estate_import.extraction.rules import matching_results
from estate_import.mapping.aliases import CLIENT_ALIASES, PROPERTY_ALIASES, lookup
from estate_import.mapping.models import (
    CandidateRecord,
    CanonicalRecord,
    ClientRecord,
    ClientStatus,
    ClientType,
    ImportKind,
    OperationType,
    PropertyRecord,
    PropertyStatus,
    PropertyType,
)

E = TypeVar("E", bound=Enum)

_STATUS_ALIASES = ("status", "Status", "Estado")
_PRICE_JUNK_RE = re.compile(r"[^0-9.\-]")
_LIST_SEPARATOR_RE = re.compile(r"[,;]")


def _text(value: object | None, default: str = "") -> str:
    if value is None:
        return default
    try:
        text = str(value)
    except ValueError:
        return default
    return text.strip() or default


def _price(value: object | None) -> float:
    # "$150,000" and "150000 €" both read as 150000.0
    if isinstance(value, str):
        return leading_float(_PRICE_JUNK_RE.sub("", value.replace(",", "")))
    return leading_float(value)


def _area(value: object | None) -> float:
    if isinstance(value, str):
        return parse_decimal_comma(value)
    return leading_float(value)


def _enum_value(value: object | None, enum_cls: type[E]) -> E | None:
    label = _text(value).lower()
    for member in enum_cls:
        if member.value == label:
            return member
    return None


def _property_type(value: object | None) -> PropertyType:
    exact = _enum_value(value, PropertyType)
    if exact is not None:
        return exact
    label = _text(value)
    cell_matches = matching_results(label, CELL_PROPERTY_TYPE_RULES)
    if cell_matches:
        return cell_matches[0]
    return document_property_type(label)


def _operation_type(value: object | None) -> OperationType:
    return _enum_value(value, OperationType) or operation_type(_text(value))


def _string_set(value: object | None) -> tuple[str, ...]:
    if value is None:
        return ()
    items: Iterable[object]
    if isinstance(value, str):
        items = _LIST_SEPARATOR_RE.split(value)
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = value
    else:
        items = (value,)
    seen: dict[str, None] = {}
    for item in items:
        text = _text(item)
        if text:
            seen.setdefault(text, None)
    return tuple(seen)


class RecordMapper:
    """Maps candidate records onto canonical property or client records.

    Total by construction: missing, empty or malformed values degrade to the
    record defaults and unrecognized keys are ignored.
    """

    def map_property(self, candidate: Mapping[str, object], user_id: str) -> PropertyRecord:
        def field(name: str) -> object | None:
            return lookup(candidate, PROPERTY_ALIASES[name])

        return PropertyRecord(
            user_id=user_id,
            title=_text(field("title"), "Untitled Property"),
            description=_text(field("description")),
            location=_text(field("location")),
            price=_price(field("price")),
            bedrooms=leading_int(field("bedrooms")),
            bathrooms=leading_int(field("bathrooms")),
            area=_area(field("area")),
            property_type=_property_type(field("property_type")),
            operation_type=_operation_type(field("operation_type")),
            status=_enum_value(lookup(candidate, _STATUS_ALIASES), PropertyStatus)
            or PropertyStatus.AVAILABLE,
            features=_string_set(field("features")),
        )

    def map_client(
        self,
        candidate: Mapping[str, object],
        user_id: str,
        client_type: ClientType = ClientType.BUYER,
    ) -> ClientRecord:
        def field(name: str) -> object | None:
            return lookup(candidate, CLIENT_ALIASES[name])

        return ClientRecord(
            user_id=user_id,
            name=_text(field("name"), "Unknown Name"),
            email=_text(field("email")),
            phone=_text(field("phone")),
            company=_text(field("company")),
            notes=_text(field("notes")),
            client_type=client_type,
            status=_enum_value(lookup(candidate, _STATUS_ALIASES), ClientStatus)
            or ClientStatus.ACTIVE,
            tags=frozenset(_string_set(field("tags"))),
        )

    def map_many(
        self,
        candidates: Iterable[CandidateRecord],
        kind: ImportKind,
        user_id: str,
    ) -> list[CanonicalRecord]:
        if kind is ImportKind.PROPERTY:
            return [self.map_property(candidate, user_id) for candidate in candidates]
        return [
            self.map_client(candidate, user_id, client_type=kind.client_type)
            for candidate in candidates
        ]
