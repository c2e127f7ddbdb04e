"""Keyword rule sets for property and operation type detection."""

from estate_import.extraction.rules import KeywordRule, resolve
from estate_import.mapping.models import OperationType, PropertyType

# Free text of a whole document (English and Spanish listing vocabulary).
DOCUMENT_PROPERTY_TYPE_RULES: tuple[KeywordRule[PropertyType], ...] = (
    KeywordRule(("apartment", "piso", "flat"), PropertyType.APARTMENT),
    KeywordRule(("condo",), PropertyType.CONDO),
    KeywordRule(("land", "terreno"), PropertyType.LAND),
    KeywordRule(("townhouse", "adosado"), PropertyType.TOWNHOUSE),
)

# Short type cell of a pasted spreadsheet row ("Piso", "Chalet adosado", ...).
CELL_PROPERTY_TYPE_RULES: tuple[KeywordRule[PropertyType], ...] = (
    KeywordRule(("piso", "apartamento"), PropertyType.APARTMENT),
    KeywordRule(("casa", "chalet"), PropertyType.HOUSE),
    KeywordRule(("adosado",), PropertyType.TOWNHOUSE),
    KeywordRule(("terreno",), PropertyType.LAND),
    KeywordRule(("condo",), PropertyType.CONDO),
)

OPERATION_TYPE_RULES: tuple[KeywordRule[OperationType], ...] = (
    KeywordRule(("rent", "alquiler"), OperationType.RENT),
)


def document_property_type(text: str) -> PropertyType:
    return resolve(text, DOCUMENT_PROPERTY_TYPE_RULES, PropertyType.HOUSE)


def cell_property_type(text: str) -> PropertyType:
    return resolve(text.strip(), CELL_PROPERTY_TYPE_RULES, PropertyType.HOUSE)


def operation_type(text: str) -> OperationType:
    return resolve(text, OPERATION_TYPE_RULES, OperationType.SALE)
