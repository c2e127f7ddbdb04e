"""Tab-separated single-line paste formats (spreadsheet row copy).

Client:   Name <TAB> Phone <TAB> Email
Property: Type <TAB> Location <TAB> Beds <TAB> Baths <TAB> Area <TAB> Price <TAB> Operation
"""

from dataclasses import dataclass

from estate_import.extraction.classifiers import cell_property_type, operation_type
from estate_import.extraction.numbers import leading_float, leading_int, parse_european_price
from estate_import.mapping.models import OperationType, PropertyType
from estate_import.paste.exceptions import ParseError

CLIENT_FIELD_COUNT = 3
PROPERTY_FIELD_COUNT = 7


@dataclass(frozen=True)
class ClientPaste:
    name: str
    phone: str
    email: str

    def as_candidate(self) -> dict[str, object]:
        return {"name": self.name, "phone": self.phone, "email": self.email}


@dataclass(frozen=True)
class PropertyPaste:
    title: str
    property_type: PropertyType
    location: str
    bedrooms: int
    bathrooms: int
    area: float
    price: float
    operation_type: OperationType

    def as_candidate(self) -> dict[str, object]:
        return {
            "title": self.title,
            "property_type": self.property_type.value,
            "location": self.location,
            "bedrooms": self.bedrooms,
            "bathrooms": self.bathrooms,
            "area": self.area,
            "price": self.price,
            "operation_type": self.operation_type.value,
        }


def _split(text: str, required: int) -> list[str]:
    stripped = text.strip()
    if not stripped:
        raise ParseError("empty paste")
    parts = stripped.split("\t")
    if len(parts) < required:
        raise ParseError("insufficient fields", field_count=len(parts))
    return parts


def parse_client_paste(text: str) -> ClientPaste:
    """Parse ``name\\tphone\\temail``; extra trailing fields are ignored.

    Raises:
        ParseError: if the paste is empty or has fewer than 3 fields.
    """
    name, phone, email = _split(text, CLIENT_FIELD_COUNT)[:CLIENT_FIELD_COUNT]
    return ClientPaste(name=name.strip(), phone=phone.strip(), email=email.strip())


def parse_property_paste(text: str) -> PropertyPaste:
    """Parse a 7-column property row.

    Raises:
        ParseError: if the paste is empty or has fewer than 7 fields.
    """
    parts = _split(text, PROPERTY_FIELD_COUNT)
    type_raw, location, beds, baths, area, price_raw, operation_raw = parts[:PROPERTY_FIELD_COUNT]
    return PropertyPaste(
        title=f"{type_raw} in {location}",
        property_type=cell_property_type(type_raw),
        location=location.strip(),
        bedrooms=leading_int(beds),
        bathrooms=leading_int(baths),
        area=leading_float(area),
        price=parse_european_price(price_raw),
        operation_type=operation_type(operation_raw),
    )
