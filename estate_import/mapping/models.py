from dataclasses import dataclass, field
from enum import Enum

CandidateRecord = dict[str, object]


class PropertyType(str, Enum):
    HOUSE = "house"
    APARTMENT = "apartment"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    LAND = "land"


class OperationType(str, Enum):
    SALE = "sale"
    RENT = "rent"


class PropertyStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    PENDING = "pending"


class ClientType(str, Enum):
    BUYER = "buyer"
    TENANT = "tenant"
    SELLER = "seller"
    LANDLORD = "landlord"
    INVESTOR = "investor"


class ClientStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    CONVERTED = "converted"


class ImportKind(str, Enum):
    """Import type picked by the user; never inferred from content."""

    PROPERTY = "property"
    BUYER = "buyer"
    SELLER = "seller"

    @property
    def client_type(self) -> ClientType:
        return ClientType.SELLER if self is ImportKind.SELLER else ClientType.BUYER


@dataclass(frozen=True)
class PropertyRecord:
    """Canonical property row handed to persistence."""

    user_id: str
    title: str = "Untitled Property"
    description: str = ""
    location: str = ""
    price: float = 0.0
    bedrooms: int = 0
    bathrooms: int = 0
    area: float = 0.0
    property_type: PropertyType = PropertyType.HOUSE
    operation_type: OperationType = OperationType.SALE
    status: PropertyStatus = PropertyStatus.AVAILABLE
    features: tuple[str, ...] = ()

    def to_row(self) -> dict[str, object]:
        return {
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "location": self.location,
            "price": self.price,
            "bedrooms": self.bedrooms,
            "bathrooms": self.bathrooms,
            "area": self.area,
            "property_type": self.property_type.value,
            "operation_type": self.operation_type.value,
            "status": self.status.value,
            "features": list(self.features),
        }


@dataclass(frozen=True)
class ClientRecord:
    """Canonical contact row handed to persistence."""

    user_id: str
    name: str = "Unknown Name"
    email: str = ""
    phone: str = ""
    company: str = ""
    notes: str = ""
    client_type: ClientType = ClientType.BUYER
    status: ClientStatus = ClientStatus.ACTIVE
    tags: frozenset[str] = field(default_factory=frozenset)

    def to_row(self) -> dict[str, object]:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "company": self.company,
            "notes": self.notes,
            "client_type": self.client_type.value,
            "status": self.status.value,
            "tags": sorted(self.tags),
        }


CanonicalRecord = PropertyRecord | ClientRecord
