"""Accepted input keys per canonical field, in lookup order.

Order: canonical lowercase key, capitalized key, localized (Spanish) headers,
then cross-field fallbacks such as ``name`` for a property title.
"""

from collections.abc import Mapping, Sequence

PROPERTY_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("title", "Title", "Titulo", "Título", "name"),
    "description": ("description", "Description", "Descripcion", "Descripción"),
    "location": ("location", "Location", "Ubicacion", "Ubicación", "Address", "Direccion", "Dirección"),
    "price": ("price", "Price", "Precio", "Valor"),
    "bedrooms": ("bedrooms", "Bedrooms", "Beds", "Habitaciones", "Dormitorios"),
    "bathrooms": ("bathrooms", "Bathrooms", "Baths", "Baños", "Banos"),
    "area": ("area", "Area", "Área", "Superficie", "Metros"),
    "property_type": ("property_type", "Property_type", "Type", "Tipo"),
    "operation_type": ("operation_type", "Operation_type", "Operation", "Operacion", "Operación"),
    "features": ("features", "Features", "Caracteristicas", "Características"),
}

CLIENT_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "Name", "Nombre", "title"),
    "email": ("email", "Email", "E-mail", "Correo"),
    "phone": ("phone", "Phone", "Telefono", "Teléfono", "Tel"),
    "company": ("company", "Company", "Empresa", "Compania", "Compañía"),
    "notes": ("notes", "Notes", "Notas", "description"),
    "tags": ("tags", "Tags", "Etiquetas"),
}


def _present(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) > 0
    return True


def lookup(candidate: Mapping[str, object], aliases: Sequence[str]) -> object | None:
    """First present value among *aliases*; empty strings count as missing.

    Falls back to a case-insensitive match on the alias names so headers like
    ``PRICE`` or `` price `` still resolve.
    """
    for alias in aliases:
        value = candidate.get(alias)
        if _present(value):
            return value
    folded = {key.strip().lower(): value for key, value in candidate.items() if isinstance(key, str)}
    for alias in aliases:
        value = folded.get(alias.lower())
        if _present(value):
            return value
    return None
