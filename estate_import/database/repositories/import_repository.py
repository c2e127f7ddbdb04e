from collections.abc import Sequence
from typing import Any

import psycopg
from psycopg.types.json import Jsonb

from estate_import.database.connection import get_connection
from estate_import.mapping.models import CanonicalRecord, ClientRecord, ImportKind, PropertyRecord

_PROPERTY_INSERT = """
    INSERT INTO properties
    (user_id, title, description, location, price, bedrooms, bathrooms, area,
     property_type, operation_type, status, features)
    VALUES (%(user_id)s, %(title)s, %(description)s, %(location)s, %(price)s,
            %(bedrooms)s, %(bathrooms)s, %(area)s, %(property_type)s,
            %(operation_type)s, %(status)s, %(features)s)
"""

_CONTACT_INSERT = """
    INSERT INTO contacts (user_id, name, email, phone, client_type, status)
    VALUES (%(user_id)s, %(name)s, %(email)s, %(phone)s, %(client_type)s, %(status)s)
"""

_CONTACT_FULL_INSERT = """
    INSERT INTO contacts
    (user_id, name, email, phone, company, notes, client_type, status, tags)
    VALUES (%(user_id)s, %(name)s, %(email)s, %(phone)s, %(company)s, %(notes)s,
            %(client_type)s, %(status)s, %(tags)s)
"""

# buyers / sellers keep their Spanish column names.
_PARTY_INSERTS: dict[ImportKind, str] = {
    ImportKind.BUYER: """
        INSERT INTO buyers (user_id, nombre, telefono, email)
        VALUES (%(user_id)s, %(nombre)s, %(telefono)s, %(email)s)
    """,
    ImportKind.SELLER: """
        INSERT INTO sellers (user_id, nombre, telefono, email, propiedades)
        VALUES (%(user_id)s, %(nombre)s, %(telefono)s, %(email)s, '')
    """,
}


class ImportRepository:
    """Persists mapped import records.

    Properties go to ``properties``. Buyers and sellers go to their own
    tables and are mirrored into ``contacts`` so they show in the contact
    list. Each call is one transaction.
    """

    def save_records(self, kind: ImportKind, records: Sequence[CanonicalRecord]) -> int:
        if not records:
            return 0
        with get_connection() as conn:
            if kind is ImportKind.PROPERTY:
                self._insert_properties(conn, records)
            else:
                self._insert_parties(conn, kind, records)
            conn.commit()
        return len(records)

    def _insert_properties(
        self,
        conn: psycopg.Connection[Any],
        records: Sequence[CanonicalRecord],
    ) -> None:
        rows = []
        for record in records:
            if not isinstance(record, PropertyRecord):
                raise TypeError(f"Expected PropertyRecord, got {type(record).__name__}")
            row = record.to_row()
            row["features"] = Jsonb(row["features"])
            rows.append(row)
        with conn.cursor() as cur:
            cur.executemany(_PROPERTY_INSERT, rows)

    def _insert_parties(
        self,
        conn: psycopg.Connection[Any],
        kind: ImportKind,
        records: Sequence[CanonicalRecord],
    ) -> None:
        party_rows = []
        contact_rows = []
        for record in records:
            if not isinstance(record, ClientRecord):
                raise TypeError(f"Expected ClientRecord, got {type(record).__name__}")
            party_rows.append(
                {
                    "user_id": record.user_id,
                    "nombre": record.name,
                    "telefono": record.phone,
                    "email": record.email,
                }
            )
            contact_rows.append(
                {
                    "user_id": record.user_id,
                    "name": record.name,
                    "email": record.email,
                    "phone": record.phone,
                    "client_type": record.client_type.value,
                    "status": record.status.value,
                }
            )
        with conn.cursor() as cur:
            cur.executemany(_PARTY_INSERTS[kind], party_rows)
            cur.executemany(_CONTACT_INSERT, contact_rows)

    def save_contact(self, record: ClientRecord) -> None:
        """Insert a single reviewed contact, including notes, company and tags."""
        with get_connection() as conn:
            conn.execute(_CONTACT_FULL_INSERT, record.to_row())
            conn.commit()
