"""Column types for network address data.

PostgreSQL stores these natively as ``INET`` and ``MACADDR``; other dialects
(SQLite in tests and local development) fall back to text in canonical form.
"""

from __future__ import annotations

import ipaddress
import sqlite3

from sqlalchemy import String, cast, func, literal
from sqlalchemy.dialects import postgresql
from sqlalchemy.types import TypeDecorator

from devman.domain.nullable import Network, to_mac, to_network


class InetType(TypeDecorator):
    """IP network/host route, surfaced in Python as ``ipaddress`` networks."""

    impl = String(43)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(postgresql.INET())
        return dialect.type_descriptor(String(43))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, str):
            value = to_network(value)
            if value is None:
                raise ValueError("Invalid IP network value")
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return ipaddress.ip_network(str(value), strict=False)


class MacAddrType(TypeDecorator):
    """48-bit hardware address, surfaced in Python as ``aa:bb:cc:dd:ee:ff`` text."""

    impl = String(17)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(postgresql.MACADDR())
        return dialect.type_descriptor(String(17))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        normalized = to_mac(str(value))
        if normalized is None:
            raise ValueError("Invalid MAC address value")
        return normalized

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return to_mac(str(value))


def contained_by(column, network: Network, dialect_name: str):
    """SQL predicate: ``column`` is inside or equal to ``network``."""
    if dialect_name == "postgresql":
        return column.op("<<=")(cast(literal(str(network)), postgresql.INET))
    return func.inet_contained_by(column, str(network)) == 1


def _inet_contained_by(address, network):
    if address is None or network is None:
        return None
    try:
        inner = ipaddress.ip_network(address, strict=False)
        outer = ipaddress.ip_network(network, strict=False)
        return int(inner.subnet_of(outer))
    except (TypeError, ValueError):
        # Mixed address families or unparsable text never match.
        return 0


def configure_sqlite_connection(dbapi_connection: sqlite3.Connection) -> None:
    """Give SQLite the pieces PostgreSQL provides natively.

    Registers ``inet_contained_by()``, makes ``LIKE`` case-sensitive so it stays
    distinct from ``ILIKE``, and turns on foreign key enforcement.
    """
    dbapi_connection.create_function("inet_contained_by", 2, _inet_contained_by, deterministic=True)
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA case_sensitive_like = ON")
        cursor.execute("PRAGMA foreign_keys = ON")
    finally:
        cursor.close()
