"""Database module initialization."""

from .models import (
    ArchivedInterface,
    Base,
    Credential,
    Device,
    DeviceCredential,
    Interface,
    IpInterface,
    Site,
    SnmpAuthProto,
    SnmpCredential,
    SnmpPrivProto,
    SnmpSecLevel,
    Var,
)
from .session import SessionLocal, engine, get_db

__all__ = [
    "ArchivedInterface",
    "Base",
    "Credential",
    "Device",
    "DeviceCredential",
    "Interface",
    "IpInterface",
    "Site",
    "SnmpAuthProto",
    "SnmpCredential",
    "SnmpPrivProto",
    "SnmpSecLevel",
    "Var",
    "SessionLocal",
    "engine",
    "get_db",
]
