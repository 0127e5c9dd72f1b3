"""Repository layer exports."""

from .base import FilteredRepository, SQLAlchemyRepository
from .config_repository import VarRepository
from .credential_repository import (
    CredentialRepository,
    DeviceCredentialRepository,
    SnmpCredentialRepository,
)
from .inventory_repository import (
    ArchivedInterfaceRepository,
    DeviceRepository,
    InterfaceRepository,
    IpInterfaceRepository,
    SiteRepository,
)

__all__ = [
    "ArchivedInterfaceRepository",
    "CredentialRepository",
    "DeviceCredentialRepository",
    "DeviceRepository",
    "FilteredRepository",
    "InterfaceRepository",
    "IpInterfaceRepository",
    "SQLAlchemyRepository",
    "SiteRepository",
    "SnmpCredentialRepository",
    "VarRepository",
]
