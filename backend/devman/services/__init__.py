"""Service layer entry points."""

from .base import EntityService
from .codec import EntityCodec
from .config_service import VarService
from .credential_service import (
    CredentialService,
    DeviceCredentialService,
    SnmpCredentialService,
)
from .inventory_service import (
    ArchivedInterfaceService,
    DeviceService,
    InterfaceService,
    IpInterfaceService,
    SiteService,
)

__all__ = [
    "ArchivedInterfaceService",
    "CredentialService",
    "DeviceCredentialService",
    "DeviceService",
    "EntityCodec",
    "EntityService",
    "InterfaceService",
    "IpInterfaceService",
    "SiteService",
    "SnmpCredentialService",
    "VarService",
]
