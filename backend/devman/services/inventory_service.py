"""Site, device and interface services."""

from __future__ import annotations

from devman.db import ArchivedInterface, Device, Interface, IpInterface, Site
from devman.domain.exceptions import ConflictError
from devman.repositories import (
    ArchivedInterfaceRepository,
    DeviceRepository,
    InterfaceRepository,
    IpInterfaceRepository,
    SiteRepository,
)
from devman.schemas.device import DeviceResponse
from devman.schemas.interface import (
    ArchivedInterfaceResponse,
    InterfaceResponse,
    IpInterfaceResponse,
)
from devman.schemas.site import SiteResponse
from devman.services.base import EntityService
from devman.services.codec import EntityCodec


class SiteService(EntityService[SiteResponse]):
    entity_name = "Site"
    repository_class = SiteRepository
    codec = EntityCodec(Site, SiteResponse)


class DeviceService(EntityService[DeviceResponse]):
    """Business logic for device records."""

    entity_name = "Device"
    repository_class = DeviceRepository
    codec = EntityCodec(Device, DeviceResponse, network_fields=("ip4_addr", "ip6_addr"))

    def create(self, payload):
        if self.repository.get_by_host_name(payload.host_name):
            raise ConflictError("Device with this host name already exists")
        return super().create(payload)


class InterfaceService(EntityService[InterfaceResponse]):
    entity_name = "Interface"
    repository_class = InterfaceRepository
    codec = EntityCodec(Interface, InterfaceResponse, mac_fields=("mac",))


class IpInterfaceService(EntityService[IpInterfaceResponse]):
    entity_name = "IP interface"
    repository_class = IpInterfaceRepository
    codec = EntityCodec(IpInterface, IpInterfaceResponse, network_fields=("ip_addr",))


class ArchivedInterfaceService(EntityService[ArchivedInterfaceResponse]):
    entity_name = "Archived interface"
    repository_class = ArchivedInterfaceRepository
    codec = EntityCodec(
        ArchivedInterface,
        ArchivedInterfaceResponse,
        network_fields=("host_ip4", "host_ip6"),
        mac_fields=("mac",),
    )
