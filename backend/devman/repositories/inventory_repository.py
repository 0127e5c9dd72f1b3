"""Persistence for sites, devices and interfaces."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from devman.db import ArchivedInterface, Device, Interface, IpInterface, Site
from devman.repositories.base import FilteredRepository


class SiteRepository(FilteredRepository[Site]):
    model = Site
    id_column = "site_id"


class DeviceRepository(FilteredRepository[Device]):
    """Encapsulates all direct Device ORM access."""

    model = Device
    id_column = "dev_id"

    def get_by_host_name(self, host_name: str) -> Optional[Device]:
        return self.session.scalars(select(Device).where(Device.host_name == host_name)).first()


class InterfaceRepository(FilteredRepository[Interface]):
    model = Interface
    id_column = "if_id"


class IpInterfaceRepository(FilteredRepository[IpInterface]):
    model = IpInterface
    id_column = "ip_id"


class ArchivedInterfaceRepository(FilteredRepository[ArchivedInterface]):
    model = ArchivedInterface
    id_column = "ifa_id"
