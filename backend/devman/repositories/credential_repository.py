"""Credential persistence helpers."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from devman.db import Credential, DeviceCredential, SnmpCredential
from devman.repositories.base import FilteredRepository


class CredentialRepository(FilteredRepository[Credential]):
    model = Credential
    id_column = "cred_id"

    def get_by_label(self, label: str) -> Optional[Credential]:
        return self.session.scalars(select(Credential).where(Credential.label == label)).first()


class DeviceCredentialRepository(FilteredRepository[DeviceCredential]):
    model = DeviceCredential
    id_column = "cred_id"


class SnmpCredentialRepository(FilteredRepository[SnmpCredential]):
    model = SnmpCredential
    id_column = "snmp_cred_id"
