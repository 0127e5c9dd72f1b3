"""Credential service layer.

Every credential kind stores its secrets encrypted; the codec for each kind
names the secret-bearing fields.
"""

from __future__ import annotations

from devman.db import Credential, DeviceCredential, SnmpCredential
from devman.domain.exceptions import ConflictError
from devman.repositories import (
    CredentialRepository,
    DeviceCredentialRepository,
    SnmpCredentialRepository,
)
from devman.schemas.config import SnmpCredentialResponse
from devman.schemas.credential import CredentialResponse, DeviceCredentialResponse
from devman.services.base import EntityService
from devman.services.codec import EntityCodec


class CredentialService(EntityService[CredentialResponse]):
    entity_name = "Credential"
    repository_class = CredentialRepository
    codec = EntityCodec(Credential, CredentialResponse, secret_fields=("enc_secret",))

    def create(self, payload):
        if self.repository.get_by_label(payload.label):
            raise ConflictError("Credential with this label already exists")
        return super().create(payload)


class DeviceCredentialService(EntityService[DeviceCredentialResponse]):
    entity_name = "Device credential"
    repository_class = DeviceCredentialRepository
    codec = EntityCodec(DeviceCredential, DeviceCredentialResponse, secret_fields=("enc_secret",))


class SnmpCredentialService(EntityService[SnmpCredentialResponse]):
    entity_name = "SNMP credential"
    repository_class = SnmpCredentialRepository
    codec = EntityCodec(
        SnmpCredential,
        SnmpCredentialResponse,
        secret_fields=("auth_pass", "priv_pass"),
    )
