"""Configuration variable service."""

from __future__ import annotations

from devman.db import Var
from devman.domain.exceptions import ConflictError
from devman.repositories import VarRepository
from devman.schemas.config import VarResponse
from devman.services.base import EntityService
from devman.services.codec import EntityCodec


class VarService(EntityService[VarResponse]):
    entity_name = "Var"
    repository_class = VarRepository
    codec = EntityCodec(Var, VarResponse)

    def create(self, payload):
        if self.repository.get(payload.descr) is not None:
            raise ConflictError("Var with this descr already exists")
        return super().create(payload)
