"""Generic CRUD service shared by every resource."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from devman.core.crypto import SecretCipher
from devman.core.logging import get_logger
from devman.domain.exceptions import ConflictError, NotFoundError
from devman.domain.filters import ListQuery
from devman.repositories.base import FilteredRepository
from devman.services.codec import EntityCodec

logger = get_logger(__name__)

TResponse = TypeVar("TResponse", bound=BaseModel)


class EntityService(Generic[TResponse]):
    """CRUD for one entity kind.

    Subclasses name the entity, its repository and its codec. All reads go
    through the codec, so secret fields are decrypted and network fields are
    rendered as text before they leave the service.
    """

    entity_name: ClassVar[str]
    repository_class: ClassVar[type[FilteredRepository]]
    codec: ClassVar[EntityCodec]

    def __init__(self, session: Session, cipher: SecretCipher) -> None:
        self.session = session
        self.cipher = cipher
        self.repository = self.repository_class(session)

    # -------------------------------------------------------------------------
    # Queries

    def list(self, query: ListQuery, **scope: Any) -> list[TResponse]:
        rows = self.repository.list(query, **scope)
        return [self.codec.to_response(row, self.cipher) for row in rows]

    def count(self) -> int:
        return self.repository.count()

    def get(self, ident: Any) -> TResponse:
        return self.codec.to_response(self.get_row(ident), self.cipher)

    def get_row(self, ident: Any):
        row = self.repository.get(ident)
        if row is None:
            raise NotFoundError(f"{self.entity_name} not found")
        return row

    # -------------------------------------------------------------------------
    # Mutations

    def create(self, payload: BaseModel) -> TResponse:
        row = self.repository.add(self.codec.new_row(payload, self.cipher))
        self._commit()
        self.repository.refresh(row)
        logger.info("%s created", self.entity_name, extra={"entity": self.entity_name})
        return self.codec.to_response(row, self.cipher)

    def update(self, ident: Any, payload: BaseModel) -> TResponse:
        row = self.codec.apply(self.get_row(ident), payload, self.cipher)
        self._commit()
        self.repository.refresh(row)
        return self.codec.to_response(row, self.cipher)

    def delete(self, ident: Any) -> None:
        self.repository.remove(self.get_row(ident))
        self._commit()
        logger.info("%s deleted", self.entity_name, extra={"entity": self.entity_name})

    def _commit(self) -> None:
        try:
            self.repository.commit()
        except IntegrityError as exc:
            self.repository.rollback()
            logger.warning("%s rejected by datastore: %s", self.entity_name, exc.orig)
            raise ConflictError(f"{self.entity_name} conflicts with existing data") from exc
