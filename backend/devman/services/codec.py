"""Mapping between wire payloads and stored rows.

One :class:`EntityCodec` per entity kind knows which fields hold secrets,
network addresses or hardware addresses and converts just those; every other
field is copied as is. A malformed address in an optional column is stored as
NULL. Secrets are encrypted on the way in and decrypted on the way out. An
empty secret is stored and returned empty without touching the cipher, so a
credential without a secret survives a broken or rotated key. A null secret for
a NOT NULL column is stored empty; any other null for such a column is
rejected with ``ValidationError``.
"""

from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel

from devman.core.crypto import SecretCipher
from devman.core.logging import get_logger
from devman.domain.exceptions import ParseError, ValidationError
from devman.domain.nullable import network_to_str, to_mac, to_network

logger = get_logger(__name__)

TResponse = TypeVar("TResponse", bound=BaseModel)


class EntityCodec(Generic[TResponse]):
    def __init__(
        self,
        model: type,
        response_schema: type[TResponse],
        secret_fields: tuple[str, ...] = (),
        network_fields: tuple[str, ...] = (),
        mac_fields: tuple[str, ...] = (),
    ) -> None:
        self.model = model
        self.response_schema = response_schema
        self.secret_fields = frozenset(secret_fields)
        self.network_fields = frozenset(network_fields)
        self.mac_fields = frozenset(mac_fields)

    # -------------------------------------------------------------------------
    # Wire -> storage

    def to_storage(
        self,
        payload: Union[BaseModel, Mapping[str, Any]],
        cipher: SecretCipher,
        *,
        partial: bool = False,
    ) -> dict[str, Any]:
        """Convert a payload to column values.

        With ``partial`` only the fields the client actually sent are returned,
        which is what an update applies.
        """
        if isinstance(payload, BaseModel):
            data = payload.model_dump(exclude_unset=partial)
        else:
            data = dict(payload)

        stored: dict[str, Any] = {}
        for name, value in data.items():
            if value is None and not self._nullable(name):
                if name not in self.secret_fields:
                    raise ValidationError(f"{name} must not be null")
                value = ""
            if name in self.secret_fields:
                stored[name] = self._seal(value, cipher)
            elif name in self.network_fields:
                stored[name] = self._network(name, value)
            elif name in self.mac_fields:
                stored[name] = self._mac(name, value)
            else:
                stored[name] = value
        return stored

    def new_row(self, payload: Union[BaseModel, Mapping[str, Any]], cipher: SecretCipher):
        return self.model(**self.to_storage(payload, cipher))

    def apply(self, row, payload: Union[BaseModel, Mapping[str, Any]], cipher: SecretCipher):
        """Update ``row`` in place with the fields present in ``payload``."""
        for name, value in self.to_storage(payload, cipher, partial=True).items():
            setattr(row, name, value)
        return row

    @staticmethod
    def _seal(value: Optional[str], cipher: SecretCipher) -> Optional[str]:
        if not value:
            return value
        return cipher.encrypt(value)

    def _network(self, name: str, value: Optional[str]):
        if value is None or value == "":
            return None
        parsed = to_network(value)
        if parsed is None:
            return self._unparsed(name, "IP address")
        return parsed

    def _mac(self, name: str, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        parsed = to_mac(value)
        if parsed is None:
            return self._unparsed(name, "MAC address")
        return parsed

    def _nullable(self, name: str) -> bool:
        column = self.model.__table__.columns.get(name)
        return column is None or column.nullable

    def _unparsed(self, name: str, kind: str) -> None:
        """Drop a malformed optional value; reject one the column requires."""
        if not self._nullable(name):
            raise ParseError(f"Invalid {kind} for {name}")
        logger.warning("Ignoring malformed %s for %s.%s", kind, self.model.__name__, name)
        return None

    # -------------------------------------------------------------------------
    # Storage -> wire

    def to_response(self, row, cipher: SecretCipher) -> TResponse:
        """Read every response field from ``row``, decrypting secrets.

        Raises:
            DecryptionError: a stored secret cannot be decrypted.
        """
        data: dict[str, Any] = {}
        for name in self.response_schema.model_fields:
            value = getattr(row, name)
            if name in self.secret_fields:
                value = value if not value else cipher.decrypt(value)
            elif name in self.network_fields:
                value = network_to_str(value)
            data[name] = value
        return self.response_schema.model_validate(data)
