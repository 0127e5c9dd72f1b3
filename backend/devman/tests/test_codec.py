"""Tests for payload/row conversion."""

from ipaddress import ip_network

import pytest
from pydantic import BaseModel
from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from devman.core.time import utcnow
from devman.db.models import Credential, Device, Interface
from devman.db.types import InetType, MacAddrType
from devman.domain.exceptions import DecryptionError, ParseError, ValidationError
from devman.schemas.credential import CredentialCreate, CredentialResponse, CredentialUpdate
from devman.schemas.device import DeviceResponse
from devman.schemas.interface import InterfaceResponse
from devman.services.codec import EntityCodec

CREDENTIALS = EntityCodec(Credential, CredentialResponse, secret_fields=("enc_secret",))
DEVICES = EntityCodec(Device, DeviceResponse, network_fields=("ip4_addr", "ip6_addr"))
INTERFACES = EntityCodec(Interface, InterfaceResponse, mac_fields=("mac",))


class _Scratch(DeclarativeBase):
    pass


class Uplink(_Scratch):
    __tablename__ = "uplinks"

    uplink_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    peer = mapped_column(InetType, nullable=False)
    mac = mapped_column(MacAddrType, nullable=False)


class UplinkResponse(BaseModel):
    uplink_id: int
    peer: str
    mac: str


def credential_row(enc_secret: str) -> Credential:
    now = utcnow()
    return Credential(
        cred_id=1,
        label="core",
        username="admin",
        enc_secret=enc_secret,
        created_on=now,
        updated_on=now,
    )


class TestSecrets:
    """Secret fields are sealed on write and opened on read."""

    def test_secret_is_encrypted(self, cipher):
        stored = CREDENTIALS.to_storage(
            CredentialCreate(label="core", username="admin", enc_secret="p@ssw0rd"), cipher
        )
        assert stored["enc_secret"] != "p@ssw0rd"
        assert cipher.decrypt(stored["enc_secret"]) == "p@ssw0rd"
        assert stored["label"] == "core"
        assert stored["username"] == "admin"

    def test_empty_secret_never_touches_cipher(self, broken_cipher):
        stored = CREDENTIALS.to_storage(CredentialCreate(label="core", enc_secret=""), broken_cipher)
        assert stored["enc_secret"] == ""

        response = CREDENTIALS.to_response(credential_row(""), broken_cipher)
        assert response.enc_secret == ""

    def test_none_secret_stays_none(self, broken_cipher):
        stored = CREDENTIALS.to_storage({"enc_secret": None}, broken_cipher)
        assert stored == {"enc_secret": None}

    def test_response_decrypts(self, cipher):
        response = CREDENTIALS.to_response(credential_row(cipher.encrypt("p@ssw0rd")), cipher)
        assert response.enc_secret == "p@ssw0rd"
        assert response.cred_id == 1

    def test_corrupt_secret_aborts(self, cipher):
        with pytest.raises(DecryptionError):
            CREDENTIALS.to_response(credential_row("garbage"), cipher)

    def test_partial_update_only_returns_sent_fields(self, broken_cipher):
        stored = CREDENTIALS.to_storage(
            CredentialUpdate(username="ops"), broken_cipher, partial=True
        )
        assert stored == {"username": "ops"}

    def test_explicit_null_is_kept_in_partial_update(self, broken_cipher):
        stored = CREDENTIALS.to_storage(
            CredentialUpdate(username=None), broken_cipher, partial=True
        )
        assert stored == {"username": None}

    def test_null_secret_for_required_column_is_empty(self, broken_cipher):
        stored = CREDENTIALS.to_storage(
            CredentialUpdate(enc_secret=None), broken_cipher, partial=True
        )
        assert stored == {"enc_secret": ""}

    def test_null_for_required_column_rejected(self, broken_cipher):
        with pytest.raises(ValidationError):
            CREDENTIALS.to_storage(CredentialUpdate(label=None), broken_cipher, partial=True)


class TestAddresses:
    """Network and MAC fields go through the address parsers."""

    def test_network_fields(self, broken_cipher):
        stored = DEVICES.to_storage(
            {"host_name": "r1", "ip4_addr": "10.0.0.1", "ip6_addr": ""}, broken_cipher
        )
        assert stored["ip4_addr"] == ip_network("10.0.0.1/32")
        assert stored["ip6_addr"] is None
        assert stored["host_name"] == "r1"

    def test_malformed_optional_network_dropped(self, broken_cipher):
        stored = DEVICES.to_storage({"ip4_addr": "10.0.0.999"}, broken_cipher)
        assert stored["ip4_addr"] is None

    def test_mac_field(self, broken_cipher):
        stored = INTERFACES.to_storage({"mac": "AABB.CCDD.EEFF"}, broken_cipher)
        assert stored["mac"] == "aa:bb:cc:dd:ee:ff"
        assert INTERFACES.to_storage({"mac": "aa:bb"}, broken_cipher)["mac"] is None

    def test_malformed_required_address_rejected(self, broken_cipher):
        codec = EntityCodec(Uplink, UplinkResponse, network_fields=("peer",), mac_fields=("mac",))
        with pytest.raises(ParseError):
            codec.to_storage({"peer": "10.0.0.999"}, broken_cipher)
        with pytest.raises(ParseError):
            codec.to_storage({"mac": "aa:bb"}, broken_cipher)

    def test_network_rendered_as_text(self, broken_cipher):
        now = utcnow()
        row = Device(
            dev_id=3,
            sys_id="R1",
            host_name="r1",
            ip4_addr=ip_network("10.0.0.1/32"),
            ip6_addr=None,
            source="api",
            installed=True,
            monitor=True,
            graph=True,
            backup=True,
            unresponsive=False,
            created_on=now,
            updated_on=now,
        )
        response = DEVICES.to_response(row, broken_cipher)
        assert response.ip4_addr == "10.0.0.1/32"
        assert response.ip6_addr is None
