"""Tests for site, device and interface services."""

import pytest

from devman.domain.exceptions import ConflictError, NotFoundError
from devman.domain.filters import build_list_query
from devman.domain.listing import DEVICE_FILTERS
from devman.schemas.config import VarCreate, VarUpdate
from devman.schemas.device import DeviceCreate, DeviceUpdate
from devman.schemas.interface import InterfaceCreate
from devman.services import DeviceService, InterfaceService, VarService


class TestDeviceService:
    """Tests for device lifecycle operations."""

    def test_create_normalizes_addresses(self, db_session, broken_cipher):
        service = DeviceService(db_session, broken_cipher)

        created = service.create(
            DeviceCreate(sys_id="R1", host_name="r1", ip4_addr="10.0.0.5/24", ip6_addr="2001:db8::1")
        )

        assert created.ip4_addr == "10.0.0.0/24"
        assert created.ip6_addr == "2001:db8::1/128"
        assert created.source == "api"

    def test_malformed_address_stored_as_null(self, db_session, broken_cipher):
        created = DeviceService(db_session, broken_cipher).create(
            DeviceCreate(sys_id="R1", host_name="r1", ip4_addr="10.0.0", ip6_addr="2001:db8::1")
        )

        assert created.ip4_addr is None
        assert created.ip6_addr == "2001:db8::1/128"

    def test_duplicate_host_name(self, db_session, broken_cipher, test_device):
        with pytest.raises(ConflictError):
            DeviceService(db_session, broken_cipher).create(
                DeviceCreate(sys_id="X", host_name=test_device.host_name)
            )

    def test_unknown_site_is_conflict(self, db_session, broken_cipher):
        with pytest.raises(ConflictError):
            DeviceService(db_session, broken_cipher).create(
                DeviceCreate(sys_id="R9", host_name="r9", site_id=424242)
            )

    def test_update_clears_nullable_field(self, db_session, broken_cipher, test_device):
        service = DeviceService(db_session, broken_cipher)

        updated = service.update(test_device.dev_id, DeviceUpdate(ip4_addr=None, notes=""))

        assert updated.ip4_addr is None
        assert updated.notes == ""
        assert updated.sys_name == "core-1"

    def test_list_scoped_to_site(self, db_session, broken_cipher, test_device):
        service = DeviceService(db_session, broken_cipher)
        service.create(DeviceCreate(sys_id="R2", host_name="r2"))

        listed = service.list(build_list_query({}, DEVICE_FILTERS), site_id=test_device.site_id)

        assert [device.host_name for device in listed] == [test_device.host_name]

    def test_delete_unknown(self, db_session, broken_cipher):
        with pytest.raises(NotFoundError):
            DeviceService(db_session, broken_cipher).delete(99999)


class TestInterfaceService:
    def test_mac_normalized(self, db_session, broken_cipher, test_device):
        created = InterfaceService(db_session, broken_cipher).create(
            InterfaceCreate(dev_id=test_device.dev_id, descr="Gi0/1", mac="AABB.CCDD.EEFF")
        )
        assert created.mac == "aa:bb:cc:dd:ee:ff"


class TestVarService:
    """Variables are keyed by descr."""

    def test_crud(self, db_session, broken_cipher):
        service = VarService(db_session, broken_cipher)

        service.create(VarCreate(descr="ntp_server", content="10.0.0.123"))
        updated = service.update("ntp_server", VarUpdate(notes="primary"))

        assert updated.content == "10.0.0.123"
        assert updated.notes == "primary"
        assert service.get("ntp_server").descr == "ntp_server"

    def test_duplicate(self, db_session, broken_cipher):
        service = VarService(db_session, broken_cipher)
        service.create(VarCreate(descr="dns"))
        with pytest.raises(ConflictError):
            service.create(VarCreate(descr="dns"))

    def test_not_found(self, db_session, broken_cipher):
        with pytest.raises(NotFoundError) as excinfo:
            VarService(db_session, broken_cipher).get("missing")
        assert excinfo.value.message == "Var not found"
