"""Tests for the credential services."""

import pytest

from devman.db.models import Credential, SnmpCredential
from devman.domain.exceptions import ConflictError, DecryptionError, NotFoundError
from devman.domain.filters import build_list_query
from devman.domain.listing import CREDENTIAL_FILTERS
from devman.schemas.config import SnmpCredentialCreate, SnmpCredentialUpdate
from devman.schemas.credential import CredentialCreate, CredentialUpdate
from devman.services import CredentialService, SnmpCredentialService


class TestCredentialService:
    """Tests for credential CRUD operations."""

    def test_create_encrypts_secret(self, db_session, cipher):
        service = CredentialService(db_session, cipher)

        created = service.create(CredentialCreate(label="core", username="admin", enc_secret="p@ssw0rd"))

        row = db_session.get(Credential, created.cred_id)
        assert created.enc_secret == "p@ssw0rd"
        assert row.enc_secret not in ("", "p@ssw0rd")
        assert cipher.decrypt(row.enc_secret) == "p@ssw0rd"

    def test_empty_secret_with_broken_cipher(self, db_session, broken_cipher):
        service = CredentialService(db_session, broken_cipher)

        created = service.create(CredentialCreate(label="no-secret"))

        assert created.enc_secret == ""
        assert service.get(created.cred_id).enc_secret == ""

    def test_update_reencrypts_secret(self, db_session, cipher, test_credential):
        service = CredentialService(db_session, cipher)
        old_token = test_credential.enc_secret

        updated = service.update(test_credential.cred_id, CredentialUpdate(enc_secret="n3w"))

        assert updated.enc_secret == "n3w"
        assert updated.username == "admin"
        assert test_credential.enc_secret != old_token

    def test_duplicate_label(self, db_session, cipher, test_credential):
        service = CredentialService(db_session, cipher)
        with pytest.raises(ConflictError):
            service.create(CredentialCreate(label=test_credential.label))

    def test_get_not_found(self, db_session, cipher):
        with pytest.raises(NotFoundError) as excinfo:
            CredentialService(db_session, cipher).get(99999)
        assert excinfo.value.message == "Credential not found"

    def test_corrupt_secret(self, db_session, cipher, test_credential):
        test_credential.enc_secret = "corrupted"
        db_session.commit()

        with pytest.raises(DecryptionError):
            CredentialService(db_session, cipher).get(test_credential.cred_id)

    def test_list_with_filter(self, db_session, cipher, test_credential):
        service = CredentialService(db_session, cipher)
        service.create(CredentialCreate(label="edge-login", enc_secret="x"))

        listed = service.list(build_list_query({"label_f": "core%"}, CREDENTIAL_FILTERS))

        assert [item.label for item in listed] == ["core-login"]
        assert listed[0].enc_secret == "s3cret"
        assert service.count() == 2

    def test_delete(self, db_session, cipher, test_credential):
        service = CredentialService(db_session, cipher)
        service.delete(test_credential.cred_id)
        assert service.count() == 0


class TestSnmpCredentialService:
    """Both SNMP passphrases are secrets."""

    def test_passphrases_encrypted(self, db_session, cipher):
        service = SnmpCredentialService(db_session, cipher)

        created = service.create(
            SnmpCredentialCreate(
                label="v3-ro",
                variant=3,
                auth_name="monitor",
                auth_proto="SHA",
                auth_pass="authpass",
                sec_level="authPriv",
                priv_proto="AES",
                priv_pass="privpass",
            )
        )

        row = db_session.get(SnmpCredential, created.snmp_cred_id)
        assert cipher.decrypt(row.auth_pass) == "authpass"
        assert cipher.decrypt(row.priv_pass) == "privpass"
        assert created.auth_pass == "authpass"
        assert created.priv_pass == "privpass"
        assert created.sec_level == "authPriv"

    def test_missing_passphrases_stay_null(self, db_session, broken_cipher):
        service = SnmpCredentialService(db_session, broken_cipher)

        created = service.create(SnmpCredentialCreate(label="v2c", auth_name="public"))

        assert created.auth_pass is None
        assert created.priv_pass is None

    def test_partial_update_keeps_other_secret(self, db_session, cipher):
        service = SnmpCredentialService(db_session, cipher)
        created = service.create(
            SnmpCredentialCreate(label="v3", variant=3, auth_name="mon", auth_pass="a1", priv_pass="p1")
        )

        updated = service.update(created.snmp_cred_id, SnmpCredentialUpdate(priv_pass="p2"))

        assert updated.auth_pass == "a1"
        assert updated.priv_pass == "p2"
