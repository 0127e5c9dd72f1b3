"""Test configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

TEST_SECRET_SALT = "test-secret-salt"
os.environ.setdefault("DEVMAN_SECRET_SALT", TEST_SECRET_SALT)
os.environ.setdefault("DEVMAN_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("DEVMAN_ENVIRONMENT", "test")

from devman.core.crypto import SecretCipher, get_cipher  # noqa: E402
from devman.db import Base, get_db  # noqa: E402
from devman.db.models import Credential, Device, Site  # noqa: E402
from devman.main import app  # noqa: E402 - must set env vars before importing

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class BrokenCipher:
    """Cipher stand-in that fails the test if it is ever called."""

    def encrypt(self, plaintext: str) -> str:
        raise AssertionError("encrypt must not be called")

    def decrypt(self, ciphertext: str) -> str:
        raise AssertionError("decrypt must not be called")


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Create a test client with overridden database dependency."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def cipher() -> SecretCipher:
    """The process-wide cipher, built from the test passphrase."""
    return get_cipher()


@pytest.fixture
def broken_cipher() -> BrokenCipher:
    return BrokenCipher()


@pytest.fixture
def test_site(db_session):
    site = Site(uident="osl-1", descr="Oslo DC", area="north")
    db_session.add(site)
    db_session.commit()
    db_session.refresh(site)
    return site


@pytest.fixture
def test_device(db_session, test_site):
    """Create a test device."""
    device = Device(
        site_id=test_site.site_id,
        sys_id="CORE-1",
        host_name="core-1.example.net",
        ip4_addr="10.0.0.1",
        sys_name="core-1",
    )
    db_session.add(device)
    db_session.commit()
    db_session.refresh(device)
    return device


@pytest.fixture
def test_credential(db_session, cipher):
    """Create a credential whose secret is stored encrypted."""
    credential = Credential(
        label="core-login",
        username="admin",
        enc_secret=cipher.encrypt("s3cret"),
    )
    db_session.add(credential)
    db_session.commit()
    db_session.refresh(credential)
    return credential
