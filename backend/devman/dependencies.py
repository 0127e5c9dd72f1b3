"""Shared FastAPI dependency factories."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from devman.core.config import settings
from devman.core.crypto import SecretCipher, get_cipher
from devman.db import get_db
from devman.domain.filters import FilterSpec, ListQuery, build_list_query
from devman.services import (
    ArchivedInterfaceService,
    CredentialService,
    DeviceCredentialService,
    DeviceService,
    InterfaceService,
    IpInterfaceService,
    SiteService,
    SnmpCredentialService,
    VarService,
)


def get_session(db: Session = Depends(get_db)) -> Session:
    """Expose the SQLAlchemy session (alias for clarity)."""
    return db


def get_secret_cipher() -> SecretCipher:
    return get_cipher()


def list_query(spec: FilterSpec):
    """Dependency factory parsing the request's query string against ``spec``.

    Malformed values fall back to their defaults; they never fail the request.
    """

    def dependency(request: Request) -> ListQuery:
        return build_list_query(request.query_params, spec, settings.max_limit)

    return dependency


def _service_factory(service_class):
    def dependency(
        session: Session = Depends(get_session),
        cipher: SecretCipher = Depends(get_secret_cipher),
    ):
        return service_class(session, cipher)

    dependency.__name__ = f"get_{service_class.__name__}"
    return dependency


get_site_service = _service_factory(SiteService)
get_device_service = _service_factory(DeviceService)
get_interface_service = _service_factory(InterfaceService)
get_ip_interface_service = _service_factory(IpInterfaceService)
get_archived_interface_service = _service_factory(ArchivedInterfaceService)
get_var_service = _service_factory(VarService)
get_credential_service = _service_factory(CredentialService)
get_device_credential_service = _service_factory(DeviceCredentialService)
get_snmp_credential_service = _service_factory(SnmpCredentialService)
