"""Credential API endpoints.

Secrets are accepted and returned in plaintext and stored encrypted.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from devman.dependencies import (
    get_credential_service,
    get_device_credential_service,
    list_query,
)
from devman.domain.filters import ListQuery
from devman.domain.listing import CREDENTIAL_FILTERS, DEVICE_CREDENTIAL_FILTERS
from devman.schemas.common import CountResponse
from devman.schemas.credential import (
    CredentialCreate,
    CredentialResponse,
    CredentialUpdate,
    DeviceCredentialCreate,
    DeviceCredentialResponse,
    DeviceCredentialUpdate,
)
from devman.services import CredentialService, DeviceCredentialService

router = APIRouter(prefix="/data/credentials", tags=["credentials"])
device_router = APIRouter(prefix="/devices/credentials", tags=["credentials"])


# -----------------------------------------------------------------------------
# Generic credentials


@router.get("", response_model=list[CredentialResponse])
def list_credentials(
    query: ListQuery = Depends(list_query(CREDENTIAL_FILTERS)),
    service: CredentialService = Depends(get_credential_service),
) -> list[CredentialResponse]:
    return service.list(query)


@router.get("/count", response_model=CountResponse)
def count_credentials(service: CredentialService = Depends(get_credential_service)) -> CountResponse:
    return CountResponse(count=service.count())


@router.post("", response_model=CredentialResponse, status_code=status.HTTP_201_CREATED)
def create_credential(
    payload: CredentialCreate,
    service: CredentialService = Depends(get_credential_service),
) -> CredentialResponse:
    """Create a credential; a non-empty ``enc_secret`` is encrypted before storage."""
    return service.create(payload)


@router.get("/{cred_id}", response_model=CredentialResponse)
def get_credential(
    cred_id: int, service: CredentialService = Depends(get_credential_service)
) -> CredentialResponse:
    return service.get(cred_id)


@router.put("/{cred_id}", response_model=CredentialResponse)
def update_credential(
    cred_id: int,
    payload: CredentialUpdate,
    service: CredentialService = Depends(get_credential_service),
) -> CredentialResponse:
    return service.update(cred_id, payload)


@router.delete("/{cred_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_credential(
    cred_id: int, service: CredentialService = Depends(get_credential_service)
) -> None:
    service.delete(cred_id)


# -----------------------------------------------------------------------------
# Device login credentials


@device_router.get("", response_model=list[DeviceCredentialResponse])
def list_device_credentials(
    query: ListQuery = Depends(list_query(DEVICE_CREDENTIAL_FILTERS)),
    service: DeviceCredentialService = Depends(get_device_credential_service),
) -> list[DeviceCredentialResponse]:
    return service.list(query)


@device_router.get("/count", response_model=CountResponse)
def count_device_credentials(
    service: DeviceCredentialService = Depends(get_device_credential_service),
) -> CountResponse:
    return CountResponse(count=service.count())


@device_router.post(
    "", response_model=DeviceCredentialResponse, status_code=status.HTTP_201_CREATED
)
def create_device_credential(
    payload: DeviceCredentialCreate,
    service: DeviceCredentialService = Depends(get_device_credential_service),
) -> DeviceCredentialResponse:
    return service.create(payload)


@device_router.get("/{cred_id}", response_model=DeviceCredentialResponse)
def get_device_credential(
    cred_id: int,
    service: DeviceCredentialService = Depends(get_device_credential_service),
) -> DeviceCredentialResponse:
    return service.get(cred_id)


@device_router.put("/{cred_id}", response_model=DeviceCredentialResponse)
def update_device_credential(
    cred_id: int,
    payload: DeviceCredentialUpdate,
    service: DeviceCredentialService = Depends(get_device_credential_service),
) -> DeviceCredentialResponse:
    return service.update(cred_id, payload)


@device_router.delete("/{cred_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_device_credential(
    cred_id: int,
    service: DeviceCredentialService = Depends(get_device_credential_service),
) -> None:
    service.delete(cred_id)
