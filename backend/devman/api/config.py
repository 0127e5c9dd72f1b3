"""Configuration API endpoints: variables and SNMP profiles."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from devman.dependencies import get_snmp_credential_service, get_var_service, list_query
from devman.domain.filters import ListQuery
from devman.domain.listing import SNMP_CREDENTIAL_FILTERS, VAR_FILTERS
from devman.schemas.common import CountResponse
from devman.schemas.config import (
    SnmpCredentialCreate,
    SnmpCredentialResponse,
    SnmpCredentialUpdate,
    VarCreate,
    VarResponse,
    VarUpdate,
)
from devman.services import SnmpCredentialService, VarService

router = APIRouter(prefix="/config", tags=["config"])


# -----------------------------------------------------------------------------
# Variables (keyed by descr)


@router.get("/vars", response_model=list[VarResponse])
def list_vars(
    query: ListQuery = Depends(list_query(VAR_FILTERS)),
    service: VarService = Depends(get_var_service),
) -> list[VarResponse]:
    return service.list(query)


@router.get("/vars/count", response_model=CountResponse)
def count_vars(service: VarService = Depends(get_var_service)) -> CountResponse:
    return CountResponse(count=service.count())


@router.post("/vars", response_model=VarResponse, status_code=status.HTTP_201_CREATED)
def create_var(payload: VarCreate, service: VarService = Depends(get_var_service)) -> VarResponse:
    return service.create(payload)


@router.get("/vars/{descr}", response_model=VarResponse)
def get_var(descr: str, service: VarService = Depends(get_var_service)) -> VarResponse:
    return service.get(descr)


@router.put("/vars/{descr}", response_model=VarResponse)
def update_var(
    descr: str,
    payload: VarUpdate,
    service: VarService = Depends(get_var_service),
) -> VarResponse:
    return service.update(descr, payload)


@router.delete("/vars/{descr}", status_code=status.HTTP_204_NO_CONTENT)
def delete_var(descr: str, service: VarService = Depends(get_var_service)) -> None:
    service.delete(descr)


# -----------------------------------------------------------------------------
# SNMP credentials


@router.get("/snmp_credentials", response_model=list[SnmpCredentialResponse])
def list_snmp_credentials(
    query: ListQuery = Depends(list_query(SNMP_CREDENTIAL_FILTERS)),
    service: SnmpCredentialService = Depends(get_snmp_credential_service),
) -> list[SnmpCredentialResponse]:
    return service.list(query)


@router.get("/snmp_credentials/count", response_model=CountResponse)
def count_snmp_credentials(
    service: SnmpCredentialService = Depends(get_snmp_credential_service),
) -> CountResponse:
    return CountResponse(count=service.count())


@router.post(
    "/snmp_credentials",
    response_model=SnmpCredentialResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_snmp_credential(
    payload: SnmpCredentialCreate,
    service: SnmpCredentialService = Depends(get_snmp_credential_service),
) -> SnmpCredentialResponse:
    """Create an SNMP profile; ``auth_pass`` and ``priv_pass`` are stored encrypted."""
    return service.create(payload)


@router.get("/snmp_credentials/{snmp_cred_id}", response_model=SnmpCredentialResponse)
def get_snmp_credential(
    snmp_cred_id: int,
    service: SnmpCredentialService = Depends(get_snmp_credential_service),
) -> SnmpCredentialResponse:
    return service.get(snmp_cred_id)


@router.put("/snmp_credentials/{snmp_cred_id}", response_model=SnmpCredentialResponse)
def update_snmp_credential(
    snmp_cred_id: int,
    payload: SnmpCredentialUpdate,
    service: SnmpCredentialService = Depends(get_snmp_credential_service),
) -> SnmpCredentialResponse:
    return service.update(snmp_cred_id, payload)


@router.delete("/snmp_credentials/{snmp_cred_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_snmp_credential(
    snmp_cred_id: int,
    service: SnmpCredentialService = Depends(get_snmp_credential_service),
) -> None:
    service.delete(snmp_cred_id)
