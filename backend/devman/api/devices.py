"""Device API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from devman.dependencies import (
    get_device_credential_service,
    get_device_service,
    get_interface_service,
    list_query,
)
from devman.domain.filters import ListQuery
from devman.domain.listing import DEVICE_CREDENTIAL_FILTERS, DEVICE_FILTERS, INTERFACE_FILTERS
from devman.schemas.common import CountResponse
from devman.schemas.credential import DeviceCredentialResponse
from devman.schemas.device import DeviceCreate, DeviceResponse, DeviceUpdate
from devman.schemas.interface import InterfaceResponse
from devman.services import DeviceCredentialService, DeviceService, InterfaceService

router = APIRouter(prefix="/devices", tags=["devices"])


@router.get("", response_model=list[DeviceResponse])
def list_devices(
    query: ListQuery = Depends(list_query(DEVICE_FILTERS)),
    service: DeviceService = Depends(get_device_service),
) -> list[DeviceResponse]:
    """List devices.

    ``ip4_addr_f``/``ip6_addr_f`` take an address or CIDR block and match
    devices whose address lies inside it.
    """
    return service.list(query)


@router.get("/count", response_model=CountResponse)
def count_devices(service: DeviceService = Depends(get_device_service)) -> CountResponse:
    return CountResponse(count=service.count())


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
def create_device(
    payload: DeviceCreate,
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    return service.create(payload)


@router.get("/{dev_id}", response_model=DeviceResponse)
def get_device(dev_id: int, service: DeviceService = Depends(get_device_service)) -> DeviceResponse:
    return service.get(dev_id)


@router.put("/{dev_id}", response_model=DeviceResponse)
def update_device(
    dev_id: int,
    payload: DeviceUpdate,
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    return service.update(dev_id, payload)


@router.delete("/{dev_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_device(dev_id: int, service: DeviceService = Depends(get_device_service)) -> None:
    """Delete a device together with its interfaces and credentials."""
    service.delete(dev_id)


@router.get("/{dev_id}/interfaces", response_model=list[InterfaceResponse])
def list_device_interfaces(
    dev_id: int,
    query: ListQuery = Depends(list_query(INTERFACE_FILTERS)),
    devices: DeviceService = Depends(get_device_service),
    interfaces: InterfaceService = Depends(get_interface_service),
) -> list[InterfaceResponse]:
    devices.get_row(dev_id)
    return interfaces.list(query, dev_id=dev_id)


@router.get("/{dev_id}/credentials", response_model=list[DeviceCredentialResponse])
def list_device_credentials(
    dev_id: int,
    query: ListQuery = Depends(list_query(DEVICE_CREDENTIAL_FILTERS)),
    devices: DeviceService = Depends(get_device_service),
    credentials: DeviceCredentialService = Depends(get_device_credential_service),
) -> list[DeviceCredentialResponse]:
    devices.get_row(dev_id)
    return credentials.list(query, dev_id=dev_id)
