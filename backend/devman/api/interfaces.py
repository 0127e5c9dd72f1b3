"""Interface API endpoints: live, IP and archived interfaces."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from devman.dependencies import (
    get_archived_interface_service,
    get_interface_service,
    get_ip_interface_service,
    list_query,
)
from devman.domain.filters import ListQuery
from devman.domain.listing import (
    ARCHIVED_INTERFACE_FILTERS,
    INTERFACE_FILTERS,
    IP_INTERFACE_FILTERS,
)
from devman.schemas.common import CountResponse
from devman.schemas.interface import (
    ArchivedInterfaceCreate,
    ArchivedInterfaceResponse,
    ArchivedInterfaceUpdate,
    InterfaceCreate,
    InterfaceResponse,
    InterfaceUpdate,
    IpInterfaceCreate,
    IpInterfaceResponse,
    IpInterfaceUpdate,
)
from devman.services import ArchivedInterfaceService, InterfaceService, IpInterfaceService

router = APIRouter(prefix="/interfaces", tags=["interfaces"])
ip_router = APIRouter(prefix="/ip_interfaces", tags=["interfaces"])
archive_router = APIRouter(prefix="/archived/interfaces", tags=["archive"])


# -----------------------------------------------------------------------------
# Interfaces


@router.get("", response_model=list[InterfaceResponse])
def list_interfaces(
    query: ListQuery = Depends(list_query(INTERFACE_FILTERS)),
    service: InterfaceService = Depends(get_interface_service),
) -> list[InterfaceResponse]:
    """List interfaces.

    Numeric ``*_f`` filters are text patterns (``ifindex_f=10%``);
    ``speed_ge``/``speed_le`` bound the speed numerically.
    """
    return service.list(query)


@router.get("/count", response_model=CountResponse)
def count_interfaces(service: InterfaceService = Depends(get_interface_service)) -> CountResponse:
    return CountResponse(count=service.count())


@router.post("", response_model=InterfaceResponse, status_code=status.HTTP_201_CREATED)
def create_interface(
    payload: InterfaceCreate,
    service: InterfaceService = Depends(get_interface_service),
) -> InterfaceResponse:
    return service.create(payload)


@router.get("/{if_id}", response_model=InterfaceResponse)
def get_interface(
    if_id: int, service: InterfaceService = Depends(get_interface_service)
) -> InterfaceResponse:
    return service.get(if_id)


@router.put("/{if_id}", response_model=InterfaceResponse)
def update_interface(
    if_id: int,
    payload: InterfaceUpdate,
    service: InterfaceService = Depends(get_interface_service),
) -> InterfaceResponse:
    return service.update(if_id, payload)


@router.delete("/{if_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_interface(if_id: int, service: InterfaceService = Depends(get_interface_service)) -> None:
    service.delete(if_id)


# -----------------------------------------------------------------------------
# IP interfaces


@ip_router.get("", response_model=list[IpInterfaceResponse])
def list_ip_interfaces(
    query: ListQuery = Depends(list_query(IP_INTERFACE_FILTERS)),
    service: IpInterfaceService = Depends(get_ip_interface_service),
) -> list[IpInterfaceResponse]:
    return service.list(query)


@ip_router.get("/count", response_model=CountResponse)
def count_ip_interfaces(
    service: IpInterfaceService = Depends(get_ip_interface_service),
) -> CountResponse:
    return CountResponse(count=service.count())


@ip_router.post("", response_model=IpInterfaceResponse, status_code=status.HTTP_201_CREATED)
def create_ip_interface(
    payload: IpInterfaceCreate,
    service: IpInterfaceService = Depends(get_ip_interface_service),
) -> IpInterfaceResponse:
    return service.create(payload)


@ip_router.get("/{ip_id}", response_model=IpInterfaceResponse)
def get_ip_interface(
    ip_id: int, service: IpInterfaceService = Depends(get_ip_interface_service)
) -> IpInterfaceResponse:
    return service.get(ip_id)


@ip_router.put("/{ip_id}", response_model=IpInterfaceResponse)
def update_ip_interface(
    ip_id: int,
    payload: IpInterfaceUpdate,
    service: IpInterfaceService = Depends(get_ip_interface_service),
) -> IpInterfaceResponse:
    return service.update(ip_id, payload)


@ip_router.delete("/{ip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ip_interface(
    ip_id: int, service: IpInterfaceService = Depends(get_ip_interface_service)
) -> None:
    service.delete(ip_id)


# -----------------------------------------------------------------------------
# Archived interfaces


@archive_router.get("", response_model=list[ArchivedInterfaceResponse])
def list_archived_interfaces(
    query: ListQuery = Depends(list_query(ARCHIVED_INTERFACE_FILTERS)),
    service: ArchivedInterfaceService = Depends(get_archived_interface_service),
) -> list[ArchivedInterfaceResponse]:
    """List archived interfaces, 1000 per page unless ``limit`` says otherwise."""
    return service.list(query)


@archive_router.get("/count", response_model=CountResponse)
def count_archived_interfaces(
    service: ArchivedInterfaceService = Depends(get_archived_interface_service),
) -> CountResponse:
    return CountResponse(count=service.count())


@archive_router.post(
    "", response_model=ArchivedInterfaceResponse, status_code=status.HTTP_201_CREATED
)
def create_archived_interface(
    payload: ArchivedInterfaceCreate,
    service: ArchivedInterfaceService = Depends(get_archived_interface_service),
) -> ArchivedInterfaceResponse:
    return service.create(payload)


@archive_router.get("/{ifa_id}", response_model=ArchivedInterfaceResponse)
def get_archived_interface(
    ifa_id: int,
    service: ArchivedInterfaceService = Depends(get_archived_interface_service),
) -> ArchivedInterfaceResponse:
    return service.get(ifa_id)


@archive_router.put("/{ifa_id}", response_model=ArchivedInterfaceResponse)
def update_archived_interface(
    ifa_id: int,
    payload: ArchivedInterfaceUpdate,
    service: ArchivedInterfaceService = Depends(get_archived_interface_service),
) -> ArchivedInterfaceResponse:
    return service.update(ifa_id, payload)


@archive_router.delete("/{ifa_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_archived_interface(
    ifa_id: int,
    service: ArchivedInterfaceService = Depends(get_archived_interface_service),
) -> None:
    service.delete(ifa_id)
