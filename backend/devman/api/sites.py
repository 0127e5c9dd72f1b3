"""Site API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from devman.dependencies import get_device_service, get_site_service, list_query
from devman.domain.filters import ListQuery
from devman.domain.listing import DEVICE_FILTERS, SITE_FILTERS
from devman.schemas.common import CountResponse
from devman.schemas.device import DeviceResponse
from devman.schemas.site import SiteCreate, SiteResponse, SiteUpdate
from devman.services import DeviceService, SiteService

router = APIRouter(prefix="/sites", tags=["sites"])


@router.get("", response_model=list[SiteResponse])
def list_sites(
    query: ListQuery = Depends(list_query(SITE_FILTERS)),
    service: SiteService = Depends(get_site_service),
) -> list[SiteResponse]:
    return service.list(query)


@router.get("/count", response_model=CountResponse)
def count_sites(service: SiteService = Depends(get_site_service)) -> CountResponse:
    return CountResponse(count=service.count())


@router.post("", response_model=SiteResponse, status_code=status.HTTP_201_CREATED)
def create_site(
    payload: SiteCreate,
    service: SiteService = Depends(get_site_service),
) -> SiteResponse:
    return service.create(payload)


@router.get("/{site_id}", response_model=SiteResponse)
def get_site(site_id: int, service: SiteService = Depends(get_site_service)) -> SiteResponse:
    return service.get(site_id)


@router.put("/{site_id}", response_model=SiteResponse)
def update_site(
    site_id: int,
    payload: SiteUpdate,
    service: SiteService = Depends(get_site_service),
) -> SiteResponse:
    return service.update(site_id, payload)


@router.delete("/{site_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_site(site_id: int, service: SiteService = Depends(get_site_service)) -> None:
    service.delete(site_id)


@router.get("/{site_id}/devices", response_model=list[DeviceResponse])
def list_site_devices(
    site_id: int,
    query: ListQuery = Depends(list_query(DEVICE_FILTERS)),
    sites: SiteService = Depends(get_site_service),
    devices: DeviceService = Depends(get_device_service),
) -> list[DeviceResponse]:
    """Devices installed at one site; the usual device filters apply."""
    sites.get_row(site_id)
    return devices.list(query, site_id=site_id)
