"""Device schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from devman.schemas.common import TimestampsMixin


class DeviceBase(BaseModel):
    """Base device schema.

    ``ip4_addr`` and ``ip6_addr`` accept a bare address (stored as a host
    route) or CIDR notation. A value that does not parse is stored as unset.
    """

    site_id: Optional[int] = None
    snmp_main_id: Optional[int] = None
    snmp_ro_id: Optional[int] = None
    sys_id: str = Field(..., min_length=1, max_length=100)
    host_name: str = Field(..., min_length=1, max_length=255)
    ip4_addr: Optional[str] = None
    ip6_addr: Optional[str] = None
    sys_name: Optional[str] = Field(None, max_length=255)
    sys_location: Optional[str] = Field(None, max_length=255)
    sys_contact: Optional[str] = Field(None, max_length=255)
    sw_version: Optional[str] = Field(None, max_length=255)
    ext_model: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    source: str = Field("api", max_length=50)
    installed: bool = True
    monitor: bool = True
    graph: bool = True
    backup: bool = True
    unresponsive: bool = False


class DeviceCreate(DeviceBase):
    """Device creation schema."""

    pass


class DeviceUpdate(BaseModel):
    """Device update schema."""

    site_id: Optional[int] = None
    snmp_main_id: Optional[int] = None
    snmp_ro_id: Optional[int] = None
    sys_id: Optional[str] = Field(None, min_length=1, max_length=100)
    host_name: Optional[str] = Field(None, min_length=1, max_length=255)
    ip4_addr: Optional[str] = None
    ip6_addr: Optional[str] = None
    sys_name: Optional[str] = Field(None, max_length=255)
    sys_location: Optional[str] = Field(None, max_length=255)
    sys_contact: Optional[str] = Field(None, max_length=255)
    sw_version: Optional[str] = Field(None, max_length=255)
    ext_model: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    source: Optional[str] = Field(None, max_length=50)
    installed: Optional[bool] = None
    monitor: Optional[bool] = None
    graph: Optional[bool] = None
    backup: Optional[bool] = None
    unresponsive: Optional[bool] = None


class DeviceResponse(TimestampsMixin, DeviceBase):
    """Device response schema."""

    dev_id: int

    model_config = {"from_attributes": True}
