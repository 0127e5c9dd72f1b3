"""Interface schemas (live, IP and archived)."""

from typing import Optional

from pydantic import BaseModel, Field

from devman.schemas.common import TimestampsMixin


class InterfaceBase(BaseModel):
    dev_id: int
    ifindex: Optional[int] = None
    descr: str = Field(..., max_length=255)
    alias: Optional[str] = Field(None, max_length=255)
    oper: Optional[int] = None
    adm: Optional[int] = None
    speed: Optional[int] = None
    minspeed: Optional[int] = None
    type_enum: Optional[int] = None
    mac: Optional[str] = None
    monstatus: bool = False
    monerrors: bool = False
    monload: bool = False


class InterfaceCreate(InterfaceBase):
    pass


class InterfaceUpdate(BaseModel):
    dev_id: Optional[int] = None
    ifindex: Optional[int] = None
    descr: Optional[str] = Field(None, max_length=255)
    alias: Optional[str] = Field(None, max_length=255)
    oper: Optional[int] = None
    adm: Optional[int] = None
    speed: Optional[int] = None
    minspeed: Optional[int] = None
    type_enum: Optional[int] = None
    mac: Optional[str] = None
    monstatus: Optional[bool] = None
    monerrors: Optional[bool] = None
    monload: Optional[bool] = None


class InterfaceResponse(TimestampsMixin, InterfaceBase):
    if_id: int

    model_config = {"from_attributes": True}


class IpInterfaceBase(BaseModel):
    dev_id: int
    ifindex: Optional[int] = None
    ip_addr: Optional[str] = None
    descr: Optional[str] = Field(None, max_length=255)
    alias: Optional[str] = Field(None, max_length=255)


class IpInterfaceCreate(IpInterfaceBase):
    pass


class IpInterfaceUpdate(BaseModel):
    dev_id: Optional[int] = None
    ifindex: Optional[int] = None
    ip_addr: Optional[str] = None
    descr: Optional[str] = Field(None, max_length=255)
    alias: Optional[str] = Field(None, max_length=255)


class IpInterfaceResponse(TimestampsMixin, IpInterfaceBase):
    ip_id: int

    model_config = {"from_attributes": True}


class ArchivedInterfaceBase(BaseModel):
    """Interface snapshot; host fields describe the device it belonged to."""

    hostname: str = Field(..., min_length=1, max_length=255)
    host_ip4: Optional[str] = None
    host_ip6: Optional[str] = None
    ifindex: Optional[int] = None
    descr: str = Field(..., max_length=255)
    alias: Optional[str] = Field(None, max_length=255)
    mac: Optional[str] = None


class ArchivedInterfaceCreate(ArchivedInterfaceBase):
    pass


class ArchivedInterfaceUpdate(BaseModel):
    hostname: Optional[str] = Field(None, min_length=1, max_length=255)
    host_ip4: Optional[str] = None
    host_ip6: Optional[str] = None
    ifindex: Optional[int] = None
    descr: Optional[str] = Field(None, max_length=255)
    alias: Optional[str] = Field(None, max_length=255)
    mac: Optional[str] = None


class ArchivedInterfaceResponse(TimestampsMixin, ArchivedInterfaceBase):
    ifa_id: int

    model_config = {"from_attributes": True}
