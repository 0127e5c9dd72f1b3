"""Site schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from devman.schemas.common import TimestampsMixin


class SiteBase(BaseModel):
    """Base site schema."""

    uident: Optional[str] = Field(None, max_length=100)
    descr: str = Field("", max_length=255)
    area: Optional[str] = Field(None, max_length=255)
    addr: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    ext_id: Optional[int] = None
    ext_name: Optional[str] = Field(None, max_length=255)


class SiteCreate(SiteBase):
    """Site creation schema."""

    pass


class SiteUpdate(BaseModel):
    """Site update schema; only the fields sent are changed."""

    uident: Optional[str] = Field(None, max_length=100)
    descr: Optional[str] = Field(None, max_length=255)
    area: Optional[str] = Field(None, max_length=255)
    addr: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    ext_id: Optional[int] = None
    ext_name: Optional[str] = Field(None, max_length=255)


class SiteResponse(TimestampsMixin, SiteBase):
    """Site response schema."""

    site_id: int

    model_config = {"from_attributes": True}
