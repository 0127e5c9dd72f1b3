"""Credential schemas.

Secrets travel in plaintext over the API and are stored encrypted; an empty
secret is a valid value meaning "no secret".
"""

from typing import Optional

from pydantic import BaseModel, Field

from devman.schemas.common import TimestampsMixin


class CredentialCreate(BaseModel):
    label: str = Field(..., min_length=1, max_length=100)
    username: Optional[str] = Field(None, max_length=100)
    enc_secret: str = ""


class CredentialUpdate(BaseModel):
    label: Optional[str] = Field(None, min_length=1, max_length=100)
    username: Optional[str] = Field(None, max_length=100)
    enc_secret: Optional[str] = None


class CredentialResponse(TimestampsMixin, CredentialCreate):
    cred_id: int

    model_config = {"from_attributes": True}


class DeviceCredentialCreate(BaseModel):
    dev_id: int
    username: str = Field(..., min_length=1, max_length=100)
    enc_secret: str = ""


class DeviceCredentialUpdate(BaseModel):
    dev_id: Optional[int] = None
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    enc_secret: Optional[str] = None


class DeviceCredentialResponse(TimestampsMixin, DeviceCredentialCreate):
    cred_id: int

    model_config = {"from_attributes": True}
