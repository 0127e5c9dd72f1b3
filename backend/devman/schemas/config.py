"""Configuration schemas: variables and SNMP profiles."""

from typing import Optional

from pydantic import BaseModel, Field

from devman.db.models import SnmpAuthProto, SnmpPrivProto, SnmpSecLevel
from devman.schemas.common import TimestampsMixin


class VarCreate(BaseModel):
    descr: str = Field(..., min_length=1, max_length=100)
    content: Optional[str] = None
    notes: Optional[str] = None


class VarUpdate(BaseModel):
    content: Optional[str] = None
    notes: Optional[str] = None


class VarResponse(TimestampsMixin, VarCreate):
    model_config = {"from_attributes": True}


class SnmpCredentialBase(BaseModel):
    """SNMP profile; ``variant`` is the SNMP version (1, 2 or 3)."""

    label: str = Field(..., min_length=1, max_length=100)
    variant: int = Field(2, ge=1, le=3)
    auth_name: str = Field(..., min_length=1, max_length=100)
    auth_proto: Optional[SnmpAuthProto] = None
    sec_level: Optional[SnmpSecLevel] = None
    priv_proto: Optional[SnmpPrivProto] = None


class SnmpCredentialCreate(SnmpCredentialBase):
    """Plaintext passphrases; they are encrypted before storage."""

    auth_pass: Optional[str] = None
    priv_pass: Optional[str] = None


class SnmpCredentialUpdate(BaseModel):
    label: Optional[str] = Field(None, min_length=1, max_length=100)
    variant: Optional[int] = Field(None, ge=1, le=3)
    auth_name: Optional[str] = Field(None, min_length=1, max_length=100)
    auth_proto: Optional[SnmpAuthProto] = None
    auth_pass: Optional[str] = None
    sec_level: Optional[SnmpSecLevel] = None
    priv_proto: Optional[SnmpPrivProto] = None
    priv_pass: Optional[str] = None


class SnmpCredentialResponse(TimestampsMixin, SnmpCredentialCreate):
    snmp_cred_id: int

    model_config = {"from_attributes": True}
