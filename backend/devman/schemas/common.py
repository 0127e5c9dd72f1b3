"""Schemas shared by every resource."""

from datetime import datetime

from pydantic import BaseModel


class CountResponse(BaseModel):
    """Number of rows in a table."""

    count: int


class TimestampsMixin(BaseModel):
    created_on: datetime
    updated_on: datetime
