"""Utilities for translating domain errors to HTTP responses."""

from fastapi import HTTPException, status

from devman.domain.exceptions import (
    ConflictError,
    DecryptionError,
    DomainError,
    EncodingError,
    NotFoundError,
    ValidationError,
)


def to_http(exc: DomainError) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    if isinstance(exc, (ValidationError, EncodingError)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    if isinstance(exc, DecryptionError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=DecryptionError().message
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
