"""Domain-level exception hierarchy."""


class DomainError(Exception):
    """Base exception for service-layer errors."""

    def __init__(self, message: str = "Domain error") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """Raised when a requested resource cannot be located."""


class ConflictError(DomainError):
    """Raised when a unique constraint or foreign key rule is violated."""


class ValidationError(DomainError):
    """Raised when input fails validation rules."""


class ParseError(ValidationError):
    """Raised when a mandatory numeric, time, IP or MAC value cannot be parsed.

    Filter parsing never raises this; malformed filters degrade to "no constraint".
    """


class EncodingError(DomainError):
    """Raised when a request payload cannot be decoded."""

    def __init__(self, message: str = "Invalid request payload") -> None:
        super().__init__(message)


class DecryptionError(DomainError):
    """Raised when a stored secret cannot be decrypted or encrypted.

    The message is fixed and never carries secret material.
    """

    def __init__(self, message: str = "Secret decryption failed") -> None:
        super().__init__(message)
