"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_ID = "INVALID_ID"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_ITEM_NOT_FOUND = "EVENT_ITEM_NOT_FOUND"
    VENDOR_NOT_FOUND = "VENDOR_NOT_FOUND"
    COMPANY_NOT_FOUND = "COMPANY_NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    INVALID_STATE = "INVALID_STATE"
    CONFLICT = "CONFLICT"
    TRANSACTION_FAILED = "TRANSACTION_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when input is malformed. Resubmitting corrected input succeeds."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR) -> None:
        super().__init__(code=code, message=message)


class InvalidIdError(ValidationError):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self, kind: str = "ID") -> None:
        super().__init__(message=f"Invalid {kind} format", code=ErrorCode.INVALID_ID)


class NotFoundError(DomainError):
    """Base for missing resources."""


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")
        self.event_id = event_id


class EventItemNotFoundError(NotFoundError):
    """Raised when an event item is not found."""

    def __init__(self, event_item_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_ITEM_NOT_FOUND,
            message="Event item not found",
        )
        self.event_item_id = event_item_id


class VendorNotFoundError(NotFoundError):
    def __init__(self, vendor_id: str) -> None:
        super().__init__(code=ErrorCode.VENDOR_NOT_FOUND, message="Vendor not found")
        self.vendor_id = vendor_id


class CompanyNotFoundError(NotFoundError):
    def __init__(self, company_id: str) -> None:
        super().__init__(code=ErrorCode.COMPANY_NOT_FOUND, message="Company not found")
        self.company_id = company_id


class ForbiddenError(DomainError):
    """Raised when the identity's role or tenant scope does not cover the resource."""

    def __init__(self, message: str = "Not authorized to access this event") -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class InvalidStateError(DomainError):
    """Raised when an event is not in the state an operation requires."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_STATE, message=message)


class ConflictError(DomainError):
    """Raised when an event item already has an approved booking."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.CONFLICT, message=message)


class TransactionError(DomainError):
    """Raised when a multi-write transaction aborts. Safe to retry."""

    def __init__(self, message: str = "The operation could not be committed, please retry") -> None:
        super().__init__(code=ErrorCode.TRANSACTION_FAILED, message=message)
