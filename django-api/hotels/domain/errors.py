"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EnrollmentNotFoundError(DomainError):
    """Raised when the user has no enrollment."""

    def __init__(self, user_id: object) -> None:
        super().__init__(
            code=ErrorCode.ENROLLMENT_NOT_FOUND,
            message="Enrollment not found",
        )
        self.user_id = user_id


class TicketNotFoundError(DomainError):
    """Raised when the enrollment has no ticket."""

    def __init__(self, enrollment_id: object) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.enrollment_id = enrollment_id


class HotelNotFoundError(DomainError):
    """Raised when no hotel matches the lookup."""

    def __init__(self, hotel_id: object = None) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found" if hotel_id is not None else "No hotels available",
        )
        self.hotel_id = hotel_id


class PaymentRequiredError(DomainError):
    """Raised when the ticket does not grant hotel access."""

    def __init__(self, ticket_id: object) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_REQUIRED,
            message="Ticket is not paid or does not include a hotel",
        )
        self.ticket_id = ticket_id
