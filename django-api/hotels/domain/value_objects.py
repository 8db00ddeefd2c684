"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class _PositiveId:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"{type(self).__name__} must be an integer")
        if self.value <= 0:
            raise ValueError(f"{type(self).__name__} must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse a decimal string such as a URL path segment."""
        text = str(value).strip()
        if not (text.isascii() and text.isdecimal()):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        return cls(value=int(text))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId(_PositiveId):
    """Identifier of an authenticated user."""


@dataclass(frozen=True)
class EnrollmentId(_PositiveId):
    """Unique identifier for an Enrollment."""


@dataclass(frozen=True)
class TicketId(_PositiveId):
    """Unique identifier for a Ticket."""


@dataclass(frozen=True)
class TicketTypeId(_PositiveId):
    """Unique identifier for a TicketType."""


@dataclass(frozen=True)
class HotelId(_PositiveId):
    """Unique identifier for a Hotel."""


@dataclass(frozen=True)
class RoomId(_PositiveId):
    """Unique identifier for a Room."""


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
