"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in hotels/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from hotels.domain.value_objects import (
    Capacity,
    EnrollmentId,
    HotelId,
    RoomId,
    TicketId,
    TicketTypeId,
    UserId,
)


class TicketStatus(Enum):
    """Lifecycle of a ticket purchase."""

    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Address:
    """Domain representation of an enrollment's Address."""

    cep: str
    street: str
    city: str
    state: str
    number: str
    neighborhood: str
    address_detail: str | None = None


@dataclass(frozen=True)
class Enrollment:
    """Domain representation of an Enrollment."""

    id: EnrollmentId
    user_id: UserId
    name: str
    cpf: str
    birthday: date
    phone: str
    address: Address | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    enrollment_id: EnrollmentId
    status: TicketStatus
    ticket_type: TicketType
    created_at: datetime
    updated_at: datetime

    @property
    def grants_hotel_access(self) -> bool:
        """A ticket grants hotel access only when paid, in person, and with hotel."""
        return (
            self.status is TicketStatus.PAID
            and not self.ticket_type.is_remote
            and self.ticket_type.includes_hotel
        )


@dataclass(frozen=True)
class Room:
    """Domain representation of a Room."""

    id: RoomId
    hotel_id: HotelId
    name: str
    capacity: Capacity
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Hotel:
    """Domain representation of a Hotel."""

    id: HotelId
    name: str
    image: str
    created_at: datetime
    updated_at: datetime
    rooms: tuple[Room, ...] = ()
