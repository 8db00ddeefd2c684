from hotels.domain.models import (
    Address,
    Enrollment,
    Hotel,
    Room,
    Ticket,
    TicketStatus,
    TicketType,
)
from hotels.domain.value_objects import (
    Capacity,
    EnrollmentId,
    HotelId,
    RoomId,
    TicketId,
    TicketTypeId,
    UserId,
)

__all__ = [
    "Address",
    "Enrollment",
    "Hotel",
    "Room",
    "Ticket",
    "TicketStatus",
    "TicketType",
    "Capacity",
    "EnrollmentId",
    "HotelId",
    "RoomId",
    "TicketId",
    "TicketTypeId",
    "UserId",
]
