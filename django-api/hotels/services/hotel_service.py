"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import structlog

from hotels.domain import Hotel, HotelId, UserId
from hotels.domain.errors import (
    EnrollmentNotFoundError,
    HotelNotFoundError,
    PaymentRequiredError,
    TicketNotFoundError,
)
from hotels.stores.interfaces import EnrollmentStore, HotelStore, TicketStore

logger = structlog.get_logger(__name__)


class HotelService:
    """Service deciding who may browse hotels and returning them."""

    def __init__(
        self,
        enrollment_store: EnrollmentStore,
        ticket_store: TicketStore,
        hotel_store: HotelStore,
    ) -> None:
        self._enrollments = enrollment_store
        self._tickets = ticket_store
        self._hotels = hotel_store

    def get_hotels(self, user_id: UserId) -> list[Hotel]:
        """Return all hotels if the user's ticket grants hotel access.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            TicketNotFoundError: If the enrollment has no ticket.
            PaymentRequiredError: If the ticket is unpaid, remote, or excludes hotel.
            HotelNotFoundError: If there are no hotels.
        """
        enrollment = self._enrollments.find_with_address_by_user_id(user_id)
        if enrollment is None:
            raise EnrollmentNotFoundError(user_id)

        ticket = self._tickets.find_by_enrollment_id(enrollment.id)
        if ticket is None:
            raise TicketNotFoundError(enrollment.id)

        if not ticket.grants_hotel_access:
            logger.info(
                "hotel_access_denied",
                user_id=user_id.value,
                ticket_id=ticket.id.value,
                status=ticket.status.value,
                is_remote=ticket.ticket_type.is_remote,
                includes_hotel=ticket.ticket_type.includes_hotel,
            )
            raise PaymentRequiredError(ticket.id)

        hotels = self._hotels.list_hotels()
        if not hotels:
            raise HotelNotFoundError()
        return hotels

    def get_hotel_rooms(self, hotel_id: str) -> list[Hotel]:
        """Return the hotel matching hotel_id together with its rooms.

        Ids that are not positive integers match no hotel.

        Raises:
            HotelNotFoundError: If no hotel matches.
        """
        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError:
            raise HotelNotFoundError(hotel_id) from None

        hotels = self._hotels.find_hotel_with_rooms(parsed_id)
        if not hotels:
            raise HotelNotFoundError(hotel_id)
        return hotels
