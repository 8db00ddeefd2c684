"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Enrollment, EnrollmentId, Hotel, HotelId, Ticket, UserId


class EnrollmentStore(ABC):
    """Interface for enrollment lookups."""

    @abstractmethod
    def find_with_address_by_user_id(self, user_id: UserId) -> Enrollment | None:
        """Return the user's enrollment with its address, or None."""
        ...


class TicketStore(ABC):
    """Interface for ticket lookups."""

    @abstractmethod
    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        """Return the enrollment's ticket with its ticket type, or None."""
        ...


class HotelStore(ABC):
    """Interface for hotel persistence operations."""

    @abstractmethod
    def list_hotels(self) -> list[Hotel]:
        """Return all hotels ordered by id, without rooms."""
        ...

    @abstractmethod
    def find_hotel_with_rooms(self, hotel_id: HotelId) -> list[Hotel]:
        """Return the matching hotel with its rooms ordered by id.

        The result holds at most one hotel and is empty when none matches.
        """
        ...
