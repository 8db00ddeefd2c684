"""Django ORM implementations of the hotel stores.

Each method queries the ORM and converts rows to domain models.
"""

import structlog
from django.core.cache import cache

from hotels import cache as hotel_cache
from hotels import models
from hotels.domain import (
    Address,
    Capacity,
    Enrollment,
    EnrollmentId,
    Hotel,
    HotelId,
    Room,
    RoomId,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
    UserId,
)
from hotels.stores.interfaces import EnrollmentStore, HotelStore, TicketStore

logger = structlog.get_logger(__name__)


def _to_address(row: models.Address) -> Address:
    return Address(
        cep=row.cep,
        street=row.street,
        city=row.city,
        state=row.state,
        number=row.number,
        neighborhood=row.neighborhood,
        address_detail=row.address_detail,
    )


def _to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        name=row.name,
        price=row.price,
        is_remote=row.is_remote,
        includes_hotel=row.includes_hotel,
    )


def _to_room(row: models.Room) -> Room:
    return Room(
        id=RoomId(row.id),
        hotel_id=HotelId(row.hotel_id),
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_hotel(row: models.Hotel, rooms: tuple[Room, ...] = ()) -> Hotel:
    return Hotel(
        id=HotelId(row.id),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
        rooms=rooms,
    )


class DjangoEnrollmentStore(EnrollmentStore):
    """PostgreSQL-backed enrollment store using Django ORM."""

    def find_with_address_by_user_id(self, user_id: UserId) -> Enrollment | None:
        row = (
            models.Enrollment.objects.select_related("address")
            .filter(user_id=user_id.value)
            .first()
        )
        if row is None:
            return None
        try:
            address = _to_address(row.address)
        except models.Address.DoesNotExist:
            address = None
        return Enrollment(
            id=EnrollmentId(row.id),
            user_id=UserId(row.user_id),
            name=row.name,
            cpf=row.cpf,
            birthday=row.birthday,
            phone=row.phone,
            address=address,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


class DjangoTicketStore(TicketStore):
    """PostgreSQL-backed ticket store using Django ORM."""

    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        row = (
            models.Ticket.objects.select_related("ticket_type")
            .filter(enrollment_id=enrollment_id.value)
            .first()
        )
        if row is None:
            return None
        return Ticket(
            id=TicketId(row.id),
            enrollment_id=EnrollmentId(row.enrollment_id),
            status=TicketStatus(row.status),
            ticket_type=_to_ticket_type(row.ticket_type),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


class DjangoHotelStore(HotelStore):
    """PostgreSQL-backed hotel store using Django ORM, cached per hotel."""

    def list_hotels(self) -> list[Hotel]:
        hotels = cache.get(hotel_cache.HOTEL_LIST_KEY)
        if hotels is not None:
            logger.debug("hotel_cache_hit", key=hotel_cache.HOTEL_LIST_KEY)
            return hotels

        hotels = [_to_hotel(row) for row in models.Hotel.objects.order_by("id")]
        cache.set(hotel_cache.HOTEL_LIST_KEY, hotels, hotel_cache.cache_timeout())
        return hotels

    def find_hotel_with_rooms(self, hotel_id: HotelId) -> list[Hotel]:
        key = hotel_cache.hotel_rooms_key(hotel_id.value)
        hotels = cache.get(key)
        if hotels is not None:
            logger.debug("hotel_cache_hit", key=key)
            return hotels

        rows = models.Hotel.objects.filter(id=hotel_id.value).prefetch_related("rooms")
        hotels = [
            _to_hotel(row, rooms=tuple(_to_room(room) for room in row.rooms.all()))
            for row in rows
        ]
        cache.set(key, hotels, hotel_cache.cache_timeout())
        return hotels
