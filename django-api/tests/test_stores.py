"""Tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

import datetime
import typing as t

import pytest

from conftest import (
    create_enrollment_with_address,
    create_hotel,
    create_rooms,
    create_ticket,
    create_ticket_type,
)
from hotels.domain import EnrollmentId, HotelId, TicketStatus, UserId
from hotels.models import Enrollment, Ticket
from hotels.stores import DjangoEnrollmentStore, DjangoHotelStore, DjangoTicketStore


@pytest.mark.django_db
class TestDjangoEnrollmentStore:
    def test_returns_enrollment_with_address(self, user: t.Any):
        row = create_enrollment_with_address(user)

        enrollment = DjangoEnrollmentStore().find_with_address_by_user_id(UserId(user.pk))

        assert enrollment is not None
        assert enrollment.id == EnrollmentId(row.pk)
        assert enrollment.user_id == UserId(user.pk)
        assert enrollment.address is not None
        assert enrollment.address.city == "Rio de Janeiro"
        assert enrollment.address.address_detail is None

    def test_enrollment_without_address(self, user: t.Any):
        Enrollment.objects.create(
            user=user,
            name="Ada Lovelace",
            cpf="99999999999",
            birthday=datetime.date(1990, 12, 10),
            phone="(21) 98999-9999",
        )

        enrollment = DjangoEnrollmentStore().find_with_address_by_user_id(UserId(user.pk))

        assert enrollment is not None
        assert enrollment.address is None

    def test_missing_enrollment_returns_none(self, user: t.Any):
        assert DjangoEnrollmentStore().find_with_address_by_user_id(UserId(user.pk)) is None


@pytest.mark.django_db
class TestDjangoTicketStore:
    def test_returns_ticket_with_ticket_type(self, user: t.Any):
        enrollment = create_enrollment_with_address(user)
        ticket_type = create_ticket_type(is_remote=True, includes_hotel=False)
        create_ticket(enrollment, ticket_type, status=Ticket.Status.RESERVED)

        ticket = DjangoTicketStore().find_by_enrollment_id(EnrollmentId(enrollment.pk))

        assert ticket is not None
        assert ticket.status is TicketStatus.RESERVED
        assert ticket.ticket_type.is_remote is True
        assert ticket.ticket_type.includes_hotel is False
        assert ticket.ticket_type.price == 60000

    def test_missing_ticket_returns_none(self, user: t.Any):
        enrollment = create_enrollment_with_address(user)

        assert DjangoTicketStore().find_by_enrollment_id(EnrollmentId(enrollment.pk)) is None


@pytest.mark.django_db
class TestDjangoHotelStore:
    def test_list_hotels_ordered_by_id_without_rooms(self):
        first = create_hotel("Beach Resort")
        second = create_hotel("Mountain Lodge")
        create_rooms(first, count=2)

        hotels = DjangoHotelStore().list_hotels()

        assert [hotel.id for hotel in hotels] == [HotelId(first.pk), HotelId(second.pk)]
        assert all(hotel.rooms == () for hotel in hotels)

    def test_find_hotel_with_rooms_ordered_by_id(self):
        hotel = create_hotel()
        rooms = create_rooms(hotel, count=3)

        result = DjangoHotelStore().find_hotel_with_rooms(HotelId(hotel.pk))

        assert len(result) == 1
        assert [room.id.value for room in result[0].rooms] == [room.pk for room in rooms]
        assert [room.capacity.value for room in result[0].rooms] == [1, 2, 3]

    def test_find_unknown_hotel_returns_empty_list(self):
        create_hotel()

        assert DjangoHotelStore().find_hotel_with_rooms(HotelId(999999)) == []
