"""Pytest configuration and shared fixtures."""

import datetime
import itertools
import typing as t

import pytest
from django.contrib.auth import get_user_model
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from hotels.models import Address, Enrollment, Hotel, Room, Ticket, TicketType

_cpf_sequence = itertools.count(10000000000)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(django_user_model: t.Any) -> t.Any:
    return django_user_model.objects.create_user(username="attendee", password="secret123")


@pytest.fixture
def auth_client(user: t.Any) -> APIClient:
    """Client sending a valid bearer token for `user`."""
    token = Token.objects.create(user=user)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")
    return client


def create_enrollment_with_address(user: t.Any) -> Enrollment:
    enrollment = Enrollment.objects.create(
        user=user,
        name="Ada Lovelace",
        cpf=str(next(_cpf_sequence)),
        birthday=datetime.date(1990, 12, 10),
        phone="(21) 98999-9999",
    )
    Address.objects.create(
        enrollment=enrollment,
        cep="20040-020",
        street="Rua da Assembleia",
        city="Rio de Janeiro",
        state="RJ",
        number="10",
        neighborhood="Centro",
    )
    return enrollment


def create_ticket_type(*, is_remote: bool = False, includes_hotel: bool = True) -> TicketType:
    return TicketType.objects.create(
        name="Presencial + Hotel",
        price=60000,
        is_remote=is_remote,
        includes_hotel=includes_hotel,
    )


def create_ticket(
    enrollment: Enrollment, ticket_type: TicketType, status: str = Ticket.Status.PAID
) -> Ticket:
    return Ticket.objects.create(enrollment=enrollment, ticket_type=ticket_type, status=status)


def create_hotel(name: str = "Beach Resort") -> Hotel:
    return Hotel.objects.create(name=name, image="https://example.com/beach-resort.png")


def create_rooms(hotel: Hotel, count: int = 2) -> list[Room]:
    return [
        Room.objects.create(hotel=hotel, name=f"{100 + i}", capacity=i + 1)
        for i in range(count)
    ]


@pytest.fixture
def eligible_user(user: t.Any) -> t.Any:
    """User with a paid, in-person ticket that includes hotel."""
    enrollment = create_enrollment_with_address(user)
    create_ticket(enrollment, create_ticket_type())
    return user
