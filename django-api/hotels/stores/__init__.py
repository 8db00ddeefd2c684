from hotels.stores.django_store import (
    DjangoEnrollmentStore,
    DjangoHotelStore,
    DjangoTicketStore,
)
from hotels.stores.interfaces import EnrollmentStore, HotelStore, TicketStore

__all__ = [
    "EnrollmentStore",
    "TicketStore",
    "HotelStore",
    "DjangoEnrollmentStore",
    "DjangoTicketStore",
    "DjangoHotelStore",
]
