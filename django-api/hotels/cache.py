"""Cache keys shared by the hotel store and the invalidation signals."""

from django.conf import settings
from django.core.cache import cache

HOTEL_LIST_KEY = "hotels:list"


def hotel_rooms_key(hotel_id: int) -> str:
    return f"hotels:{hotel_id}:rooms"


def cache_timeout() -> int:
    return settings.HOTELS_CACHE_TTL


def invalidate_hotel_list() -> None:
    cache.delete(HOTEL_LIST_KEY)


def invalidate_hotel_rooms(hotel_id: int) -> None:
    cache.delete(hotel_rooms_key(hotel_id))
