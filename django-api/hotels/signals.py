"""Django signals for cache invalidation."""

import structlog
from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

from hotels.cache import invalidate_hotel_list, invalidate_hotel_rooms
from hotels.models import Hotel, Room

logger = structlog.get_logger(__name__)


@receiver([post_save, post_delete], sender=Hotel)
def invalidate_hotel_cache(sender, instance, **kwargs):
    """Invalidate caches when a hotel is saved or deleted."""
    invalidate_hotel_list()
    invalidate_hotel_rooms(instance.pk)
    logger.debug("hotel_cache_invalidated", hotel_id=instance.pk)


@receiver([post_save, post_delete], sender=Room)
def invalidate_room_cache(sender, instance, **kwargs):
    """Invalidate the owning hotel's rooms cache when a room is saved or deleted."""
    invalidate_hotel_rooms(instance.hotel_id)
    logger.debug("room_cache_invalidated", hotel_id=instance.hotel_id)


@receiver(pre_save, sender=Room)
def invalidate_previous_hotel_rooms_cache(sender, instance, **kwargs):
    """Invalidate the former hotel's rooms cache when a room moves to another hotel."""
    if instance.pk is None:
        return
    previous_hotel_id = (
        Room.objects.filter(pk=instance.pk).values_list("hotel_id", flat=True).first()
    )
    if previous_hotel_id is not None and previous_hotel_id != instance.hotel_id:
        invalidate_hotel_rooms(previous_hotel_id)
        logger.debug("room_cache_invalidated", hotel_id=previous_hotel_id)
