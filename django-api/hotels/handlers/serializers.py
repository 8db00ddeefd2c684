"""Serializers for transforming domain models to API responses.

Field names follow the public API contract (camelCase, nested `Rooms`).
"""

from rest_framework import serializers


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    hotelId = serializers.IntegerField(source="hotel_id.value")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class HotelSerializer(serializers.Serializer):
    """Serializer for Hotel domain model, without rooms."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    image = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class HotelWithRoomsSerializer(HotelSerializer):
    """Serializer for Hotel domain model including its rooms."""

    Rooms = RoomSerializer(source="rooms", many=True)
