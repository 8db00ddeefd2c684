from hotels.services.hotel_service import HotelService

__all__ = ["HotelService"]
