"""Hotel and booking data sources."""

from hotel_allocator.repositories.base import BookingSource, HotelLookup
from hotel_allocator.repositories.booking_repository import BookingRepository
from hotel_allocator.repositories.hotel_repository import HotelRepository

__all__ = [
    "BookingSource",
    "HotelLookup",
    "BookingRepository",
    "HotelRepository",
]
