"""Bookings loaded from a JSON file."""

from pathlib import Path

from hotel_allocator.models.booking import Booking
from hotel_allocator.repositories.base import BookingSource
from hotel_allocator.repositories.json_loader import load_json_list


class BookingRepository(BookingSource):
    """In-memory booking list read once from a JSON array.

    Every booking is validated on load (non-blank hotel id, yyyyMMdd dates,
    departure after arrival), so downstream code can rely on it.
    """

    def __init__(self, bookings_file: str | Path):
        self._bookings = load_json_list(bookings_file, Booking, "Bookings")

    def get_all(self) -> list[Booking]:
        return list(self._bookings)
