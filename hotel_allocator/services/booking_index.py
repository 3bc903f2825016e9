"""Per-night occupancy index built from the booking set."""

from collections import Counter
from datetime import date
from types import MappingProxyType
from typing import Iterable

from structlog import get_logger

from hotel_allocator.models.booking import Booking

logger = get_logger(__name__)


class BookingIndex:
    """Booked room counts keyed by (hotel id, night, room type).

    Hotel ids and room types are stored upper-cased, so lookups are
    case-insensitive. The index is read-only once built and may be shared
    between threads.
    """

    def __init__(self, bookings: Iterable[Booking]):
        """Count every night of every booking.

        Args:
            bookings: Pre-validated bookings (departure strictly after arrival)
        """
        counts: Counter[tuple[str, date, str]] = Counter()
        booking_count = 0
        for booking in bookings:
            booking_count += 1
            hotel_id = booking.hotel_id.upper()
            room_type = booking.room_type.upper()
            for night in booking.nights():
                counts[(hotel_id, night, room_type)] += 1

        self._index = MappingProxyType(dict(counts))

        logger.info(
            "Built booking index",
            bookings=booking_count,
            booking_nights=sum(counts.values()),
            keys=len(counts),
        )

    def get_booked_count(self, hotel_id: str, night: date, room_type: str) -> int:
        """Return how many rooms of the type are booked that night, 0 if none."""
        return self._index.get((hotel_id.upper(), night, room_type.upper()), 0)

    def __len__(self) -> int:
        return len(self._index)
