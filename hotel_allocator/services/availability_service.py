"""Room availability over a date range."""

from abc import ABC, abstractmethod
from typing import Optional

from structlog import get_logger

from hotel_allocator.models.date_range import DateRange
from hotel_allocator.models.hotel import Hotel
from hotel_allocator.services.booking_index import BookingIndex

logger = get_logger(__name__)


class AvailabilityProvider(ABC):
    """Anything that can report free rooms of a type over a range."""

    @abstractmethod
    def get_availability(
        self,
        hotel: Hotel,
        date_range: DateRange,
        room_type_code: str,
    ) -> int:
        pass


class AvailabilityService(AvailabilityProvider):
    """Derives free rooms from the hotel inventory and the booking index."""

    def __init__(self, index: BookingIndex):
        self._index = index

    def get_availability(
        self,
        hotel: Optional[Hotel],
        date_range: DateRange,
        room_type_code: str,
    ) -> int:
        """Free rooms of the type on the worst night of the range.

        The figure is ``rooms of that type - rooms booked`` minimised over
        every night, so it can be negative for an overbooked night. An empty
        range has no nights and reports 0.

        Args:
            hotel: Hotel to inspect
            date_range: Nights to cover
            room_type_code: Room type code, any casing

        Returns:
            Minimum free rooms across the nights

        Raises:
            ValueError: If hotel is None or the room type code is blank
        """
        if hotel is None:
            raise ValueError("hotel is required")
        if not room_type_code or not room_type_code.strip():
            raise ValueError("room_type_code is required")

        code = room_type_code.upper()
        total_rooms = hotel.get_room_count_for_type(code)

        min_available: Optional[int] = None
        for night in date_range.nights():
            booked = self._index.get_booked_count(hotel.id, night, code)
            available = total_rooms - booked
            if min_available is None or available < min_available:
                min_available = available

        if min_available is None:
            return 0

        logger.debug(
            "Computed availability",
            hotel_id=hotel.id,
            room_type=code,
            total_rooms=total_rooms,
            nights=len(date_range),
            available=min_available,
        )
        return min_available
