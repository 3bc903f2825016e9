"""Command handlers that render engine answers as console text."""

from structlog import get_logger

from hotel_allocator.models.date_range import DateRange
from hotel_allocator.repositories.base import HotelLookup
from hotel_allocator.services.allocation_service import AllocationService
from hotel_allocator.services.availability_service import AvailabilityProvider

logger = get_logger(__name__)


class AvailabilityCommandHandler:
    """Answers ``Availability(hotel, range, roomType)``."""

    def __init__(self, hotels: HotelLookup, availability: AvailabilityProvider):
        self.hotels = hotels
        self.availability = availability

    def execute(self, hotel_id: str, date_range: DateRange, room_type: str) -> str:
        hotel = self.hotels.get_by_id(hotel_id)
        if hotel is None:
            return f"Error: unknown hotel '{hotel_id}'."

        room_type_def = hotel.get_room_type(room_type)
        if room_type_def is None:
            return f"Error: unknown room type '{room_type}' for hotel '{hotel_id}'."

        available = self.availability.get_availability(hotel, date_range, room_type_def.code)
        logger.debug(
            "Availability answered",
            hotel_id=hotel.id,
            room_type=room_type_def.code,
            available=available,
        )
        return str(available)


class RoomTypesCommandHandler:
    """Answers ``RoomTypes(hotel, range, numPeople)``.

    Output lists the allocated room type codes, with ``!`` after a room
    that is only partially filled, e.g. ``H1: DBL, DBL, SGL!``.
    """

    def __init__(self, hotels: HotelLookup, allocation: AllocationService):
        self.hotels = hotels
        self.allocation = allocation

    def execute(self, hotel_id: str, date_range: DateRange, num_people: int) -> str:
        hotel = self.hotels.get_by_id(hotel_id)
        if hotel is None:
            return f"Error: unknown hotel '{hotel_id}'."

        result = self.allocation.allocate(hotel, date_range, num_people)
        if not result.success:
            return f"Error: {result.error_message}"

        parts = [str(room) for room in result.rooms or []]
        return f"{hotel.id}: {', '.join(parts)}"
