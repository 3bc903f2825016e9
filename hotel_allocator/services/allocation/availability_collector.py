"""Per room type availability, sanitized for the optimizer."""

from structlog import get_logger

from hotel_allocator.models.allocation import TypeAvailability
from hotel_allocator.models.date_range import DateRange
from hotel_allocator.models.hotel import Hotel
from hotel_allocator.services.allocation.base import AvailabilityCollectorBase
from hotel_allocator.services.availability_service import AvailabilityProvider

logger = get_logger(__name__)


class AvailabilityCollector(AvailabilityCollectorBase):
    """Queries availability for each room type in hotel order."""

    def collect(
        self,
        hotel: Hotel,
        date_range: DateRange,
        availability: AvailabilityProvider,
    ) -> list[TypeAvailability]:
        """Collect availability for every room type of the hotel.

        Codes are upper-cased and overbooked (negative) figures are clamped
        to 0. Duplicate room types are not merged.

        Args:
            hotel: Hotel whose room types are queried
            date_range: Nights to cover
            availability: Source of raw availability figures

        Returns:
            One entry per room type, in the hotel's order
        """
        collected = []
        for room_type in hotel.room_types:
            code = room_type.code.upper()
            available = availability.get_availability(hotel, date_range, code)
            if available < 0:
                logger.warning(
                    "Room type overbooked, treating as unavailable",
                    hotel_id=hotel.id,
                    room_type=code,
                    available=available,
                )
                available = 0
            collected.append(
                TypeAvailability(
                    room_type=room_type.model_copy(update={"code": code}),
                    available=available,
                )
            )
        return collected
