"""Read-only data source interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_allocator.models.booking import Booking
from hotel_allocator.models.hotel import Hotel


class HotelLookup(ABC):
    @abstractmethod
    def get_all(self) -> list[Hotel]:
        pass

    @abstractmethod
    def get_by_id(self, hotel_id: str) -> Optional[Hotel]:
        """Find a hotel by id, ignoring case; None if absent."""
        pass


class BookingSource(ABC):
    @abstractmethod
    def get_all(self) -> list[Booking]:
        pass
