"""Hotels loaded from a JSON file."""

from pathlib import Path
from typing import Optional

from hotel_allocator.models.hotel import Hotel
from hotel_allocator.repositories.base import HotelLookup
from hotel_allocator.repositories.json_loader import load_json_list


class HotelRepository(HotelLookup):
    """In-memory hotel list read once from a JSON array."""

    def __init__(self, hotels_file: str | Path):
        """Load and validate the hotels file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a hotel lacks an id, room types or rooms, or a room
                type has a blank code
        """
        self._hotels = load_json_list(hotels_file, Hotel, "Hotels")
        self._by_id = {hotel.id.upper(): hotel for hotel in reversed(self._hotels)}

    def get_all(self) -> list[Hotel]:
        return list(self._hotels)

    def get_by_id(self, hotel_id: str) -> Optional[Hotel]:
        return self._by_id.get(hotel_id.upper())
