import json
from datetime import date
from pathlib import Path

import pytest

from hotel_allocator.models import Booking, DateRange, Hotel, Room, RoomType


def make_hotel(hotel_id: str = "H1", **room_counts: tuple[int, int]) -> Hotel:
    """Build a hotel from ``CODE=(room_count, size)`` keyword arguments."""
    room_types = []
    rooms = []
    for code, (count, size) in room_counts.items():
        room_types.append(RoomType(code=code, size=size, description=f"{code} room"))
        rooms.extend(
            Room(room_id=f"{code}-{i}", room_type_code=code) for i in range(1, count + 1)
        )
    return Hotel(id=hotel_id, name="Test Hotel", room_types=room_types, rooms=rooms)


def make_booking(
    arrival: date,
    departure: date,
    room_type: str = "DBL",
    hotel_id: str = "H1",
) -> Booking:
    return Booking(
        hotel_id=hotel_id,
        arrival=arrival,
        departure=departure,
        room_type=room_type,
        room_rate="Prepaid",
    )


@pytest.fixture
def one_night():
    """The single night of 1 Sep 2024."""
    return DateRange(date(2024, 9, 1), date(2024, 9, 2))


@pytest.fixture
def hotels_json():
    """Hotels file content in the documented JSON shape."""
    return [
        {
            "id": "H1",
            "name": "Hotel California",
            "roomTypes": [
                {
                    "code": "SGL",
                    "size": 1,
                    "description": "Single Room",
                    "amenities": ["WiFi", "TV"],
                    "features": ["Non-smoking"],
                },
                {
                    "code": "DBL",
                    "size": 2,
                    "description": "Double Room",
                    "amenities": ["WiFi", "TV", "Minibar"],
                    "features": ["Non-smoking", "Sea View"],
                },
            ],
            "rooms": [
                {"roomType": "SGL", "roomId": "101"},
                {"roomType": "SGL", "roomId": "102"},
                {"roomType": "DBL", "roomId": "201"},
                {"roomType": "DBL", "roomId": "202"},
            ],
        }
    ]


@pytest.fixture
def bookings_json():
    """Bookings file content in the documented JSON shape."""
    return [
        {
            "hotelId": "H1",
            "arrival": "20240901",
            "departure": "20240903",
            "roomType": "DBL",
            "roomRate": "Prepaid",
        },
        {
            "hotelId": "H1",
            "arrival": "20240902",
            "departure": "20240905",
            "roomType": "SGL",
            "roomRate": "Standard",
        },
    ]


@pytest.fixture
def write_json(tmp_path: Path):
    """Write JSON content to a temporary file and return its path."""

    def _write(name: str, content) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
