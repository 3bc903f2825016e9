"""Parsing of the Availability(...) and RoomTypes(...) commands."""

import re
from dataclasses import dataclass
from typing import Optional

from hotel_allocator.models.date_range import DateRange

AVAILABILITY_PATTERN = re.compile(
    r"^\s*Availability\s*\(\s*([^\s,()]+)\s*,\s*([^\s,()]+)\s*,\s*([^\s,()]+)\s*\)\s*$",
    re.IGNORECASE,
)
ROOM_TYPES_PATTERN = re.compile(
    r"^\s*RoomTypes\s*\(\s*([^\s,()]+)\s*,\s*([^\s,()]+)\s*,\s*([0-9]+)\s*\)\s*$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class AvailabilityCommand:
    hotel_id: str
    date_range: DateRange
    room_type: str


@dataclass(frozen=True)
class RoomTypesCommand:
    hotel_id: str
    date_range: DateRange
    num_people: int


def parse_availability(line: str) -> Optional[AvailabilityCommand]:
    """Parse ``Availability(H1, 20240901[-20240903], SGL)``; None if it isn't one."""
    match = AVAILABILITY_PATTERN.match(line)
    if not match:
        return None
    hotel_id, date_token, room_type = match.groups()
    try:
        date_range = DateRange.parse(date_token)
    except ValueError:
        return None
    return AvailabilityCommand(hotel_id=hotel_id, date_range=date_range, room_type=room_type)


def parse_room_types(line: str) -> Optional[RoomTypesCommand]:
    """Parse ``RoomTypes(H1, 20240904[-20240905], 3)``; None if it isn't one."""
    match = ROOM_TYPES_PATTERN.match(line)
    if not match:
        return None
    hotel_id, date_token, num_people = match.groups()
    try:
        date_range = DateRange.parse(date_token)
    except ValueError:
        return None
    return RoomTypesCommand(hotel_id=hotel_id, date_range=date_range, num_people=int(num_people))
