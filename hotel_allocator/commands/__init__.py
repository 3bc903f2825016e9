"""Text command parsing and handling."""

from hotel_allocator.commands.handlers import (
    AvailabilityCommandHandler,
    RoomTypesCommandHandler,
)
from hotel_allocator.commands.parser import (
    AvailabilityCommand,
    RoomTypesCommand,
    parse_availability,
    parse_room_types,
)

__all__ = [
    "AvailabilityCommand",
    "AvailabilityCommandHandler",
    "RoomTypesCommand",
    "RoomTypesCommandHandler",
    "parse_availability",
    "parse_room_types",
]
