"""Domain models for hotels, bookings and room allocations."""

from hotel_allocator.models.allocation import (
    AllocatedRoom,
    AllocationResult,
    KnapsackItem,
    ParentEntry,
    SolverResult,
    TypeAvailability,
    ValidationOutcome,
)
from hotel_allocator.models.booking import Booking
from hotel_allocator.models.date_range import DateRange, parse_strict_date
from hotel_allocator.models.hotel import Hotel, Room, RoomType

__all__ = [
    "Hotel",
    "Room",
    "RoomType",
    "Booking",
    "DateRange",
    "parse_strict_date",
    "AllocatedRoom",
    "AllocationResult",
    "KnapsackItem",
    "ParentEntry",
    "SolverResult",
    "TypeAvailability",
    "ValidationOutcome",
]
