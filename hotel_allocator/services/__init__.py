"""Business services package."""

from hotel_allocator.services.booking_index import BookingIndex
from hotel_allocator.services.availability_service import (
    AvailabilityProvider,
    AvailabilityService,
)
from hotel_allocator.services.allocation_service import AllocationService

__all__ = [
    "BookingIndex",
    "AvailabilityProvider",
    "AvailabilityService",
    "AllocationService",
]
