"""Request preconditions for room allocation."""

from typing import Optional

from hotel_allocator.models.allocation import AllocationResult, ValidationOutcome
from hotel_allocator.models.hotel import Hotel
from hotel_allocator.services.allocation.base import InputValidatorBase

UNKNOWN_HOTEL = "Unknown hotel"
INVALID_HEADCOUNT = "numPeople must be > 0"


class InputValidator(InputValidatorBase):
    """Rejects unknown hotels and non-positive headcounts."""

    def validate(self, hotel: Optional[Hotel], num_people: int) -> ValidationOutcome:
        if hotel is None:
            return ValidationOutcome(ok=False, error_result=AllocationResult.failure(UNKNOWN_HOTEL))
        if num_people <= 0:
            return ValidationOutcome(
                ok=False, error_result=AllocationResult.failure(INVALID_HEADCOUNT)
            )
        return ValidationOutcome(ok=True)
