"""Abstract interfaces for the stages of room allocation.

Each stage of the allocation engine is injected through one of these
interfaces so any stage can be replaced or tested on its own.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_allocator.models.allocation import (
    AllocatedRoom,
    KnapsackItem,
    ParentEntry,
    SolverResult,
    TypeAvailability,
    ValidationOutcome,
)
from hotel_allocator.models.date_range import DateRange
from hotel_allocator.models.hotel import Hotel
from hotel_allocator.services.availability_service import AvailabilityProvider


class InputValidatorBase(ABC):
    """Checks the request before any optimization runs."""

    @abstractmethod
    def validate(self, hotel: Optional[Hotel], num_people: int) -> ValidationOutcome:
        pass


class AvailabilityCollectorBase(ABC):
    """Gathers clamped availability for every room type of a hotel."""

    @abstractmethod
    def collect(
        self,
        hotel: Hotel,
        date_range: DateRange,
        availability: AvailabilityProvider,
    ) -> list[TypeAvailability]:
        pass


class ItemDecomposerBase(ABC):
    """Turns per-type availability into 0/1 knapsack items."""

    @abstractmethod
    def build(self, type_availability: list[TypeAvailability]) -> list[KnapsackItem]:
        pass


class CapacitySolverBase(ABC):
    """Finds the fewest rooms whose capacity covers the headcount."""

    @abstractmethod
    def solve(
        self,
        items: list[KnapsackItem],
        hotel: Hotel,
        num_people: int,
    ) -> SolverResult:
        pass


class AllocationReconstructorBase(ABC):
    """Turns the solver's back-pointers into concrete rooms."""

    @abstractmethod
    def reconstruct(
        self,
        parent: list[list[ParentEntry]],
        items: list[KnapsackItem],
        best_capacity: int,
    ) -> dict[str, int]:
        pass

    @abstractmethod
    def build_allocated_rooms(
        self,
        hotel: Hotel,
        chosen_counts: dict[str, int],
        num_people: int,
    ) -> Optional[list[AllocatedRoom]]:
        pass
