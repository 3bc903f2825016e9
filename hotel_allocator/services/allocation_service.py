"""Allocation engine: fewest rooms that house a party over a date range."""

from typing import Optional

from structlog import get_logger

from hotel_allocator.models.allocation import AllocationResult
from hotel_allocator.models.date_range import DateRange
from hotel_allocator.models.hotel import Hotel
from hotel_allocator.services.allocation import (
    AllocationReconstructor,
    AllocationReconstructorBase,
    AvailabilityCollector,
    AvailabilityCollectorBase,
    CapacitySolver,
    CapacitySolverBase,
    InputValidator,
    InputValidatorBase,
    ItemDecomposer,
    ItemDecomposerBase,
    ReconstructionError,
)
from hotel_allocator.services.availability_service import AvailabilityProvider

logger = get_logger(__name__)

NOT_ENOUGH_CAPACITY = (
    "Not enough capacity available to allocate the requested number of people."
)
UNEXPECTED_FAILURE = "Allocation failed to place all people (unexpected)."


class AllocationService:
    """Orchestrates validation, availability, optimization and reconstruction.

    The service holds no per-request state; each ``allocate`` call is
    independent and proposes rooms without booking them.
    """

    def __init__(
        self,
        availability: AvailabilityProvider,
        input_validator: Optional[InputValidatorBase] = None,
        availability_collector: Optional[AvailabilityCollectorBase] = None,
        item_decomposer: Optional[ItemDecomposerBase] = None,
        capacity_solver: Optional[CapacitySolverBase] = None,
        reconstructor: Optional[AllocationReconstructorBase] = None,
    ):
        """Initialize the engine.

        Args:
            availability: Source of per room type availability
            input_validator: Request precondition check
            availability_collector: Per-type availability gathering
            item_decomposer: Room counts to knapsack items
            capacity_solver: Minimum room count DP
            reconstructor: DP back-tracking and room materialization
        """
        self.availability = availability
        self.input_validator = input_validator or InputValidator()
        self.availability_collector = availability_collector or AvailabilityCollector()
        self.item_decomposer = item_decomposer or ItemDecomposer()
        self.capacity_solver = capacity_solver or CapacitySolver()
        self.reconstructor = reconstructor or AllocationReconstructor()

    def allocate(
        self,
        hotel: Optional[Hotel],
        date_range: DateRange,
        num_people: int,
    ) -> AllocationResult:
        """Propose the fewest rooms that can house num_people for every night.

        Args:
            hotel: Hotel to allocate in (None is reported as unknown)
            date_range: Nights of the stay
            num_people: Headcount to house

        Returns:
            AllocationResult with rooms in fill order, or a failure message
        """
        validation = self.input_validator.validate(hotel, num_people)
        if not validation.ok:
            return validation.error_result

        type_availability = self.availability_collector.collect(
            hotel, date_range, self.availability
        )

        max_capacity = sum(
            entry.room_type.size * entry.available for entry in type_availability
        )
        if max_capacity < num_people:
            logger.info(
                "Not enough capacity for request",
                hotel_id=hotel.id,
                num_people=num_people,
                max_capacity=max_capacity,
            )
            return AllocationResult.failure(NOT_ENOUGH_CAPACITY)

        items = self.item_decomposer.build(type_availability)

        solved = self.capacity_solver.solve(items, hotel, num_people)
        if not solved.success:
            logger.error(
                "Capacity solver failed despite sufficient capacity",
                hotel_id=hotel.id,
                num_people=num_people,
                error=solved.error_message,
            )
            return AllocationResult.failure(UNEXPECTED_FAILURE)

        try:
            chosen_counts = self.reconstructor.reconstruct(
                solved.parent, items, solved.best_capacity
            )
        except (IndexError, ReconstructionError) as e:
            logger.error(
                "Failed to reconstruct allocation",
                hotel_id=hotel.id,
                num_people=num_people,
                error=str(e),
                exc_info=True,
            )
            return AllocationResult.failure(UNEXPECTED_FAILURE)

        available_by_code: dict[str, int] = {}
        for entry in type_availability:
            code = entry.room_type.code.upper()
            available_by_code[code] = available_by_code.get(code, 0) + entry.available
        for code, count in chosen_counts.items():
            if count > available_by_code.get(code.upper(), 0):
                logger.error(
                    "Allocation uses more rooms than are available",
                    hotel_id=hotel.id,
                    room_type=code,
                    chosen=count,
                    available=available_by_code.get(code.upper(), 0),
                )
                return AllocationResult.failure(UNEXPECTED_FAILURE)

        rooms = self.reconstructor.build_allocated_rooms(hotel, chosen_counts, num_people)
        if rooms is None:
            return AllocationResult.failure(UNEXPECTED_FAILURE)

        logger.info(
            "Allocation completed",
            hotel_id=hotel.id,
            num_people=num_people,
            nights=len(date_range),
            rooms=len(rooms),
            partial_rooms=sum(1 for room in rooms if room.is_partial),
        )
        return AllocationResult.ok(rooms)
