"""Minimum room count covering a headcount, by 0/1 knapsack DP."""

from structlog import get_logger

from hotel_allocator.models.allocation import KnapsackItem, ParentEntry, SolverResult
from hotel_allocator.models.hotel import Hotel
from hotel_allocator.services.allocation.base import CapacitySolverBase

logger = get_logger(__name__)

INFEASIBLE = float("inf")
NO_ALLOCATION = "Unable to find an allocation (unexpected)."


class CapacitySolver(CapacitySolverBase):
    """Dynamic program over person-capacity, minimising rooms used.

    ``dp[c]`` is the fewest rooms whose capacities sum to exactly ``c``. The
    table stops at ``num_people + largest room size``: the room that tips
    the total over the headcount adds at most one room's worth of slack, and
    any overshoot past the top is folded into the last cell.

    Back-pointers are kept per item: ``parent[idx][c]`` is set only when
    item ``idx`` improved ``dp[c]`` during its own pass, so a later item
    can never hide which earlier items built a capacity.
    """

    def solve(
        self,
        items: list[KnapsackItem],
        hotel: Hotel,
        num_people: int,
    ) -> SolverResult:
        """Solve for the cheapest capacity in [num_people, cap_max].

        Args:
            items: Knapsack items, each usable at most once
            hotel: Hotel the items belong to, for the largest room size
            num_people: Headcount to cover

        Returns:
            SolverResult with the chosen capacity and one back-pointer row
            per item
        """
        cap_max = num_people + hotel.max_room_size
        dp = [INFEASIBLE] * (cap_max + 1)
        dp[0] = 0
        parent = [[ParentEntry.SENTINEL] * (cap_max + 1) for _ in items]

        for idx, item in enumerate(items):
            row = parent[idx]
            # Descending so each item is applied at most once
            for cap in range(cap_max, -1, -1):
                if dp[cap] == INFEASIBLE:
                    continue
                new_cap = min(cap_max, cap + item.capacity)
                new_rooms = dp[cap] + item.count
                if new_rooms < dp[new_cap]:
                    dp[new_cap] = new_rooms
                    row[new_cap] = ParentEntry(cap, idx)

        best_cap = -1
        best_rooms = INFEASIBLE
        # Strict comparison keeps the smallest capacity on ties
        for cap in range(num_people, cap_max + 1):
            if dp[cap] < best_rooms:
                best_rooms = dp[cap]
                best_cap = cap

        if best_cap == -1:
            logger.error(
                "No reachable capacity covers the headcount",
                hotel_id=hotel.id,
                num_people=num_people,
                items=len(items),
                cap_max=cap_max,
            )
            return SolverResult(
                success=False,
                best_capacity=-1,
                parent=parent,
                error_message=NO_ALLOCATION,
            )

        logger.debug(
            "Capacity solved",
            hotel_id=hotel.id,
            num_people=num_people,
            best_capacity=best_cap,
            rooms=best_rooms,
        )
        return SolverResult(success=True, best_capacity=best_cap, parent=parent)
