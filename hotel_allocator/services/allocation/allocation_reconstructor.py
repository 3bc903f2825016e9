"""Back-tracking of the capacity DP into concrete rooms."""

from typing import Optional

from structlog import get_logger

from hotel_allocator.models.allocation import AllocatedRoom, KnapsackItem, ParentEntry
from hotel_allocator.models.hotel import Hotel
from hotel_allocator.services.allocation.base import AllocationReconstructorBase

logger = get_logger(__name__)


class ReconstructionError(RuntimeError):
    """Raised when the back-pointer table is internally inconsistent."""

    pass


class AllocationReconstructor(AllocationReconstructorBase):
    """Recovers per-type room counts and fills rooms biggest first."""

    def reconstruct(
        self,
        parent: list[list[ParentEntry]],
        items: list[KnapsackItem],
        best_capacity: int,
    ) -> dict[str, int]:
        """Walk the items from last to first, following back-pointers.

        At each item's row a non-sentinel entry at the current capacity means
        the item was taken; the walk then moves to the entry's previous
        capacity. A consistent table ends the walk at capacity 0.

        Args:
            parent: One back-pointer row per item, from the solver
            items: The items the rows index into
            best_capacity: Capacity the solver selected

        Returns:
            Room count per upper-cased room type code

        Raises:
            IndexError: If best_capacity is outside the table
            ReconstructionError: If an entry points at a missing item or the
                walk does not end at capacity 0
        """
        # Without rows only capacity 0 is addressable
        width = len(parent[0]) if parent else 1
        if not 0 <= best_capacity < width:
            raise IndexError(
                f"best_capacity {best_capacity} outside parent table of width {width}"
            )

        chosen_counts: dict[str, int] = {}
        current = best_capacity
        for idx in range(len(parent) - 1, -1, -1):
            if current == 0:
                break
            entry = parent[idx][current]
            if entry.is_sentinel:
                continue
            if entry.item_index != idx or not 0 <= entry.item_index < len(items):
                raise ReconstructionError(
                    f"Parent entry at capacity {current} in row {idx} references item "
                    f"{entry.item_index}, but only {len(items)} items exist"
                )
            if not 0 <= entry.previous_capacity <= current:
                raise ReconstructionError(
                    f"Parent entry at capacity {current} in row {idx} points forward "
                    f"to capacity {entry.previous_capacity}"
                )
            item = items[entry.item_index]
            code = item.type_code.upper()
            chosen_counts[code] = chosen_counts.get(code, 0) + item.count
            current = entry.previous_capacity

        if current != 0:
            raise ReconstructionError(
                f"Back-tracking stopped at capacity {current} instead of 0"
            )
        return chosen_counts

    def build_allocated_rooms(
        self,
        hotel: Hotel,
        chosen_counts: dict[str, int],
        num_people: int,
    ) -> Optional[list[AllocatedRoom]]:
        """Place the headcount into the chosen rooms, largest rooms first.

        Rooms are filled to capacity until fewer people remain than the next
        room holds; that room is marked partial and filling stops. Rooms left
        over once everyone is placed are not returned.

        Args:
            hotel: Hotel the counts refer to
            chosen_counts: Rooms per room type code
            num_people: Headcount to place

        Returns:
            Rooms in fill order, or None if a code is unknown to the hotel or
            the rooms cannot hold everyone
        """
        if num_people == 0:
            return []

        instances: list[tuple[str, int]] = []
        for code, count in chosen_counts.items():
            room_type = hotel.get_room_type(code)
            if room_type is None:
                logger.error(
                    "Chosen room type missing from hotel",
                    hotel_id=hotel.id,
                    room_type=code,
                )
                return None
            instances.extend([(code, room_type.size)] * count)

        instances.sort(key=lambda instance: instance[1], reverse=True)

        remaining = num_people
        allocated: list[AllocatedRoom] = []
        for code, capacity in instances:
            if remaining <= 0:
                break
            if remaining >= capacity:
                allocated.append(AllocatedRoom(room_type_code=code, is_partial=False))
                remaining -= capacity
            else:
                allocated.append(AllocatedRoom(room_type_code=code, is_partial=True))
                remaining = 0

        if remaining > 0:
            logger.error(
                "Chosen rooms cannot hold everyone",
                hotel_id=hotel.id,
                num_people=num_people,
                unplaced=remaining,
            )
            return None
        return allocated
