"""Binary splitting of room counts into knapsack items."""

from hotel_allocator.models.allocation import KnapsackItem, TypeAvailability
from hotel_allocator.services.allocation.base import ItemDecomposerBase


class ItemDecomposer(ItemDecomposerBase):
    """Splits N available rooms of a type into chunks of 1, 2, 4, ...

    The last chunk is truncated to whatever remains. Every count from 0 to N
    is a subset sum of the chunks, so a 0/1 knapsack over O(log N) items is
    as exact as one over N single rooms.
    """

    def build(self, type_availability: list[TypeAvailability]) -> list[KnapsackItem]:
        items = []
        for entry in type_availability:
            remaining = entry.available
            chunk = 1
            while remaining > 0:
                take = min(chunk, remaining)
                items.append(
                    KnapsackItem(
                        type_code=entry.room_type.code,
                        count=take,
                        capacity=take * entry.room_type.size,
                    )
                )
                remaining -= take
                chunk <<= 1
        return items
