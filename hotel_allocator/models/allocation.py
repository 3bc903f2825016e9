"""Allocation results and the intermediate records of the room optimizer."""

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from hotel_allocator.models.hotel import RoomType


class AllocatedRoom(BaseModel):
    """One room of the proposed allocation."""

    room_type_code: str = Field(alias="roomTypeCode")
    is_partial: bool = Field(default=False, alias="isPartial")

    class Config:
        frozen = True
        populate_by_name = True

    def __str__(self) -> str:
        return self.room_type_code + ("!" if self.is_partial else "")


class AllocationResult(BaseModel):
    """Outcome of an allocation request.

    On failure ``rooms`` is None and ``error_message`` explains why; on
    success ``rooms`` holds the rooms in fill order.
    """

    success: bool
    error_message: Optional[str] = Field(None, alias="errorMessage")
    rooms: Optional[list[AllocatedRoom]] = None

    class Config:
        frozen = True
        populate_by_name = True

    @classmethod
    def ok(cls, rooms: list[AllocatedRoom]) -> "AllocationResult":
        return cls(success=True, error_message=None, rooms=rooms)

    @classmethod
    def failure(cls, message: str) -> "AllocationResult":
        return cls(success=False, error_message=message, rooms=None)


@dataclass(frozen=True)
class TypeAvailability:
    """Free rooms of one room type over the requested nights, clamped at 0."""

    room_type: RoomType
    available: int


@dataclass(frozen=True)
class KnapsackItem:
    """A chunk of ``count`` rooms of one type offering ``capacity`` beds."""

    type_code: str
    count: int
    capacity: int


@dataclass(frozen=True)
class ParentEntry:
    """Back-pointer of the capacity DP.

    ``SENTINEL`` (both fields -1) marks a cell the item did not reach,
    including capacity 0, which has no predecessor.
    """

    previous_capacity: int
    item_index: int

    SENTINEL: ClassVar["ParentEntry"]

    @property
    def is_sentinel(self) -> bool:
        return self.previous_capacity == -1 and self.item_index == -1


ParentEntry.SENTINEL = ParentEntry(-1, -1)


@dataclass(frozen=True)
class SolverResult:
    success: bool
    best_capacity: int
    parent: list[list[ParentEntry]] = field(default_factory=list)
    error_message: Optional[str] = None


@dataclass(frozen=True)
class ValidationOutcome:
    ok: bool
    error_result: Optional[AllocationResult] = None
