"""Pydantic models for hotels, room types and room inventory."""

from typing import Optional

from pydantic import Field, field_validator

from hotel_allocator.models.base import CaseInsensitiveModel


class RoomType(CaseInsensitiveModel):
    """A bookable room category and how many people it sleeps."""

    code: str
    size: int = Field(gt=0, description="Room capacity in guests")
    description: str = ""
    amenities: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)

    @field_validator("code")
    @classmethod
    def code_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("room type code must not be blank")
        return v

    class Config:
        extra = "allow"
        frozen = True


class Room(CaseInsensitiveModel):
    """A physical room tagged with its room type code."""

    room_id: str = Field(default="", alias="roomId")
    room_type_code: str = Field(alias="roomType")

    class Config:
        extra = "allow"
        frozen = True
        populate_by_name = True


class Hotel(CaseInsensitiveModel):
    """Hotel with its ordered room types and room inventory.

    Room type codes are matched case-insensitively in every lookup.
    """

    id: str
    name: str = ""
    room_types: list[RoomType] = Field(alias="roomTypes")
    rooms: list[Room]

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("hotel id must not be blank")
        return v

    class Config:
        extra = "allow"
        frozen = True
        populate_by_name = True

    def get_room_count_for_type(self, room_type_code: str) -> int:
        """Count the rooms whose type matches the given code."""
        code = room_type_code.upper()
        return sum(1 for room in self.rooms if room.room_type_code.upper() == code)

    def get_room_type(self, code: str) -> Optional[RoomType]:
        """Look up a room type by code, or None if the hotel has no such type."""
        wanted = code.upper()
        for room_type in self.room_types:
            if room_type.code.upper() == wanted:
                return room_type
        return None

    @property
    def max_room_size(self) -> int:
        """Largest room type capacity, 0 when the hotel has no room types."""
        return max((room_type.size for room_type in self.room_types), default=0)
