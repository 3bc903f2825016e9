"""Pydantic model for hotel bookings."""

from datetime import date, timedelta
from typing import Iterator

from pydantic import Field, field_validator, model_validator

from hotel_allocator.models.base import CaseInsensitiveModel
from hotel_allocator.models.date_range import parse_strict_date


class Booking(CaseInsensitiveModel):
    """A booked room of a given type for the nights [arrival, departure)."""

    hotel_id: str = Field(alias="hotelId")
    arrival: date
    departure: date
    room_type: str = Field(alias="roomType")
    room_rate: str = Field(default="", alias="roomRate")

    @field_validator("hotel_id")
    @classmethod
    def hotel_id_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Booking missing hotelId.")
        return v

    @field_validator("arrival", "departure", mode="before")
    @classmethod
    def parse_compact_date(cls, v):
        """Parse yyyyMMdd strings; other values are left to pydantic."""
        if isinstance(v, str):
            return parse_strict_date(v)
        return v

    @model_validator(mode="after")
    def departure_after_arrival(self) -> "Booking":
        if self.departure <= self.arrival:
            raise ValueError(
                f"Booking for hotel {self.hotel_id} has departure <= arrival."
            )
        return self

    class Config:
        extra = "allow"
        frozen = True
        populate_by_name = True

    def nights(self) -> Iterator[date]:
        """Yield every occupied night; the departure date is not included."""
        night = self.arrival
        while night < self.departure:
            yield night
            night += timedelta(days=1)
