"""Half-open date ranges and the yyyyMMdd date syntax used by commands."""

from datetime import date, datetime, timedelta
from typing import Iterator


def parse_strict_date(text: str) -> date:
    """Parse exactly eight digits in yyyyMMdd format.

    Raises:
        ValueError: If the text is blank, not eight digits, or not a real date
    """
    if not text or not text.strip():
        raise ValueError("Empty date string.")
    if len(text) != 8 or not text.isdigit():
        raise ValueError(f"Invalid date format '{text}'. Expected yyyyMMdd.")
    return datetime.strptime(text, "%Y%m%d").date()


class DateRange:
    """Half-open interval of nights, [start, end_exclusive).

    An empty range (start == end_exclusive) is legal and has no nights.
    """

    __slots__ = ("start", "end_exclusive")

    def __init__(self, start: date, end_exclusive: date):
        if isinstance(start, datetime):
            start = start.date()
        if isinstance(end_exclusive, datetime):
            end_exclusive = end_exclusive.date()
        if end_exclusive < start:
            raise ValueError("DateRange end must not be before start")
        self.start = start
        self.end_exclusive = end_exclusive

    @classmethod
    def parse(cls, token: str) -> "DateRange":
        """Parse a command date token.

        ``20240901`` is the single night of 1 Sep; ``20240901-20240903`` covers
        the nights of 1, 2 and 3 Sep (both ends inclusive).

        Raises:
            ValueError: If the token is malformed or the range is reversed
        """
        token = token.strip()
        if "-" in token:
            parts = [part.strip() for part in token.split("-") if part.strip()]
            if len(parts) != 2:
                raise ValueError("Range must be two dates joined by '-'.")
            start = parse_strict_date(parts[0])
            end_inclusive = parse_strict_date(parts[1])
            if end_inclusive < start:
                raise ValueError("Range end is before start.")
            return cls(start, end_inclusive + timedelta(days=1))

        single = parse_strict_date(token)
        return cls(single, single + timedelta(days=1))

    def nights(self) -> Iterator[date]:
        """Yield each night in the range; calling again restarts the sequence."""
        night = self.start
        while night < self.end_exclusive:
            yield night
            night += timedelta(days=1)

    def __len__(self) -> int:
        return (self.end_exclusive - self.start).days

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return self.start == other.start and self.end_exclusive == other.end_exclusive

    def __hash__(self) -> int:
        return hash((self.start, self.end_exclusive))

    def __repr__(self) -> str:
        return f"DateRange({self.start.isoformat()}, {self.end_exclusive.isoformat()})"
