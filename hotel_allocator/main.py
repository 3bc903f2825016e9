"""Main entry point for the hotel room allocator."""

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

from hotel_allocator.commands import (
    AvailabilityCommandHandler,
    RoomTypesCommandHandler,
    parse_availability,
    parse_room_types,
)
from hotel_allocator.config import configure_logging, get_logger, settings
from hotel_allocator.repositories import BookingRepository, HotelRepository
from hotel_allocator.services import AllocationService, AvailabilityService, BookingIndex

logger = get_logger(__name__)

BANNER = """Type commands. Blank line to exit. Examples:
  Availability(H1, 20240901, SGL)
  Availability(H1, 20240901-20240903, DBL)
  RoomTypes(H1, 20240904, 3)
"""


class App:
    """Interactive command loop over the availability and allocation handlers."""

    def __init__(
        self,
        availability_handler: AvailabilityCommandHandler,
        room_types_handler: RoomTypesCommandHandler,
    ):
        self.availability_handler = availability_handler
        self.room_types_handler = room_types_handler

    @classmethod
    def from_files(cls, hotels_file: str | Path, bookings_file: str | Path) -> "App":
        """Load data files and wire the services together."""
        hotels = HotelRepository(hotels_file)
        bookings = BookingRepository(bookings_file)

        index = BookingIndex(bookings.get_all())
        availability = AvailabilityService(index)
        allocation = AllocationService(availability)

        return cls(
            AvailabilityCommandHandler(hotels, availability),
            RoomTypesCommandHandler(hotels, allocation),
        )

    def handle_line(self, line: str) -> str:
        """Run one command line and return the text to print."""
        command = parse_availability(line)
        if command is not None:
            try:
                return self.availability_handler.execute(
                    command.hotel_id, command.date_range, command.room_type
                )
            except Exception as e:
                logger.warning("Availability command failed", error=str(e), exc_info=True)
                return f"Error: {e}"

        command = parse_room_types(line)
        if command is not None:
            try:
                return self.room_types_handler.execute(
                    command.hotel_id, command.date_range, command.num_people
                )
            except Exception as e:
                logger.warning("RoomTypes command failed", error=str(e), exc_info=True)
                return f"Error: {e}"

        return "Error: unrecognized command or bad format."

    def run_interactive_loop(
        self,
        stdin: TextIO = sys.stdin,
        stdout: TextIO = sys.stdout,
    ) -> None:
        """Read commands until a blank line or end of input."""
        print(BANNER, file=stdout)
        while True:
            print("> ", end="", file=stdout, flush=True)
            line = stdin.readline()
            if not line or not line.strip():
                break
            print(self.handle_line(line), file=stdout)
        print("Exiting.", file=stdout)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Answer hotel room availability and allocation queries"
    )
    parser.add_argument(
        "--hotels",
        type=str,
        default=settings.data.hotels_file,
        help="Path to the hotels JSON file",
    )
    parser.add_argument(
        "--bookings",
        type=str,
        default=settings.data.bookings_file,
        help="Path to the bookings JSON file",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Load data and run the interactive loop.

    Returns:
        Process exit code
    """
    args = parse_args(argv)
    logger.info(
        "Starting hotel allocator",
        environment=settings.environment,
        debug=settings.debug,
        hotels_file=args.hotels,
        bookings_file=args.bookings,
    )

    for label, path in (("Hotels", args.hotels), ("Bookings", args.bookings)):
        if not Path(path).is_file():
            print(f"{label} file not found: {path}")
            return 1

    try:
        app = App.from_files(args.hotels, args.bookings)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Failed to load data", error=str(e))
        print(f"Fatal error: {e}")
        return 1

    app.run_interactive_loop()
    return 0


def run() -> int:
    """Console script entry point."""
    configure_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run())
