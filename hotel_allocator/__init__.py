"""Hotel room availability and allocation engine."""
