"""JSON array loading with pydantic validation.

Data files are read leniently: ``//`` and ``/* */`` comments and trailing
commas are accepted (JSON5), and object keys match model fields in any
case.
"""

from pathlib import Path
from typing import TypeVar

import json5
from pydantic import TypeAdapter, ValidationError
from structlog import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def load_json_list(path: str | Path, model: type[T], label: str) -> list[T]:
    """Load a JSON array file and validate each element as ``model``.

    Args:
        path: File to read
        model: Pydantic model for the elements
        label: Human readable name used in errors ("Hotels", "Bookings")

    Returns:
        Validated models in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or fails validation
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"{label} file not found: {path}")

    raw = path.read_text(encoding="utf-8")
    if not raw.strip():
        return []

    try:
        data = json5.loads(raw)
        items = TypeAdapter(list[model]).validate_python(data)
    except (ValueError, ValidationError) as e:
        logger.error(
            "Failed to parse data file",
            file=str(path),
            label=label,
            error=str(e),
        )
        raise ValueError(f"Invalid {label.lower()} file {path}: {str(e)}") from e

    logger.info("Loaded data file", file=str(path), label=label, count=len(items))
    return items
