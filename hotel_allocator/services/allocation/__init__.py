"""Stages of the room allocation engine."""

from .allocation_reconstructor import AllocationReconstructor, ReconstructionError
from .availability_collector import AvailabilityCollector
from .base import (
    AllocationReconstructorBase,
    AvailabilityCollectorBase,
    CapacitySolverBase,
    InputValidatorBase,
    ItemDecomposerBase,
)
from .capacity_solver import CapacitySolver
from .input_validator import InputValidator
from .item_decomposer import ItemDecomposer

__all__ = [
    "AllocationReconstructor",
    "AllocationReconstructorBase",
    "AvailabilityCollector",
    "AvailabilityCollectorBase",
    "CapacitySolver",
    "CapacitySolverBase",
    "InputValidator",
    "InputValidatorBase",
    "ItemDecomposer",
    "ItemDecomposerBase",
    "ReconstructionError",
]
