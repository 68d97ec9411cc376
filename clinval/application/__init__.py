"""Application layer: orchestrates validation runs."""

from .models import ValidationRequest, ValidationSummary
from .validation_use_case import ValidationUseCase

__all__ = [
    "ValidationRequest",
    "ValidationSummary",
    "ValidationUseCase",
]
