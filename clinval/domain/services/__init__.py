"""Domain services for running validation checks."""

from .check_catalog import FUNCTIONS, default_checks, resolve_function
from .check_evaluator import evaluate_check

__all__ = [
    "FUNCTIONS",
    "default_checks",
    "evaluate_check",
    "resolve_function",
]
