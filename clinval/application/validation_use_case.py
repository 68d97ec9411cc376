"""Validation run use case.

Selects the checks for a request, evaluates each one and collects the
results into a ValidationSummary. Progress goes through the logger port.
"""

from collections.abc import Callable, Sequence

from ..domain.entities.validation_check import ValidationCheck
from ..domain.services.check_catalog import FUNCTIONS, default_checks
from ..domain.services.check_evaluator import evaluate_check
from .models import ValidationRequest, ValidationSummary
from .ports.services import LoggerPort


class ValidationUseCase:
    pass

    def __init__(
        self,
        logger: LoggerPort,
        check_provider: Callable[[], Sequence[ValidationCheck]] = default_checks,
    ) -> None:
        super().__init__()
        self.logger = logger
        self._check_provider = check_provider

    def execute(self, request: ValidationRequest) -> ValidationSummary:
        checks = self._select_checks(request.functions)
        self.logger.log_run_start(
            request.package, request.version, len(checks), request.tolerance
        )
        summary = ValidationSummary(
            package=request.package,
            version=request.version,
            tolerance=request.tolerance,
        )
        for check in checks:
            self.logger.debug(f"Evaluating {check.call_signature()}")
            result = evaluate_check(check, request.tolerance)
            summary.results.append(result)
            self.logger.log_check_result(result)
        self.logger.log_run_complete(summary)
        return summary

    def _select_checks(
        self, functions: tuple[str, ...] | None
    ) -> list[ValidationCheck]:
        checks = list(self._check_provider())
        if not functions:
            return checks
        unknown = sorted(set(functions) - set(FUNCTIONS))
        if unknown:
            raise ValueError(f"Unknown function(s): {', '.join(unknown)}")
        wanted = set(functions)
        return [c for c in checks if c.function in wanted]
