class ClinvalError(Exception):
    pass


class PreconditionViolationError(ClinvalError, ValueError):
    """Raised when an input fails a guard condition before computation.

    Attributes:
        argument: Name of the argument whose check failed
    """

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.argument = argument
