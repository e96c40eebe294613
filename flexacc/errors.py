"""Exceptions raised by the evaluators."""


class EvaluationError(Exception):
    """Base exception with machine-readable code for evaluation failures."""

    def __init__(self, message: str, *, error_code: str):
        super().__init__(message)
        self.error_code = error_code


class InvalidArgumentError(EvaluationError, ValueError):
    """Raised when an evaluator receives an unusable argument."""

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message, error_code="invalid_argument")
