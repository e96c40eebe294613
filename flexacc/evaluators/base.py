"""
Base interface for text evaluators.

An evaluator compares a ground truth text with a result text and returns a
result model. Evaluators expose their configurable options as a mapping of
option name to string value.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel

from ..errors import InvalidArgumentError
from ..models import CostFunction


class TextEvaluator(ABC):
    """
    Abstract base class for all text evaluators.

    Subclasses implement evaluate() and register their options in
    ``self._options``.
    """

    def __init__(self, name: Optional[str] = None):
        """
        Initialize the evaluator.

        Args:
            name: Optional evaluator name for logging/debugging
        """
        self.name = name or self.__class__.__name__
        self._options: dict[str, str] = {}

    @abstractmethod
    def evaluate(self, reference: str, candidate: str) -> BaseModel:
        """
        Compare a result text against the ground truth.

        Args:
            reference: Ground truth text
            candidate: Result text (e.g. OCR output)

        Returns:
            Result model of this evaluator

        Raises:
            InvalidArgumentError: If an input is not a text value
        """

    @property
    def options(self) -> dict[str, str]:
        """Copy of the current evaluation options."""
        return dict(self._options)

    def set_option(self, name: str, value: str) -> None:
        if name not in self._options:
            raise InvalidArgumentError(f"{self.name} has no option '{name}'")
        self._options[name] = value

    def validate_input(self, reference, candidate) -> None:
        for label, value in (("reference", reference), ("candidate", candidate)):
            if value is None:
                raise InvalidArgumentError(f"{label} text must not be None")
            if not isinstance(value, str):
                raise InvalidArgumentError(
                    f"{label} text must be str, got {type(value).__name__}"
                )


class EditDistanceEvaluator(TextEvaluator):
    """Evaluator built on edit distance with a selectable cost function."""

    OPT_COST_FUNCTION = "CostFunction"

    def __init__(
        self,
        cost_function: CostFunction = CostFunction.INS1_DEL1_SUBST1,
        name: Optional[str] = None,
    ):
        super().__init__(name)
        self.cost_function = CostFunction.INS1_DEL1_SUBST1
        self._options[self.OPT_COST_FUNCTION] = self.cost_function.key
        self.set_cost_function(cost_function)

    def set_cost_function(self, cost_function: CostFunction) -> None:
        """Change the cost function and keep the options in sync."""
        if not isinstance(cost_function, CostFunction):
            cost_function = CostFunction.from_key(cost_function)
        self.cost_function = cost_function
        self._options[self.OPT_COST_FUNCTION] = cost_function.key

    def set_option(self, name: str, value: str) -> None:
        if name == self.OPT_COST_FUNCTION:
            self.set_cost_function(CostFunction.from_key(value))
            return
        super().set_option(name, value)
