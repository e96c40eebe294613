"""Reading-order tolerant character accuracy for OCR evaluation."""

from .errors import EvaluationError, InvalidArgumentError
from .evaluators import CharacterAccuracy, FlexCharacterAccuracy, flex_character_accuracy
from .models import (
    CharacterAccuracyResult,
    CostFunction,
    FlexCharacterAccuracyResult,
)

__version__ = "0.1.0"

__all__ = [
    "CharacterAccuracy",
    "CharacterAccuracyResult",
    "CostFunction",
    "EvaluationError",
    "FlexCharacterAccuracy",
    "FlexCharacterAccuracyResult",
    "InvalidArgumentError",
    "flex_character_accuracy",
]
