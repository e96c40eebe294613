from .base import EditDistanceEvaluator, TextEvaluator
from .character import CharacterAccuracy
from .flex import FlexCharacterAccuracy, FlexEvaluation, flex_character_accuracy

__all__ = [
    "TextEvaluator",
    "EditDistanceEvaluator",
    "CharacterAccuracy",
    "FlexCharacterAccuracy",
    "FlexEvaluation",
    "flex_character_accuracy",
]
