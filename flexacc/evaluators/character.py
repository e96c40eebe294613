"""Plain character accuracy: one edit distance over the full texts."""

import logging

from ..edit_distance import edit_distance
from ..models import CharacterAccuracyResult
from .base import EditDistanceEvaluator

logger = logging.getLogger(__name__)


class CharacterAccuracy(EditDistanceEvaluator):
    """
    Order-sensitive accuracy ``1 - editDistance / len(reference)``, floored at 0.

    An empty reference scores 1.0 against an empty result and 0.0 otherwise.
    """

    def evaluate(self, reference: str, candidate: str) -> CharacterAccuracyResult:
        self.validate_input(reference, candidate)

        n = len(reference)
        if n == 0:
            accuracy = 1.0 if not candidate else 0.0
        else:
            dist = edit_distance(reference, candidate, self.cost_function)
            accuracy = max(0.0, (n - dist) / n)
            logger.debug("%s: edit distance %d over %d chars", self.name, dist, n)

        return CharacterAccuracyResult(
            accuracy=accuracy,
            reference_char_count=n,
            candidate_char_count=len(candidate),
        )
