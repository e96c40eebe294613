"""
Flex character accuracy.

Accuracy measure based on edit distance that reduces the impact of the
reading order of text blocks. Lines of the result are greedily aligned with
lines of the ground truth before edit distances are summed, so it is always
greater than or equal to the plain character accuracy.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..alignment import AlignmentCache
from ..lines import strip_line_breaks
from ..metrics import SweepMetrics
from ..models import CharacterAccuracyResult, CostFunction, FlexCharacterAccuracyResult
from ..settings import get_settings
from ..sweep import COEFFICIENT_GRID, sweep
from .base import EditDistanceEvaluator
from .character import CharacterAccuracy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlexEvaluation:
    """Flex result together with the baseline it was floored at.

    ``sweep_metrics`` is None when both texts are empty and no sweep ran.
    """
    result: FlexCharacterAccuracyResult
    baseline: CharacterAccuracyResult
    sweep_metrics: Optional[SweepMetrics] = None


class FlexCharacterAccuracy(EditDistanceEvaluator):
    """
    Reading-order tolerant character accuracy.

    Default cost function is (ins, del, subst) = (1, 1, 1).
    """

    def __init__(
        self,
        cost_function: CostFunction = CostFunction.INS1_DEL1_SUBST1,
        legacy_bounds: bool = False,
        name: Optional[str] = None,
    ):
        super().__init__(cost_function, name)
        self.legacy_bounds = legacy_bounds

    def evaluate(self, reference: str, candidate: str) -> FlexCharacterAccuracyResult:
        return self.evaluate_detailed(reference, candidate).result

    def evaluate_detailed(self, reference: str, candidate: str) -> FlexEvaluation:
        self.validate_input(reference, candidate)

        # Plain character accuracy is the floor
        baseline = CharacterAccuracy(self.cost_function).evaluate(
            strip_line_breaks(reference), strip_line_breaks(candidate)
        )
        accuracy = baseline.accuracy
        reference_chars = baseline.reference_char_count
        candidate_chars = baseline.candidate_char_count
        metrics = None

        if reference or candidate:
            cache = AlignmentCache(self.cost_function, self.legacy_bounds)
            outcome = sweep(
                reference,
                candidate,
                cache,
                deletion_penalty=self.cost_function.deletion_penalty,
                grid=COEFFICIENT_GRID,
            )
            accuracy = max(accuracy, outcome.best_accuracy)
            reference_chars = outcome.last_trial.reference_char_count
            candidate_chars = outcome.last_trial.candidate_char_count
            metrics = outcome.metrics
            logger.debug(
                "%s: baseline %.4f, flex %.4f with %s (%s)",
                self.name,
                baseline.accuracy,
                outcome.best_accuracy,
                outcome.best_coefficients,
                outcome.metrics.summary(),
            )

        result = FlexCharacterAccuracyResult(
            accuracy=min(1.0, max(0.0, accuracy)),
            reference_char_count=reference_chars,
            candidate_char_count=candidate_chars,
        )
        return FlexEvaluation(result=result, baseline=baseline, sweep_metrics=metrics)


def flex_character_accuracy(
    reference: str,
    candidate: str,
    cost_function: Optional[CostFunction] = None,
) -> FlexCharacterAccuracyResult:
    """Evaluate with a new evaluator; defaults come from the settings."""
    settings = get_settings()
    evaluator = FlexCharacterAccuracy(
        cost_function or settings.cost_function,
        legacy_bounds=settings.legacy_bounds,
    )
    return evaluator.evaluate(reference, candidate)
