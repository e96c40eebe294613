"""
Coefficient sweep.

Runs the greedy line matcher once per coefficient tuple of a fixed grid
and keeps the highest accuracy.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .alignment import AlignmentCache
from .lines import split_into_lines
from .matcher import match_lines
from .metrics import SweepMetrics, Timer
from .models import CoefficientTuple, TrialOutcome

logger = logging.getLogger(__name__)

EDIT_DIST_WEIGHTS = (15, 20, 25, 30)
LENGTH_DIFF_WEIGHTS = (0, 3, 6, 9, 12, 15, 18, 21)
OFFSET_WEIGHTS = (0, 1, 2, 3)
LENGTH_WEIGHTS = (0, 1, 2, 3, 4, 5)


def coefficient_grid() -> list[CoefficientTuple]:
    """All weight combinations, edit distance weight varying slowest."""
    return [
        CoefficientTuple(*combo)
        for combo in itertools.product(
            EDIT_DIST_WEIGHTS, LENGTH_DIFF_WEIGHTS, OFFSET_WEIGHTS, LENGTH_WEIGHTS
        )
    ]


COEFFICIENT_GRID: tuple[CoefficientTuple, ...] = tuple(coefficient_grid())


@dataclass
class SweepOutcome:
    """Best accuracy found by a sweep and the trial that ran last."""
    best_accuracy: float
    best_coefficients: Optional[CoefficientTuple]
    last_trial: Optional[TrialOutcome]
    metrics: SweepMetrics


def sweep(
    reference_text: str,
    candidate_text: str,
    cache: AlignmentCache,
    deletion_penalty: int = 1,
    grid: Sequence[CoefficientTuple] = COEFFICIENT_GRID,
) -> SweepOutcome:
    """
    Evaluate every coefficient tuple of ``grid`` on fresh line pools.

    Args:
        reference_text: Ground truth text (with line breaks)
        candidate_text: Result text (with line breaks)
        cache: Alignment cache shared by all trials of this call
        deletion_penalty: Cost per unmatched candidate character
        grid: Coefficient tuples to try, in order

    Returns:
        SweepOutcome; ``last_trial`` is None only for an empty grid
    """
    best_accuracy = 0.0
    best_coefficients = None
    last_trial = None

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Sweeping %d coefficient tuples over %d reference / %d candidate lines",
            len(grid),
            len(split_into_lines(reference_text)),
            len(split_into_lines(candidate_text)),
        )

    with Timer() as timer:
        for coefficients in grid:
            outcome = match_lines(
                split_into_lines(reference_text),
                split_into_lines(candidate_text),
                coefficients,
                cache,
                deletion_penalty,
            )
            if best_coefficients is None or outcome.accuracy > best_accuracy:
                best_accuracy = outcome.accuracy
                best_coefficients = coefficients
            last_trial = outcome

    metrics = SweepMetrics(
        trials=len(grid),
        duration_ms=timer.duration_ms,
        cache_entries=len(cache),
        cache_hits=cache.hits,
        cache_misses=cache.misses,
    )
    logger.debug("Sweep finished: %s", metrics.summary())

    return SweepOutcome(
        best_accuracy=best_accuracy,
        best_coefficients=best_coefficients,
        last_trial=last_trial,
        metrics=metrics,
    )
