"""
Greedy line matching.

Pairs reference lines with candidate lines by repeatedly taking the pair
with the lowest alignment penalty. Whatever is left of a longer line
around its matched window goes back into its pool, so a line merged or
split by the OCR engine can still be matched piecewise.
"""

import logging

from .alignment import AlignmentCache
from .models import CoefficientTuple, TrialOutcome

logger = logging.getLogger(__name__)


def _sort_by_length(lines: list[str]) -> None:
    # Longest first; stable for equal lengths
    lines.sort(key=len, reverse=True)


def _split_around(line: str, pos: int, length: int, legacy_bounds: bool) -> list[str]:
    """Return the trimmed, non-empty fragments left and right of a window."""
    fragments = []
    if pos > 0:
        left = line[:pos - 1] if legacy_bounds else line[:pos]
        fragments.append(left.strip())
    if pos + length < len(line):
        fragments.append(line[pos + length:].strip())
    return [f for f in fragments if f]


def match_lines(
    reference_lines: list[str],
    candidate_lines: list[str],
    coefficients: CoefficientTuple,
    cache: AlignmentCache,
    deletion_penalty: int = 1,
) -> TrialOutcome:
    """
    Run one greedy matching trial.

    Both line lists are consumed; pass fresh lists for every trial.

    Args:
        reference_lines: Ground truth lines
        candidate_lines: Result lines
        coefficients: Penalty weights used to rank line pairs
        cache: Alignment cache of the current evaluation call
        deletion_penalty: Cost per unmatched candidate character

    Returns:
        TrialOutcome with the accumulated edit distance and character counts
    """
    reference_chars = sum(len(line) for line in reference_lines)
    candidate_chars = sum(len(line) for line in candidate_lines)
    total = 0

    _sort_by_length(reference_lines)

    while reference_lines and candidate_lines:
        best = None
        best_penalty = None
        best_ref = best_cand = -1
        for i, ref_line in enumerate(reference_lines):
            for j, cand_line in enumerate(candidate_lines):
                result = cache.get(ref_line, cand_line)
                penalty = result.penalty(coefficients)
                if best_penalty is None or penalty < best_penalty:
                    best = result
                    best_penalty = penalty
                    best_ref, best_cand = i, j

        ref_line = reference_lines[best_ref]
        cand_line = candidate_lines[best_cand]
        if len(ref_line) > len(cand_line):
            reference_lines.extend(
                _split_around(ref_line, best.substring_pos, len(cand_line), cache.legacy_bounds)
            )
        elif len(cand_line) > len(ref_line):
            candidate_lines.extend(
                _split_around(cand_line, best.substring_pos, len(ref_line), cache.legacy_bounds)
            )

        del candidate_lines[best_cand]
        if best.min_edit_dist is None:
            # No usable alignment: the reference line counts as replaced.
            # align_lines always yields a distance; only other caches return None.
            total += len(ref_line)
        else:
            total += best.min_edit_dist
        del reference_lines[best_ref]

        _sort_by_length(reference_lines)

    if deletion_penalty > 0:
        for line in candidate_lines:
            total += len(line) * deletion_penalty
    for line in reference_lines:
        total += len(line)

    if logger.isEnabledFor(logging.DEBUG) and (reference_lines or candidate_lines):
        logger.debug(
            "Unmatched after trial %s: %d reference, %d candidate lines",
            tuple(coefficients), len(reference_lines), len(candidate_lines),
        )

    return TrialOutcome(
        total_edit_distance=total,
        reference_char_count=reference_chars,
        candidate_char_count=candidate_chars,
    )
