"""
Line pair alignment.

Finds where the shorter line of a pair best fits inside the longer one and
memoizes the result for the duration of one evaluation call.
"""

from .edit_distance import edit_distance
from .models import AlignmentResult, CostFunction


def align_lines(
    reference: str,
    candidate: str,
    cost_function: CostFunction = CostFunction.INS1_DEL1_SUBST1,
    legacy_bounds: bool = False,
) -> AlignmentResult:
    """
    Align the shorter of two lines with every window of the longer one.

    Args:
        reference: Ground truth line
        candidate: Result line
        cost_function: Edit operation costs
        legacy_bounds: Use windows one character shorter than the shorter
            line, as the historic implementation did

    Returns:
        AlignmentResult with the smallest distance; the leftmost window wins ties
    """
    if len(reference) == len(candidate):
        dist = edit_distance(reference, candidate, cost_function)
        return AlignmentResult(
            min_edit_dist=dist,
            substring_pos=0,
            substring_length=len(reference),
            length_diff=0,
        )

    reference_is_longer = len(reference) > len(candidate)
    longer, shorter = (reference, candidate) if reference_is_longer else (candidate, reference)
    length_diff = len(longer) - len(shorter)
    window = len(shorter) - 1 if legacy_bounds else len(shorter)

    min_dist = None
    min_pos = 0
    for pos in range(length_diff + 1):
        part = longer[pos:pos + window]
        if reference_is_longer:
            dist = edit_distance(part, candidate, cost_function)
        else:
            dist = edit_distance(reference, part, cost_function)
        if min_dist is None or dist < min_dist:
            min_dist = dist
            min_pos = pos

    return AlignmentResult(
        min_edit_dist=min_dist,
        substring_pos=min_pos,
        substring_length=len(shorter),
        length_diff=length_diff,
    )


class AlignmentCache:
    """
    Memoizes line pair alignments for one evaluation call.

    Alignments do not depend on the ranking coefficients, so every
    coefficient trial of a sweep can share the same cache.
    """

    def __init__(
        self,
        cost_function: CostFunction = CostFunction.INS1_DEL1_SUBST1,
        legacy_bounds: bool = False,
    ):
        self.cost_function = cost_function
        self.legacy_bounds = legacy_bounds
        self._entries: dict[tuple[str, str], AlignmentResult] = {}
        self.hits = 0
        self.misses = 0

    def get(self, reference: str, candidate: str) -> AlignmentResult:
        key = (reference, candidate)
        result = self._entries.get(key)
        if result is not None:
            self.hits += 1
            return result
        self.misses += 1
        result = align_lines(reference, candidate, self.cost_function, self.legacy_bounds)
        self._entries[key] = result
        return result

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return key in self._entries

    def stats(self) -> dict:
        return {"entries": len(self._entries), "hits": self.hits, "misses": self.misses}
