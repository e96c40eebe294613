from flexacc.alignment import AlignmentCache
from flexacc.models import CoefficientTuple
from flexacc.sweep import COEFFICIENT_GRID, coefficient_grid, sweep


def test_coefficient_grid_order_and_size():
    assert len(COEFFICIENT_GRID) == 768
    assert len(set(COEFFICIENT_GRID)) == 768
    assert COEFFICIENT_GRID[0] == CoefficientTuple(15, 0, 0, 0)
    assert COEFFICIENT_GRID[1] == CoefficientTuple(15, 0, 0, 1)
    assert COEFFICIENT_GRID[-1] == CoefficientTuple(30, 21, 3, 5)
    assert list(COEFFICIENT_GRID) == coefficient_grid()


def test_sweep_finds_perfect_match_for_reordered_lines():
    cache = AlignmentCache()
    outcome = sweep("abc\ndef", "def\nabc", cache)

    assert outcome.best_accuracy == 1.0
    assert outcome.best_coefficients == COEFFICIENT_GRID[0]
    assert outcome.last_trial.reference_char_count == 6
    assert outcome.last_trial.candidate_char_count == 6
    assert outcome.metrics.trials == 768


def test_sweep_reuses_alignments_across_trials():
    cache = AlignmentCache()
    outcome = sweep("abc\ndef", "def\nabc", cache)

    # four distinct line pairs, aligned once for all trials
    assert cache.misses == 4
    assert len(cache) == 4
    assert cache.hits > 0
    assert outcome.metrics.cache_entries == 4


def test_sweep_reports_counts_of_last_trial():
    grid = [CoefficientTuple(15, 0, 0, 0), CoefficientTuple(30, 21, 3, 5)]
    outcome = sweep("HELLO WORLD", "HELLO\nWORLD", AlignmentCache(), grid=grid)

    assert outcome.best_accuracy == 1.0
    assert outcome.last_trial.reference_char_count == 11
    assert outcome.last_trial.candidate_char_count == 10


def test_sweep_with_empty_grid():
    outcome = sweep("abc", "abc", AlignmentCache(), grid=())

    assert outcome.best_accuracy == 0.0
    assert outcome.best_coefficients is None
    assert outcome.last_trial is None
