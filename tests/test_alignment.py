from flexacc.alignment import AlignmentCache, align_lines
from flexacc.models import AlignmentResult


def test_align_equal_length_lines():
    assert align_lines("abc", "abd") == AlignmentResult(
        min_edit_dist=1, substring_pos=0, substring_length=3, length_diff=0
    )


def test_align_finds_candidate_inside_longer_reference():
    res = align_lines("xxhello", "hello")
    assert res.min_edit_dist == 0
    assert res.substring_pos == 2
    assert res.substring_length == 5
    assert res.length_diff == 2


def test_align_finds_reference_inside_longer_candidate():
    res = align_lines("world", "hello world")
    assert res.min_edit_dist == 0
    assert res.substring_pos == 6
    assert res.substring_length == 5
    assert res.length_diff == 6


def test_align_ties_keep_leftmost_window():
    res = align_lines("ab", "abab")
    assert res.min_edit_dist == 0
    assert res.substring_pos == 0


def test_align_legacy_bounds_use_one_short_window():
    corrected = align_lines("hello", "xhello")
    legacy = align_lines("hello", "xhello", legacy_bounds=True)

    assert (corrected.min_edit_dist, corrected.substring_pos) == (0, 1)
    # "hell" is the best four-character window
    assert (legacy.min_edit_dist, legacy.substring_pos) == (1, 1)
    assert legacy.substring_length == 5


def test_cache_computes_each_pair_once():
    cache = AlignmentCache()
    first = cache.get("hello", "hzllo")
    second = cache.get("hello", "hzllo")

    assert first is second
    assert cache.misses == 1
    assert cache.hits == 1
    assert len(cache) == 1


def test_cache_keys_are_ordered_pairs():
    cache = AlignmentCache()
    cache.get("abc", "abcd")
    cache.get("abcd", "abc")

    assert len(cache) == 2
    assert ("abc", "abcd") in cache
    assert cache.stats() == {"entries": 2, "hits": 0, "misses": 2}
