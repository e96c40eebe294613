from flexacc.metrics import SweepMetrics, Timer


def test_sweep_metrics_to_dict_rounds_duration():
    metrics = SweepMetrics(trials=768, duration_ms=12.3456, cache_entries=4, cache_hits=10, cache_misses=4)

    assert metrics.to_dict() == {
        "trials": 768,
        "duration_ms": 12.35,
        "cache_entries": 4,
        "cache_hits": 10,
        "cache_misses": 4,
    }
    assert "768 trials" in metrics.summary()


def test_timer_measures_elapsed_time():
    with Timer() as timer:
        sum(range(1000))
    assert timer.duration_ms >= 0
    assert timer.end_time >= timer.start_time
