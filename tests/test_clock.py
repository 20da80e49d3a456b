from cogame.clock import Clock


def test_delta_starts_at_zero():
    clock = Clock(lambda: 10.0)
    assert clock.delta_time == 0.0


def test_refresh_measures_difference():
    readings = iter([1.0, 1.5, 4.0])
    clock = Clock(lambda: next(readings))
    assert clock.refresh() == 1.5 - 1.0
    assert clock.delta_time == 1.5 - 1.0
    clock.refresh()
    assert clock.delta_time == 4.0 - 1.5


def test_default_counter_is_monotonic():
    clock = Clock()
    assert clock.refresh() >= 0.0