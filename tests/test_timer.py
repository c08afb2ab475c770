from brickbreak.timer import Timer


def _fake_clock(values):
    return iter(values).__next__


def test_initial_state_before_any_check():
    timer = Timer(_fake_clock([5]), ticks_per_second=1000)
    assert timer.delta_time == 0.0
    assert timer.frames_per_second == 0


def test_delta_and_fps_from_ticks():
    timer = Timer(_fake_clock([0, 10]), ticks_per_second=1000)
    timer.check_time()
    assert abs(timer.delta_time - 0.01) < 1e-12
    assert timer.frames_per_second == 100


def test_successive_checks_measure_from_previous_sample():
    timer = Timer(_fake_clock([0, 10, 30]), ticks_per_second=1000)
    timer.check_time()
    first = timer.delta_time
    timer.check_time()
    assert timer.delta_time > first
    assert abs(timer.delta_time * timer.frames_per_second - 1.0) < 1e-9


def test_backwards_clock_is_clamped_to_zero():
    timer = Timer(_fake_clock([100, 50]), ticks_per_second=1000)
    timer.check_time()
    assert timer.delta_time == 0.0


def test_no_elapsed_time():
    timer = Timer(_fake_clock([7, 7]), ticks_per_second=1000)
    timer.check_time()
    assert timer.delta_time == 0.0
    assert timer.frames_per_second == 0


def test_real_clock_is_non_negative():
    timer = Timer()
    timer.check_time()
    assert timer.delta_time >= 0.0
    assert timer.seconds_per_tick * timer.ticks_per_second == 1.0