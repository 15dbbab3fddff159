import time

import pytest

from cubedsphere import NullTimer, Timer


@pytest.fixture
def timer():
    return Timer()


@pytest.fixture
def null_timer():
    return NullTimer()


def test_start_stop(timer):
    timer.start("halo_copy")
    timer.stop("halo_copy")
    assert list(timer.times) == ["halo_copy"]
    assert timer.hits == {"halo_copy": 1}


def test_clock(timer):
    with timer.clock("halo_copy"):
        time.sleep(0.05)
    assert timer.times["halo_copy"] >= 0.05
    assert timer.hits["halo_copy"] == 1


def test_start_twice(timer):
    """cannot call start twice consecutively with no stop"""
    timer.start("halo_copy")
    with pytest.raises(ValueError, match="clock already started for 'halo_copy'"):
        timer.start("halo_copy")


def test_consecutive_clocks_accumulate(timer):
    with timer.clock("vertical_halo"):
        time.sleep(0.01)
    previous_time = timer.times["vertical_halo"]
    for _ in range(3):
        with timer.clock("vertical_halo"):
            time.sleep(0.01)
        assert timer.times["vertical_halo"] >= previous_time + 0.01
        previous_time = timer.times["vertical_halo"]
    assert timer.hits["vertical_halo"] == 4


def test_times_while_running_warns(timer):
    timer.start("halo_copy")
    with pytest.warns(RuntimeWarning, match="halo_copy"):
        timer.times


@pytest.mark.parametrize(
    "ops, result",
    [
        ([], True),
        (["enable"], True),
        (["disable"], False),
        (["disable", "enable"], True),
        (["disable", "disable"], False),
    ],
)
def test_enable_disable(timer, ops, result):
    for op in ops:
        getattr(timer, op)()
    assert timer.enabled == result


def test_cannot_disable_running_timer(timer):
    timer.start("halo_copy")
    with pytest.raises(RuntimeError):
        timer.disable()


def test_disabled_timer_does_not_add_time(timer):
    with timer.clock("halo_copy"):
        pass
    initial_time = timer.times["halo_copy"]
    timer.disable()
    with timer.clock("halo_copy"):
        time.sleep(0.01)
    with timer.clock("vertical_halo"):
        pass
    assert timer.times == {"halo_copy": initial_time}
    assert timer.hits == {"halo_copy": 1}


def test_reset(timer):
    with timer.clock("halo_copy"):
        pass
    timer.reset()
    assert timer.times == {}
    assert timer.hits == {}


def test_null_timer_is_disabled(null_timer):
    assert not null_timer.enabled
    with null_timer.clock("halo_copy"):
        pass
    assert null_timer.times == {}


def test_null_timer_cannot_be_enabled(null_timer):
    with pytest.raises(NotImplementedError):
        null_timer.enable()
