import pytest

from instrumentation.benchmarks.common import FrameIntervalSampler


def test_injected_timestamps_produce_expected_intervals(ticks, clock):
    sampler = FrameIntervalSampler(ticks, clock=clock)

    sampler.start()
    ticks.emit_many([0, 10000, 26000, 42000, 58000])

    assert sampler.intervals == [10000, 16000, 16000, 16000]
    assert sampler.dropped_frame_count == 0
    assert sampler.max_interval_us == 16000
    assert sampler.total_frame_count == 4


def test_default_jank_threshold_is_one_and_a_half_frame_budgets(ticks):
    sampler = FrameIntervalSampler(ticks)

    assert sampler.frame_budget_us == 16667
    assert sampler.jank_threshold_us == 25000


def test_single_long_interval_is_one_dropped_frame(ticks):
    jank = []
    sampler = FrameIntervalSampler(ticks, on_jank=jank.append)

    sampler.start()
    ticks.emit_many([0, 16000, 32000, 62000, 78000])

    assert sampler.intervals == [16000, 16000, 30000, 16000]
    assert sampler.dropped_frame_count == 1
    assert jank == [30000]


def test_interval_equal_to_threshold_is_not_dropped(ticks):
    sampler = FrameIntervalSampler(ticks)

    sampler.start()
    ticks.emit_many([0, 25000, 50001])

    assert sampler.dropped_frame_count == 1
    assert sampler.intervals == [25000, 25001]


def test_first_tick_only_seeds(ticks):
    sampler = FrameIntervalSampler(ticks)

    sampler.start()
    ticks.emit(123456)

    assert sampler.intervals == []
    assert sampler.total_frame_count == 0


def test_stop_computes_fps_from_elapsed_wall_clock(ticks, clock):
    # Window opens at 0 and closes at 2 s
    clock.push(0, 2000000)
    sampler = FrameIntervalSampler(ticks, clock=clock)

    sampler.start()
    # 3 normal frames and one 100 ms outlier
    ticks.emit_many([0, 10000, 20000, 30000, 130000])
    stats = sampler.stop()

    assert stats.total_frame_count == 4
    assert stats.elapsed_us == 2000000
    assert stats.actual_fps == pytest.approx(2.0)
    assert stats.average_interval_us == pytest.approx(32500)
    assert stats.jank_rate == pytest.approx(25.0)


def test_stop_when_idle_is_a_no_op(ticks):
    sampler = FrameIntervalSampler(ticks)

    assert sampler.stop() is None
    assert sampler.total_frame_count == 0
    assert sampler.dropped_frame_count == 0
    assert not sampler.is_sampling


def test_double_stop_does_not_refinalize(ticks, clock):
    clock.push(0, 1000000, 5000000)
    sampler = FrameIntervalSampler(ticks, clock=clock)

    sampler.start()
    ticks.emit_many([0, 16000, 32000])
    first = sampler.stop()
    second = sampler.stop()

    assert second is first
    assert sampler.total_frame_count == 2
    assert first.elapsed_us == 1000000


def test_ticks_after_stop_are_ignored(ticks):
    sampler = FrameIntervalSampler(ticks)

    sampler.start()
    ticks.emit_many([0, 16000])
    sampler.stop()

    # Subscription is gone, and a tick that was already queued is dropped too
    ticks.emit(32000)
    sampler.on_tick(48000)

    assert sampler.intervals == [16000]
    assert ticks.subscriber_count == 0


def test_start_while_sampling_is_a_no_op(ticks):
    sampler = FrameIntervalSampler(ticks)

    sampler.start()
    ticks.emit_many([0, 16000])
    sampler.start()
    ticks.emit(32000)

    assert sampler.intervals == [16000, 16000]
    assert ticks.subscriber_count == 1


def test_restart_resets_series(ticks):
    sampler = FrameIntervalSampler(ticks)

    sampler.start()
    ticks.emit_many([0, 40000])
    sampler.stop()
    sampler.start()
    ticks.emit_many([100000, 116000])

    assert sampler.intervals == [16000]
    assert sampler.dropped_frame_count == 0
    assert sampler.max_interval_us == 16000


def test_no_frames_gives_zero_rates(ticks, clock):
    clock.push(0, 1000000)
    sampler = FrameIntervalSampler(ticks, clock=clock)

    sampler.start()
    stats = sampler.stop()

    assert stats.actual_fps == 0
    assert stats.jank_rate == 0
    assert stats.average_interval_us == 0


@pytest.mark.parametrize("kwargs", [{"frame_budget_us": 0}, {"jank_multiplier": 0.5}])
def test_invalid_configuration_is_rejected(ticks, kwargs):
    with pytest.raises(ValueError):
        FrameIntervalSampler(ticks, **kwargs)
