import os

import pandas as pd
import pytest

from instrumentation.benchmarks import (
    BenchmarkSuite,
    Experiment1CPU,
    Experiment2Scroll,
    Experiment3Memory,
    Experiment4Startup,
    StartupContext,
)
from instrumentation.benchmarks.common import FixedPlatform, FrameTestResult, TestKind
from instrumentation.benchmarks.run import main as run_main

from conftest import RealClockPlatform, ScriptedClock


def test_cpu_experiment_times_each_run(small_config, sink):
    platform = FixedPlatform(timestamps=[0, 1000, 1000, 3000, 3000, 6000])
    experiment = Experiment1CPU(small_config, platform=platform, sink=sink)

    result = experiment.run()

    assert result.experiment_id == 1
    assert list(result.data["Execution Time (us)"]) == [1000, 2000, 3000]
    assert result.data["Valid"].all()
    assert result.metadata["mean_us"] == pytest.approx(2000)
    assert result.metadata["min_us"] == 1000
    assert result.metadata["max_us"] == 3000
    assert result.metadata["std_us"] == pytest.approx(816.4966, rel=1e-4)
    # Newest first
    assert experiment.history[0].execution_time_us == 3000
    assert sink.lines.count("TEST BENCHMARK - CPU TEST RESULTS") == 3
    assert "Primes found: 1229" in sink.lines


def test_cpu_history_is_capped_across_runs(small_config, sink):
    small_config["cpu_runs"] = 4
    experiment = Experiment1CPU(small_config, platform=RealClockPlatform(), sink=sink)

    experiment.run()
    experiment.run()
    result = experiment.run()

    assert len(experiment.history) == 10
    assert result.metadata["history_size"] == 10
    experiment.clear_history()
    assert len(experiment.history) == 0


def test_cpu_experiment_flags_unexpected_prime_count(small_config, sink):
    small_config["expected_prime_count"] = 78498
    experiment = Experiment1CPU(small_config, platform=RealClockPlatform(), sink=sink)

    result = experiment.run()

    assert not result.metadata["all_valid"]
    assert any("unexpected prime count" in line for line in sink.lines)


def test_cpu_experiment_rejects_negative_limit(small_config):
    small_config["sieve_prime_limit"] = -1

    with pytest.raises(ValueError):
        Experiment1CPU(small_config)


def test_scroll_experiment_measures_window(small_config, sink):
    experiment = Experiment2Scroll(small_config, platform=RealClockPlatform(80, 79), sink=sink)

    result = experiment.run()
    frame_result = result.metadata["frame_result"]

    assert isinstance(frame_result, FrameTestResult)
    assert frame_result.total_frame_count > 0
    assert len(result.data) == frame_result.total_frame_count
    assert frame_result.battery_drain == "1%"
    assert result.metadata["jank_threshold_us"] == 25000
    assert 0.25 <= frame_result.elapsed_us / 1000000 < 1.0
    assert "TEST BENCHMARK - GPU TEST STARTED" in sink.lines
    assert "TEST BENCHMARK - GPU TEST RESULTS" in sink.lines
    assert "Battery drain: 1%" in sink.lines
    assert len(experiment.rendered_rows) == small_config["frame_workload_items"]


def test_scroll_experiment_without_battery(small_config, sink):
    experiment = Experiment2Scroll(small_config, platform=RealClockPlatform(), sink=sink)

    result = experiment.run()

    assert result.metadata["battery_drain"] == "N/A"
    assert "Battery at start: N/A%" in sink.lines


@pytest.mark.slow
def test_injected_stall_causes_jank(small_config, sink):
    small_config.update({
        "scroll_duration_seconds": 0.6,
        "stall_interval_s": 0.1,
        "stall_prime_limit": 3000000,
    })
    experiment = Experiment2Scroll(small_config, platform=RealClockPlatform(), sink=sink)

    result = experiment.run()

    assert result.metadata["stall_durations_us"]
    assert result.metadata["dropped_frames"] >= 1
    assert result.data["Dropped"].any()
    assert any(line.startswith("Jank detected: Frame interval=") for line in sink.lines)


def test_memory_experiment_reports_rss(small_config, sink):
    experiment = Experiment3Memory(small_config, sink=sink)

    result = experiment.run()

    assert result.experiment_id == 3
    assert not result.data.empty
    assert result.metadata["item_count"] == 50
    assert result.metadata["peak_rss_mb"] >= result.metadata["baseline_rss_mb"]
    assert "TEST BENCHMARK - MEMORY TEST RESULTS" in sink.lines


def test_startup_experiment_records_first_frame_once(small_config, sink):
    startup = StartupContext.capture(clock=ScriptedClock(1000, 3000, 9000), sink=sink)
    experiment = Experiment4Startup(small_config, startup=startup, sink=sink)

    first = experiment.run()
    second = experiment.run()

    assert first.metadata["tti_us"] == 2000
    assert second.metadata["tti_us"] == 2000
    assert first.data["Capture Point"].iloc[0] == "entry"


def test_suite_rejects_invalid_experiment_id(small_config, sink):
    suite = BenchmarkSuite(small_config, platform=RealClockPlatform(), sink=sink)

    assert suite.run_experiment(7) is None
    assert "Invalid experiment ID: 7. Must be 1-4." in sink.lines


def test_suite_keeps_cpu_history_between_runs(small_config, sink):
    suite = BenchmarkSuite(small_config, platform=RealClockPlatform(), sink=sink)

    suite.run_experiment(1)
    result = suite.run_experiment(1)

    assert result.metadata["history_size"] == 6
    assert len(suite.results) == 1


def test_suite_caps_sample_history_per_kind(small_config, sink):
    startup = StartupContext.capture(clock=ScriptedClock(1000, 4000), sink=sink)
    suite = BenchmarkSuite(small_config, startup=startup, platform=RealClockPlatform(), sink=sink)

    results = [suite.run_experiment(4) for _ in range(11)]

    history = suite.get_history(TestKind.STARTUP)
    assert len(history) == 10
    assert history.latest() is results[-1].metadata["samples"][0]
    assert all(sample is not results[0].metadata["samples"][0] for sample in history)
    assert history.latest().values["tti_us"] == 3000
    assert len(suite.get_history(TestKind.CPU)) == 0


def test_suite_cpu_samples_are_newest_first(small_config, sink):
    suite = BenchmarkSuite(small_config, platform=RealClockPlatform(), sink=sink)

    runs = [suite.run_experiment(1) for _ in range(4)]

    history = suite.get_history(TestKind.CPU)
    assert len(history) == 10
    assert history[0] is runs[3].metadata["samples"][-1]
    assert history[9] is runs[0].metadata["samples"][-1]


def test_suite_records_scroll_outputs(small_config, sink, tmp_path):
    suite = BenchmarkSuite(small_config, platform=RealClockPlatform(80, 79), sink=sink)

    result = suite.run_experiment(2)
    csv_path = suite.save_results(str(tmp_path / "results.csv"))
    plot_files = suite.generate_plots(str(tmp_path))

    df = pd.read_csv(csv_path)
    scroll_rows = df[df["Experiment"] == "scroll"]
    assert len(scroll_rows) == len(result.data)
    assert set(scroll_rows["Experiment_ID"]) == {2}
    assert [os.path.basename(p) for p in plot_files] == [
        "exp2_frame_histogram.png",
        "exp2_frame_timeline.png",
    ]
    assert all(os.path.exists(p) for p in plot_files)
    assert len(suite.get_history(TestKind.FRAME)) == 1
    assert suite.get_history(TestKind.BATTERY).latest().values == {"battery_start": 80, "battery_end": 79}


def test_suite_saves_combined_csv_and_plots(small_config, sink, tmp_path):
    suite = BenchmarkSuite(small_config, platform=RealClockPlatform(), sink=sink)
    suite.print_banner()
    suite.run_experiments([1, 3, 4])

    csv_path = suite.save_results(str(tmp_path / "results.csv"))
    plot_files = suite.generate_plots(str(tmp_path))

    df = pd.read_csv(csv_path)
    assert set(df["Experiment_ID"]) == {1, 3, 4}
    assert set(df["Experiment"]) == {"cpu", "memory", "startup"}
    assert suite.get_results_dataframe() is not None
    assert suite.startup.has_first_frame
    assert [os.path.basename(p) for p in plot_files] == ["exp1_cpu_runs.png", "exp3_memory_timeline.png"]
    assert all(os.path.exists(p) for p in plot_files)


def test_suite_with_no_results_saves_nothing(small_config, sink, tmp_path):
    suite = BenchmarkSuite(small_config, platform=RealClockPlatform(), sink=sink)

    suite.save_results(str(tmp_path / "results.csv"))

    assert not (tmp_path / "results.csv").exists()
    assert "   ⚠️  No results to save" in sink.lines


def test_cli_lists_experiments(capsys):
    run_main(["--list"])

    assert "AVAILABLE EXPERIMENTS" in capsys.readouterr().out


@pytest.mark.slow
def test_cli_runs_selected_experiments(tmp_path, capsys):
    run_main(["--quick", "--exp", "1", "4", "--no-plots", "--platform", "CLI",
              "--output", str(tmp_path)])

    out = capsys.readouterr().out
    assert "CLI BENCHMARK - CPU TEST RESULTS" in out
    assert "CLI BENCHMARK - STARTUP TIME MEASUREMENT" in out
    assert "Init (entry) at:" in out
    assert (tmp_path / "results.csv").exists()
