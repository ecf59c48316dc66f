import random

from video_morse_decode.frames import Frame
from video_morse_decode.segmenter import SignalRun, State, segment_runs


def frames_from(values, first_index=0):
    return [Frame(first_index + i, v) for i, v in enumerate(values)]


def test_runs_close_on_transitions_and_last_run_is_dropped():
    runs = segment_runs(frames_from([0, 0, 9, 9, 9, 0, 0, 9]), 5)
    assert runs == [
        SignalRun(State.OFF, 2),
        SignalRun(State.ON, 3),
        SignalRun(State.OFF, 2),
    ]


def test_threshold_value_counts_as_on():
    runs = segment_runs(frames_from([4, 5, 4]), 5)
    assert runs == [SignalRun(State.OFF, 1), SignalRun(State.ON, 1)]


def test_leading_on_frame_does_not_emit_empty_off_run():
    runs = segment_runs(frames_from([9, 9, 0, 0, 9]), 5)
    assert runs == [SignalRun(State.ON, 2), SignalRun(State.OFF, 2)]


def test_durations_start_at_first_frame_index():
    runs = segment_runs(frames_from([0, 0, 0, 9, 0], first_index=30), 5)
    assert runs == [SignalRun(State.OFF, 3), SignalRun(State.ON, 1)]


def test_no_frames_no_runs():
    assert segment_runs([], 128) == []


def test_constant_signal_has_no_closed_runs():
    assert segment_runs(frames_from([0] * 20), 5) == []


def test_runs_strictly_alternate():
    rng = random.Random(7)
    values = [rng.choice([10, 200]) for _ in range(500)]
    runs = segment_runs(frames_from(values), 105)

    assert runs
    assert all(run.duration > 0 for run in runs)
    for a, b in zip(runs, runs[1:]):
        assert a.state != b.state
