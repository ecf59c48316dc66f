from video_morse_decode.classifier import DurationAnalysis, TimingThresholds
from video_morse_decode.encoder import DASH, DOT, LETTER_SEP, WORD_SEP, encode_runs, render_morse
from video_morse_decode.morse import decode_morse
from video_morse_decode.segmenter import SignalRun, State

from helpers import runs_for_text

TIMING = TimingThresholds(
    off=DurationAnalysis(State.OFF, (), (2, 6, 14), (4, 10)),
    on=DurationAnalysis(State.ON, (), (2, 6), (4,)),
)


def test_run_classification_boundaries():
    runs = [
        SignalRun(State.ON, 3),
        SignalRun(State.OFF, 3),
        SignalRun(State.ON, 4),
        SignalRun(State.OFF, 4),
        SignalRun(State.ON, 2),
        SignalRun(State.OFF, 9),
        SignalRun(State.ON, 2),
        SignalRun(State.OFF, 10),
        SignalRun(State.ON, 6),
    ]
    assert encode_runs(runs, TIMING) == (
        DOT, DASH, LETTER_SEP, DOT, LETTER_SEP, DOT, WORD_SEP, DASH,
    )


def test_render_morse():
    tokens = (DOT, DOT, LETTER_SEP, DASH, WORD_SEP, DOT)
    assert render_morse(tokens) == ".. - | ."


def test_sos_decodes():
    runs = runs_for_text("SOS")
    morse = render_morse(encode_runs(runs, TIMING))
    assert morse == "... --- ..."
    assert decode_morse(morse) == "SOS"


def test_leading_word_gap_becomes_leading_space():
    runs = [SignalRun(State.OFF, 20)] + runs_for_text("E")
    assert decode_morse(render_morse(encode_runs(runs, TIMING))) == " E"
