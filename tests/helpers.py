from video_morse_decode.morse import WORD_MARKER, encode_text
from video_morse_decode.segmenter import SignalRun, State

ON_LEVEL = 200
OFF_LEVEL = 20

PARIS_TEXT = "PARIS PARIS PARIS PARIS PARIS"


def runs_for_text(text, dot=2, dash=6, intra=2, letter=6, word=14):
    """Runs that key `text`, starting with the first ON and ending with the last ON."""
    runs = []
    for w, word_morse in enumerate(encode_text(text).split(f" {WORD_MARKER} ")):
        if w:
            runs.append(SignalRun(State.OFF, word))
        for c, pattern in enumerate(word_morse.split()):
            if c:
                runs.append(SignalRun(State.OFF, letter))
            for s, symbol in enumerate(pattern):
                if s:
                    runs.append(SignalRun(State.OFF, intra))
                runs.append(SignalRun(State.ON, dot if symbol == "." else dash))
    return runs


def luminance_for_runs(runs, tail=3):
    """Per-frame luminance for `runs`, plus a dark tail so the last ON run is closed."""
    values = []
    for run in runs:
        level = ON_LEVEL if run.state == State.ON else OFF_LEVEL
        values.extend([level] * run.duration)
    values.extend([OFF_LEVEL] * tail)
    return values
