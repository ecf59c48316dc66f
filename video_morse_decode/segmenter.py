'''
Name: video-morse-decode
Based on clip2morse by Cooper Wiegand
https://github.com/Cooperw/clip2morse


MIT License

Copyright (c) 2025 Cooper Wiegand

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
'''

import logging
from dataclasses import dataclass
from enum import IntEnum

logger = logging.getLogger(__name__)


class State(IntEnum):
    OFF = 0
    ON = 1


@dataclass(frozen=True)
class SignalRun:
    state: State
    duration: int  # in frames


def segment_runs(frames, threshold):
    """
    Split the luminance sequence into alternating ON/OFF runs.

    A run is closed only when the state changes, so the run still open
    when the frames end is not emitted. The machine starts OFF at the
    first frame; if that frame is already ON the empty OFF run is skipped.
    """
    runs = []
    if not frames:
        return runs

    last_state = State.OFF
    run_start = frames[0].index

    for frame in frames:
        state = State.ON if frame.luminance >= threshold else State.OFF
        if state != last_state:
            duration = frame.index - run_start
            if duration > 0:
                runs.append(SignalRun(last_state, duration))
            run_start = frame.index
        last_state = state

    logger.info("Segmented %d runs (threshold %d)", len(runs), threshold)
    return runs
