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
from typing import List, Optional, Tuple

from . import frames as frame_source
from .classifier import GAUSSIAN_WINDOW_SIZE, METHODS, TimingThresholds, classify_durations
from .encoder import encode_runs, render_morse
from .errors import ConfigurationError
from .frames import CHANNELS, DEFAULT_CHANNEL, Frame, Region
from .histogram import LuminanceHistogram, analyze_luminance
from .morse import decode_morse, unresolved_tokens
from .segmenter import SignalRun, segment_runs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeOptions:
    """Options for one decoding run."""
    video_file_name: str
    json_file_name: str = "-"
    start_frame: int = -1
    end_frame: int = -1
    x0: float = 0.0
    y0: float = 0.0
    x1: float = 1.0
    y1: float = 1.0
    channel: str = DEFAULT_CHANNEL
    gaussian_window: int = GAUSSIAN_WINDOW_SIZE
    method: str = "peaks"
    save_frames: Optional[str] = None
    load_frames: bool = False

    @property
    def region(self) -> Region:
        return Region(self.x0, self.y0, self.x1, self.y1)

    def validate(self):
        self.region.validate()
        if self.start_frame < -1 or self.end_frame < -1:
            raise ConfigurationError("frame bounds must be >= 0, or -1 to disable")
        if self.start_frame != -1 and self.end_frame != -1 and self.start_frame > self.end_frame:
            raise ConfigurationError(
                f"start_frame {self.start_frame} is after end_frame {self.end_frame}"
            )
        if self.channel not in CHANNELS:
            raise ConfigurationError(f"unknown channel: {self.channel}")
        if self.method not in METHODS:
            raise ConfigurationError(f"unknown classification method: {self.method}")
        if self.gaussian_window < 0:
            raise ConfigurationError("gaussian window must not be negative")
        return self


@dataclass(frozen=True)
class DecodeReport:
    """Everything a run produces, in report order."""
    histogram: LuminanceHistogram
    runs: Tuple[SignalRun, ...]
    timing: TimingThresholds
    morse: str
    message: str

    def to_dict(self):
        return {
            "frame_hist": list(self.histogram.counts),
            "frame_hist_mean": self.histogram.mean,
            "hist_off": [{str(d): c} for d, c in self.timing.off.histogram],
            "hist_on": [{str(d): c} for d, c in self.timing.on.histogram],
            "off_time_peaks": list(self.timing.off.peaks),
            "off_thresholds": list(self.timing.off.thresholds),
            "on_time_peaks": list(self.timing.on.peaks),
            "on_thresholds": list(self.timing.on.thresholds),
            "morse": self.morse,
            "message": self.message,
        }


class MorsePipeline:
    """
    Video morse decoding pipeline.

    Flow:
        Frames (index, luminance)
              ↓
        Luminance histogram → mean threshold
              ↓
        ON/OFF runs
              ↓
        Duration peaks → thresholds
              ↓
        Morse tokens → message

    Each stage returns a new immutable value; nothing is kept on the
    pipeline between runs.
    """

    def __init__(self, options: DecodeOptions):
        self.options = options.validate()

    def read_frames(self) -> List[Frame]:
        opts = self.options
        if opts.load_frames:
            frames = frame_source.load_frames(
                opts.video_file_name, opts.start_frame, opts.end_frame
            )
        else:
            frames = frame_source.read_video_frames(
                opts.video_file_name, opts.region, opts.channel,
                opts.start_frame, opts.end_frame,
            )
        if opts.save_frames:
            frame_source.save_frames(frames, opts.save_frames)
        return frames

    def decode_frames(self, frames) -> DecodeReport:
        opts = self.options
        frames = frame_source.filter_frames(frames, opts.start_frame, opts.end_frame)

        histogram = analyze_luminance(frames, opts.start_frame, opts.end_frame)
        runs = segment_runs(frames, histogram.mean)
        timing = classify_durations(runs, opts.method, opts.gaussian_window)

        morse = render_morse(encode_runs(runs, timing))
        message = decode_morse(morse)

        unknown = unresolved_tokens(morse)
        if unknown:
            logger.warning("Unresolved morse tokens left in message: %s", unknown)
        logger.info("Decoded message: %r", message)

        return DecodeReport(
            histogram=histogram,
            runs=tuple(runs),
            timing=timing,
            morse=morse,
            message=message,
        )

    def run(self) -> DecodeReport:
        return self.decode_frames(self.read_frames())


def decode_luminance(luminance, start_frame=-1, end_frame=-1, **kwargs) -> DecodeReport:
    """Decode a plain luminance sequence, frame i having index i."""
    options = DecodeOptions(
        video_file_name="", start_frame=start_frame, end_frame=end_frame, **kwargs
    )
    frames = []
    for i, v in enumerate(luminance):
        if not 0 <= v <= 255:
            raise ConfigurationError(f"luminance {v} of frame {i} is outside 0..255")
        frames.append(Frame(i, int(v)))
    return MorsePipeline(options).decode_frames(frames)
