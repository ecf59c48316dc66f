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
from typing import Tuple

import numpy as np

from .errors import EmptyFrameRangeError

logger = logging.getLogger(__name__)

LUMINANCE_LEVELS = 256


@dataclass(frozen=True)
class LuminanceHistogram:
    counts: Tuple[int, ...]
    mean: int

    @property
    def total(self):
        return sum(self.counts)


def analyze_luminance(frames, start_frame=-1, end_frame=-1):
    """
    Tally a 256 bucket luminance histogram and its weighted mean.

    The mean (truncated) is the ON/OFF brightness threshold. The frame
    range bounds are only used for the error message, frames are expected
    to be filtered already.
    """
    values = np.array([f.luminance for f in frames], dtype=np.int64)
    if values.size == 0:
        raise EmptyFrameRangeError(start_frame, end_frame)

    counts = np.bincount(values, minlength=LUMINANCE_LEVELS)
    levels = np.arange(LUMINANCE_LEVELS, dtype=np.int64)
    mean = int((levels * counts).sum() // counts.sum())

    logger.info("Luminance mean over %d frames: %d", values.size, mean)
    return LuminanceHistogram(tuple(int(c) for c in counts), mean)
