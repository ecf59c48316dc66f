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
import math
from collections import Counter
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from sklearn.cluster import KMeans

from .errors import ConfigurationError, InsufficientOffPeaksError, InsufficientOnPeaksError
from .segmenter import State

logger = logging.getLogger(__name__)

# === Timing classes ===
# OFF: intra-letter gap, letter gap, word gap. ON: dot, dash.
OFF_PEAK_COUNT = 3
ON_PEAK_COUNT = 2
GAUSSIAN_WINDOW_SIZE = 3
METHODS = ("peaks", "kmeans")


@dataclass(frozen=True)
class DurationAnalysis:
    state: State
    histogram: Tuple[Tuple[int, int], ...]  # (duration, count), ascending duration
    peaks: Tuple[int, ...]                  # ascending duration
    thresholds: Tuple[int, ...]


@dataclass(frozen=True)
class TimingThresholds:
    off: DurationAnalysis
    on: DurationAnalysis


def duration_histogram(runs, state):
    counts = Counter(run.duration for run in runs if run.state == state)
    return dict(sorted(counts.items()))


def gaussian(x, a=1.0):
    return math.sqrt(a / math.pi) * math.exp(-a * x * x)


def smooth_histogram(histogram, window_size=GAUSSIAN_WINDOW_SIZE):
    """
    Densify a {duration: count} histogram over 0..max(duration) and
    convolve it with a Gaussian kernel of radius window_size.

    Offsets falling outside the array contribute nothing. The smoothed
    values are truncated to ints.
    """
    if not histogram:
        return np.zeros(0, dtype=np.int64)

    dense = np.zeros(max(histogram) + 1, dtype=np.float64)
    for duration, count in histogram.items():
        dense[duration] = count

    kernel = np.array([gaussian(j) for j in range(-window_size, window_size + 1)])
    padded = np.pad(dense, window_size)
    smoothed = np.convolve(padded, kernel, mode="valid")
    return smoothed.astype(np.int64)


def find_local_maximums(smoothed):
    """
    Return (index, amplitude) turning points in the order they are found.

    A point is a maximum when the first difference goes from rising or
    flat to falling. If the data ends while still rising the last point
    counts as a maximum too.
    """
    peaks = []
    last_sign = 0
    sign = 0
    for i in range(1, len(smoothed)):
        sign = int(np.sign(smoothed[i] - smoothed[i - 1]))
        if last_sign in (0, 1) and sign == -1:
            peaks.append((i - 1, int(smoothed[i - 1])))
        last_sign = sign

    if sign > 0:
        peaks.append((len(smoothed) - 1, int(smoothed[-1])))

    return peaks


def gaussian_peaks(histogram, count, window_size=GAUSSIAN_WINDOW_SIZE):
    """
    Pick the `count` strongest maximums of the smoothed histogram, strongest
    first. Equal amplitudes keep the order they were found in.
    """
    smoothed = smooth_histogram(histogram, window_size)
    maximums = find_local_maximums(smoothed)
    logger.debug("Smoothed histogram: %s", smoothed.tolist())
    logger.debug("Local maximums (index, amplitude): %s", maximums)

    ranked = sorted(maximums, key=lambda p: p[1], reverse=True)
    return [index for index, _ in ranked[:count]]


def kmeans_peaks(histogram, count):
    """Cluster the run durations and use the rounded centers as peaks."""
    if len(histogram) < count:
        return sorted(histogram)

    durations = np.repeat(list(histogram.keys()), list(histogram.values()))
    data = durations.reshape(-1, 1).astype(np.float64)
    kmeans = KMeans(n_clusters=count, n_init="auto", random_state=0).fit(data)
    centers = sorted(int(round(c)) for c in kmeans.cluster_centers_.flatten())
    logger.debug("KMeans centers: %s", kmeans.cluster_centers_.flatten().tolist())
    return centers


def midpoint_thresholds(peaks):
    return [(a + b) // 2 for a, b in zip(peaks, peaks[1:])]


def analyze_durations(runs, state, count, method="peaks", window_size=GAUSSIAN_WINDOW_SIZE):
    histogram = duration_histogram(runs, state)

    if method == "peaks":
        peaks = gaussian_peaks(histogram, count, window_size)
    elif method == "kmeans":
        peaks = kmeans_peaks(histogram, count)
    else:
        raise ConfigurationError(f"unknown classification method: {method}")

    if len(peaks) < count:
        error = InsufficientOffPeaksError if state == State.OFF else InsufficientOnPeaksError
        raise error(count, len(peaks))

    peaks = sorted(peaks)
    thresholds = midpoint_thresholds(peaks)
    logger.info("%s peaks %s -> thresholds %s", state.name, peaks, thresholds)
    return DurationAnalysis(
        state=state,
        histogram=tuple(histogram.items()),
        peaks=tuple(peaks),
        thresholds=tuple(thresholds),
    )


def classify_durations(runs, method="peaks", window_size=GAUSSIAN_WINDOW_SIZE):
    off = analyze_durations(runs, State.OFF, OFF_PEAK_COUNT, method, window_size)
    on = analyze_durations(runs, State.ON, ON_PEAK_COUNT, method, window_size)
    return TimingThresholds(off=off, on=on)
