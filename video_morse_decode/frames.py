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
import re
from dataclasses import dataclass

import cv2
import numpy as np

from .errors import ConfigurationError, VideoInputError

logger = logging.getLogger(__name__)

# OpenCV decodes to BGR, so blue is plane 0.
# Blue gives the best contrast for lantern-style signal lights.
CHANNELS = {"blue": 0, "green": 1, "red": 2, "gray": None}
DEFAULT_CHANNEL = "blue"

FRAME_LINE = re.compile(r"^\s*(\d+): (\d+)")


@dataclass(frozen=True)
class Frame:
    index: int
    luminance: int


@dataclass(frozen=True)
class Region:
    x0: float
    y0: float
    x1: float
    y1: float

    def validate(self):
        for name in ("x0", "y0", "x1", "y1"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name}={value} is outside 0.0-1.0")
        if self.x0 >= self.x1 or self.y0 >= self.y1:
            raise ConfigurationError(
                f"region ({self.x0}, {self.y0})-({self.x1}, {self.y1}) is empty"
            )
        return self

    def to_pixels(self, width, height):
        """Convert to integer pixel bounds (x0, y0, x1, y1), end-exclusive."""
        x0 = int(width * self.x0)
        y0 = int(height * self.y0)
        x1 = int(width * self.x1)
        y1 = int(height * self.y1)
        if x1 <= x0 or y1 <= y0:
            raise ConfigurationError(
                f"region covers no pixels in a {width}x{height} frame"
            )
        return x0, y0, x1, y1


def in_frame_range(index, start_frame=-1, end_frame=-1):
    if start_frame != -1 and index < start_frame:
        return False
    if end_frame != -1 and index > end_frame:
        return False
    return True


def filter_frames(frames, start_frame=-1, end_frame=-1):
    return [f for f in frames if in_frame_range(f.index, start_frame, end_frame)]


def sample_luminance(image, bounds, channel=DEFAULT_CHANNEL):
    """
    Average one color channel over a pixel rectangle.

    Rows are averaged first and the row averages are then averaged, both
    with integer division, so the result is always an int in 0..255.
    """
    if channel not in CHANNELS:
        raise ConfigurationError(f"unknown channel: {channel}")
    x0, y0, x1, y1 = bounds

    if image.ndim == 2:
        plane = image
    elif channel == "gray":
        plane = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    else:
        plane = image[:, :, CHANNELS[channel]]

    region = plane[y0:y1, x0:x1].astype(np.int64)
    row_means = region.sum(axis=1) // (x1 - x0)
    value = int(row_means.sum() // (y1 - y0))
    return min(max(value, 0), 255)


def read_video_frames(video_path, region, channel=DEFAULT_CHANNEL, start_frame=-1, end_frame=-1):
    """Decode a video with OpenCV and sample every in-range frame."""
    cap = cv2.VideoCapture(video_path)
    if not cap.isOpened():
        raise VideoInputError(f"failed to open video file: {video_path}")

    try:
        width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        logger.info(
            "Video %s: %dx%d, %.2f fps, %d frames",
            video_path, width, height,
            cap.get(cv2.CAP_PROP_FPS), int(cap.get(cv2.CAP_PROP_FRAME_COUNT)),
        )

        frames = []
        bounds = None
        frame_index = 0
        while True:
            ret, image = cap.read()
            if not ret:
                break
            if end_frame != -1 and frame_index > end_frame:
                break
            if in_frame_range(frame_index, start_frame, end_frame):
                if bounds is None:
                    h, w = image.shape[:2]
                    bounds = region.to_pixels(w, h)
                    logger.debug("Sampling pixel region %s", bounds)
                frames.append(Frame(frame_index, sample_luminance(image, bounds, channel)))
            frame_index += 1
    finally:
        cap.release()

    if frame_index == 0:
        raise VideoInputError(f"failed to find video stream in {video_path}")

    logger.info("Sampled %d of %d decoded frames", len(frames), frame_index)
    return frames


def save_frames(frames, path):
    with open(path, "w") as out_file:
        for frame in frames:
            out_file.write(f"{frame.index}: {frame.luminance}\n")
    logger.info("Frame data saved to %s", path)


def load_frames(path, start_frame=-1, end_frame=-1):
    """Read an `index: luminance` frame dump written by save_frames."""
    frames = []
    previous = -1
    try:
        with open(path) as f:
            for line in f:
                match = FRAME_LINE.match(line)
                if not match:
                    continue
                index, luminance = map(int, match.groups())
                if index <= previous:
                    raise VideoInputError(
                        f"frame dump indices must be strictly increasing: {index} after {previous} in {path}"
                    )
                previous = index
                if in_frame_range(index, start_frame, end_frame):
                    frames.append(Frame(index, min(luminance, 255)))
    except OSError as e:
        raise VideoInputError(f"failed to read frame dump {path}: {e}") from e

    logger.info("Loaded %d frames from %s", len(frames), path)
    return frames
