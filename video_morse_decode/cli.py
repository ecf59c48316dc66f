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

import argparse
import json
import logging
import sys

from .classifier import GAUSSIAN_WINDOW_SIZE, METHODS
from .errors import VideoMorseError
from .frames import CHANNELS, DEFAULT_CHANNEL
from .pipeline import DecodeOptions, MorsePipeline

logger = logging.getLogger(__name__)


def setup_logging(debug_mode=False):
    level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="video-morse-decode",
        description="Decode a blinking-light morse message from a region of a video.",
    )
    parser.add_argument("video_filename", help="Video file (anything OpenCV can read), or a frame dump with --load-frames")
    parser.add_argument("json_filename", help="Report path, '-' for stdout")
    parser.add_argument("start_frame", type=int, help="First frame to use, -1 for the first frame")
    parser.add_argument("end_frame", type=int, help="Last frame to use, -1 for the last frame")
    parser.add_argument("x0", type=float, help="Left edge of the area to examine (0.0-1.0)")
    parser.add_argument("y0", type=float, help="Top edge of the area to examine (0.0-1.0)")
    parser.add_argument("x1", type=float, help="Right edge of the area to examine (0.0-1.0)")
    parser.add_argument("y1", type=float, help="Bottom edge of the area to examine (0.0-1.0)")
    parser.add_argument("-c", "--channel", choices=sorted(CHANNELS), default=DEFAULT_CHANNEL,
                        help=f"Color channel to measure (default: {DEFAULT_CHANNEL})")
    parser.add_argument("-w", "--window", type=int, default=GAUSSIAN_WINDOW_SIZE,
                        help=f"Gaussian smoothing radius in frames (default: {GAUSSIAN_WINDOW_SIZE})")
    parser.add_argument("-m", "--method", choices=METHODS, default="peaks",
                        help="Duration classifier: histogram peaks or k-means (default: peaks)")
    parser.add_argument("--save-frames", metavar="PATH",
                        help="Also write 'index: luminance' lines for every sampled frame")
    parser.add_argument("--load-frames", action="store_true",
                        help="Treat video_filename as a frame dump instead of a video")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


def options_from_args(args):
    return DecodeOptions(
        video_file_name=args.video_filename,
        json_file_name=args.json_filename,
        start_frame=args.start_frame,
        end_frame=args.end_frame,
        x0=args.x0, y0=args.y0, x1=args.x1, y1=args.y1,
        channel=args.channel,
        gaussian_window=args.window,
        method=args.method,
        save_frames=args.save_frames,
        load_frames=args.load_frames,
    )


def write_report(report, json_file_name):
    data = report.to_dict()
    if json_file_name == "-":
        json.dump(data, sys.stdout)
        sys.stdout.write("\n")
        return
    with open(json_file_name, "w") as out_file:
        json.dump(data, out_file, indent=2)
    logger.info("Report saved to %s", json_file_name)


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        report = MorsePipeline(options_from_args(args)).run()
        write_report(report, args.json_filename)
    except VideoMorseError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Could not write report: %s", e)
        return 1

    print("\nMorse Code:", file=sys.stderr)
    print(report.morse, file=sys.stderr)
    print("\nDecoded Text:", file=sys.stderr)
    print(report.message, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
