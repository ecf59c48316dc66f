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


class VideoMorseError(Exception):
    pass


class ConfigurationError(VideoMorseError):
    pass


class VideoInputError(VideoMorseError):
    pass


class EmptyFrameRangeError(VideoMorseError):
    def __init__(self, start_frame=-1, end_frame=-1):
        self.start_frame = start_frame
        self.end_frame = end_frame
        super().__init__(f"empty frame range: no frames in range {start_frame}..{end_frame}")


class InsufficientPeaksError(VideoMorseError):
    state = None

    def __init__(self, required, found):
        self.required = required
        self.found = found
        super().__init__(
            f"insufficient {self.state} timing peaks: need {required}, found {found}"
        )


class InsufficientOffPeaksError(InsufficientPeaksError):
    state = "OFF"


class InsufficientOnPeaksError(InsufficientPeaksError):
    state = "ON"
