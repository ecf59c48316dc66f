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

from .segmenter import State

DOT = "."
DASH = "-"
LETTER_SEP = " "
WORD_SEP = " | "


def encode_runs(runs, timing):
    """
    Turn runs into a token stream of DOT, DASH, LETTER_SEP and WORD_SEP.

    OFF runs shorter than the first OFF threshold are gaps inside a letter
    and emit nothing.
    """
    off_letter, off_word = timing.off.thresholds
    (on_dash,) = timing.on.thresholds

    tokens = []
    for run in runs:
        if run.state == State.OFF:
            if run.duration < off_letter:
                continue
            tokens.append(LETTER_SEP if run.duration < off_word else WORD_SEP)
        else:
            tokens.append(DOT if run.duration < on_dash else DASH)
    return tuple(tokens)


def render_morse(tokens):
    return "".join(tokens)
