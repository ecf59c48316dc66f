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

WORD_MARKER = "|"

# === Morse Dictionary ===
MORSE_DICT = {
    ".-": "A", "-...": "B", "-.-.": "C", "-..": "D", ".": "E",
    "..-.": "F", "--.": "G", "....": "H", "..": "I", ".---": "J",
    "-.-": "K", ".-..": "L", "--": "M", "-.": "N", "---": "O",
    ".--.": "P", "--.-": "Q", ".-.": "R", "...": "S", "-": "T",
    "..-": "U", "...-": "V", ".--": "W", "-..-": "X", "-.--": "Y",
    "--..": "Z", "-----": "0", ".----": "1", "..---": "2", "...--": "3",
    "....-": "4", ".....": "5", "-....": "6", "--...": "7", "---..": "8",
    "----.": "9", "---...": ":", "-....-": "-", ".-.-.-": ".",
}

TEXT_DICT = {v: k for k, v in MORSE_DICT.items()}


def decode_token(token):
    if token == WORD_MARKER:
        return " "
    return MORSE_DICT.get(token, token)


def decode_morse(morse):
    """
    Decode a space delimited morse string, `|` marking word gaps.

    Letters are joined without spaces and each `|` becomes one space.
    Tokens not in the table are kept as they are.
    """
    return "".join(decode_token(token) for token in morse.split())


def unresolved_tokens(morse):
    return [t for t in morse.split() if t != WORD_MARKER and t not in MORSE_DICT]


def encode_text(text):
    """Render text as morse in the same layout decode_morse reads."""
    words = []
    for word in text.upper().split():
        for ch in word:
            if ch not in TEXT_DICT:
                raise ValueError(f"no morse code for character {ch!r}")
        words.append(" ".join(TEXT_DICT[ch] for ch in word))
    return f" {WORD_MARKER} ".join(words)
