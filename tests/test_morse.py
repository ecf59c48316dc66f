import pytest

from video_morse_decode.morse import MORSE_DICT, decode_morse, encode_text, unresolved_tokens


def test_letters_and_words():
    assert decode_morse("... --- ...") == "SOS"
    assert decode_morse(".... .. | - .... . .-. .") == "HI THERE"


def test_digits_and_punctuation():
    assert decode_morse(".---- ..--- -----") == "120"
    assert decode_morse("---... -....- .-.-.-") == ":-."


def test_tokens_match_whole_patterns_only():
    # "." is a prefix of most patterns, none of them may be split
    assert decode_morse(". .. ... ....") == "EISH"


def test_unknown_token_is_left_verbatim():
    assert decode_morse(".- .-.-.-.- -...") == "A.-.-.-.-B"
    assert unresolved_tokens(".- .-.-.-.- | -...") == [".-.-.-.-"]


def test_empty():
    assert decode_morse("") == ""


def test_table_is_unique():
    assert len(set(MORSE_DICT.values())) == len(MORSE_DICT)


@pytest.mark.parametrize("text", ["SOS", "PARIS 73", "CQ DE K1ABC"])
def test_encode_text_decodes_back(text):
    assert decode_morse(encode_text(text)) == text


def test_encode_text_layout():
    assert encode_text("sos e") == "... --- ... | ."


def test_encode_text_rejects_unknown_characters():
    with pytest.raises(ValueError, match="'\\?'"):
        encode_text("SOS?")
