import random
import string

import pytest

from morse.alphabet_table import ALPHABET_TABLE, AlphabetTable
from morse.errors import MalformedTokenError, MorseError, UnsupportedCharacterError
from morse.morse_codec import MorseCodec, MorseDecoder, MorseEncoder, decode, encode
from morse.tokens import LETTER_SEPARATOR, WORD_SEPARATOR, letter_code


HELLO_WORLD = ".... . .-.. .-.. --- / .-- --- .-. .-.. -.."


# -------------- Encode -------------
def test_encode_sos():
    assert encode("SOS") == "... --- ..."


def test_encode_multiple_words():
    assert encode("HELLO WORLD") == HELLO_WORLD


def test_encode_empty():
    assert encode("") == ""


def test_encode_normalizes_lowercase():
    assert encode("Hello world") == HELLO_WORLD


def test_encode_collapses_whitespace_runs():
    assert encode("HELLO   \t WORLD") == HELLO_WORLD


def test_encode_keeps_edge_whitespace_as_separators():
    assert encode(" SOS") == " / ... --- ..."
    assert encode("SOS  ") == "... --- ... / "
    assert encode("   ") == " / "


def test_encode_rejects_unsupported_character():
    with pytest.raises(UnsupportedCharacterError) as exc_info:
        encode("SOS 2")
    assert exc_info.value.char == "2"
    assert exc_info.value.position == 4


@pytest.mark.parametrize(
    "text, char, position",
    [("\u017fOS", "\u017f", 0), ("h\u0131", "\u0131", 1), ("caf\u00e9", "\u00e9", 3)],
)
def test_encode_rejects_non_ascii_letters(text, char, position):
    # Rejected even when str.upper maps them onto A-Z
    with pytest.raises(UnsupportedCharacterError) as exc_info:
        encode(text)
    assert exc_info.value.char == char
    assert exc_info.value.position == position


def test_encode_skips_non_ascii_letters():
    assert MorseEncoder().encode("\u017fOS", unknown_policy="skip") == "--- ..."


def test_unsupported_character_is_a_value_error():
    with pytest.raises(ValueError):
        encode("É")
    assert issubclass(UnsupportedCharacterError, MorseError)


def test_encode_skip_policy():
    encoder = MorseEncoder()
    assert encoder.encode("S.O.S!", unknown_policy="skip") == "... --- ..."
    # A word made only of skipped characters leaves one separator behind
    assert encoder.encode("SOS 123 SOS", unknown_policy="skip") == "... --- ... / ... --- ..."
    assert encoder.encode("123", unknown_policy="skip") == ""


def test_encode_invalid_policy():
    with pytest.raises(ValueError, match="Unknown policy"):
        MorseEncoder().encode("SOS", unknown_policy="pass")


def test_encode_tokens():
    tokens = MorseEncoder().encode_tokens("ET A")
    assert tokens == [letter_code("."), LETTER_SEPARATOR, letter_code("-"), WORD_SEPARATOR, letter_code(".-")]
    assert [token.position for token in tokens if token.code] == [0, 1, 3]
    assert [token.position for token in tokens] == [0, 1, 1, 2, 3]


# -------------- Decode -------------
def test_decode_sos():
    assert decode("... --- ...") == "SOS"


def test_decode_multiple_words():
    assert decode(HELLO_WORLD) == "HELLO WORLD"


def test_decode_empty():
    assert decode("") == ""


def test_decode_lone_word_separator_is_a_space():
    assert decode(" / ") == " "


def test_decode_edge_word_separators():
    assert decode(" / ... --- ...") == " SOS"
    assert decode("... --- ... / ") == "SOS "


def test_decode_without_delimiters_fails():
    with pytest.raises(MalformedTokenError) as exc_info:
        decode("....-..-.-.-")
    assert exc_info.value.token == "....-..-.-.-"
    assert exc_info.value.position == 0


def test_decode_reports_position_of_unknown_code():
    with pytest.raises(MalformedTokenError) as exc_info:
        decode("... ........ ...")
    assert exc_info.value.position == 4


@pytest.mark.parametrize("morse", ["...  ---", "... /  / ---", "... _ ---", "...\t---"])
def test_decode_rejects_irregular_input(morse):
    with pytest.raises(MalformedTokenError):
        decode(morse)


def test_decoder_with_custom_table():
    decoder = MorseDecoder(AlphabetTable([("A", ".-"), ("B", "-...")]))
    assert decoder.decode(".- -...") == "AB"
    with pytest.raises(MalformedTokenError):
        decoder.decode("...")


# -------------- Round trip -------------
@pytest.mark.parametrize("letter", list(string.ascii_uppercase))
def test_every_letter_round_trips(letter):
    assert decode(encode(letter)) == letter


@pytest.mark.parametrize(
    "text",
    ["SOS", "HELLO WORLD", "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG", "E T", " "],
)
def test_round_trip(text):
    assert decode(encode(text)) == text


def test_round_trip_random_text():
    rng = random.Random(42)
    for _ in range(200):
        words = [
            "".join(rng.choice(string.ascii_uppercase) for _ in range(rng.randint(1, 8)))
            for _ in range(rng.randint(1, 6))
        ]
        text = " ".join(words)
        assert decode(encode(text)) == text


def test_verify():
    codec = MorseCodec()
    assert codec.verify(["the quick brown fox", "  JUMPS\tover ", ""])
    assert codec.verify(ALPHABET_TABLE.letters())


def test_verify_propagates_unsupported_characters():
    with pytest.raises(UnsupportedCharacterError):
        MorseCodec().verify(["SOS 2"])


def test_main(capsys):
    from morse.morse_codec import main

    main()
    out = capsys.readouterr().out
    assert "'... --- ...'" in out
    assert "Error:" in out
    assert "Round trip over 26 letters: True" in out
