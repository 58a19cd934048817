"""
Translates plain text (letters A-Z separated by whitespace) to Morse code and back.

Encoding maps every letter through the alphabet table and joins the codes of one
word with a single space. Words are joined with " / ", so "HELLO WORLD" becomes
".... . .-.. .-.. --- / .-- --- .-. .-.. -..".

Decoding never guesses letter boundaries from the dots and dashes themselves.
The input is first split on its delimiters (see morse.tokens) and each code is
then looked up on its own.
"""

import re
import time
from typing import Iterable

from morse.alphabet_table import ALPHABET_TABLE, AlphabetTable
from morse.errors import MalformedTokenError, UnsupportedCharacterError
from morse.tokens import (
    Token,
    TokenKind,
    letter_code,
    render,
    tokenize,
)


UNKNOWN_POLICIES = {"raise", "skip"}

_WHITESPACE_RE = re.compile(r"\s+")


class MorseEncoder:
    def __init__(self, table: AlphabetTable = ALPHABET_TABLE):
        self.table = table

    def encode_tokens(self, text: str, unknown_policy: str = "raise") -> list[Token]:
        """
        Encodes text into a Morse token stream.
        Unknown policy: "raise" | "skip"
            - "raise": raise UnsupportedCharacterError on the first character outside A-Z and whitespace
            - "skip": drop such characters
        Lowercase letters are upper-cased before lookup. Each run of whitespace
        becomes exactly one word separator.
        """
        if unknown_policy not in UNKNOWN_POLICIES:
            raise ValueError("Unknown policy must be 'raise' or 'skip'")

        tokens: list[Token] = []
        # True while the last thing emitted is a word separator
        in_whitespace = False

        for position, char in enumerate(text):
            if char.isspace():
                if not in_whitespace:
                    tokens.append(Token(TokenKind.WORD_SEPARATOR, position=position))
                    in_whitespace = True
                continue

            # Only ASCII letters fold to uppercase; "\u017f".upper() is "S"
            code = self.table.lookup_code(char.upper()) if char.isascii() else None
            if code is None:
                if unknown_policy == "raise":
                    raise UnsupportedCharacterError(char, position)
                continue

            # Letters of the same word are joined by a letter separator
            if tokens and tokens[-1].kind is TokenKind.LETTER_CODE:
                tokens.append(Token(TokenKind.LETTER_SEPARATOR, position=position))
            tokens.append(letter_code(code, position))
            in_whitespace = False

        return tokens

    def encode(self, text: str, unknown_policy: str = "raise") -> str:
        return render(self.encode_tokens(text, unknown_policy=unknown_policy))


class MorseDecoder:
    def __init__(self, table: AlphabetTable = ALPHABET_TABLE):
        self.table = table

    def decode_tokens(self, tokens: Iterable[Token]) -> str:
        """
        Converts a token stream back to text.
        Letter separators contribute nothing, word separators become a single space.
        """
        decoded: list[str] = []
        for token in tokens:
            if token.kind is TokenKind.LETTER_CODE:
                letter = self.table.lookup_letter(token.code)
                if letter is None:
                    raise MalformedTokenError(token.code, token.position)
                decoded.append(letter)
            elif token.kind is TokenKind.WORD_SEPARATOR:
                decoded.append(" ")
        return "".join(decoded)

    def decode(self, morse: str) -> str:
        return self.decode_tokens(tokenize(morse))


class MorseCodec:
    """
    One encoder and one decoder sharing the same alphabet table.
    """

    def __init__(self, table: AlphabetTable = ALPHABET_TABLE):
        self.table = table
        self.encoder = MorseEncoder(table)
        self.decoder = MorseDecoder(table)

    def encode(self, text: str, unknown_policy: str = "raise") -> str:
        return self.encoder.encode(text, unknown_policy=unknown_policy)

    def decode(self, morse: str) -> str:
        return self.decoder.decode(morse)

    def verify(self, corpus: Iterable[str]) -> bool:
        """Check decode(encode(x)) == x for every line, up to case and whitespace runs."""
        for line in corpus:
            expected = _WHITESPACE_RE.sub(" ", line.upper())
            if self.decode(self.encode(line)) != expected:
                return False
        return True


_codec = MorseCodec()


def encode(text: str) -> str:
    return _codec.encode(text)


def decode(morse: str) -> str:
    return _codec.decode(morse)


def main():
    codec = MorseCodec()

    # Encode
    for text in ["SOS", "Hello World"]:
        encoded = codec.encode(text)
        print(f"Encoded: {text!r} -> {encoded!r}")

        # Decode the same Morse text
        decoded = codec.decode(encoded)
        print(f"Decoded: {encoded!r} -> {decoded!r}")

    # Policy: raise (strict)
    print("\n-- unknown_policy='raise' --")
    try:
        print("Encoded:", codec.encode("SOS 2024"))
    except UnsupportedCharacterError as e:
        print("Error:", e)

    # Policy: skip (drop unsupported characters)
    print("\n-- unknown_policy='skip' --")
    print("Encoded:", codec.encode("SOS 2024!", unknown_policy="skip"))

    # Missing delimiters cannot be split into letters
    print("\n-- malformed input --")
    try:
        print("Decoded:", codec.decode("....-..-.-.-"))
    except MalformedTokenError as e:
        print("Error:", e)

    start_time = time.time()
    letters = ALPHABET_TABLE.letters()
    print(f"\nRound trip over {len(letters)} letters: {codec.verify(letters)}")
    print(f"Finished in {time.time() - start_time:.4f}s")


if __name__ == "__main__":
    main()
