"""
Morse text is handled as a sequence of tokens rather than as raw characters.

A token is either a letter code (a run of dots and dashes), a letter separator
or a word separator. Runs of dots and dashes are not self-delimiting ("..." is
S, but it is also the start of H, V and others), so letter boundaries only ever
come from the separators.

    "... --- ... / ..."  ->  [..., |, ---, |, ..., /, ...]
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from morse.alphabet_table import DASH, DOT
from morse.errors import MalformedTokenError


LETTER_SEPARATOR_TEXT = " "
WORD_SEPARATOR_TEXT = " / "


class TokenKind(Enum):
    LETTER_CODE = "letter_code"
    LETTER_SEPARATOR = "letter_separator"
    WORD_SEPARATOR = "word_separator"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    code: str = ""
    # Offset of the token in the text it was read from
    position: int = field(default=-1, compare=False)


LETTER_SEPARATOR = Token(TokenKind.LETTER_SEPARATOR)
WORD_SEPARATOR = Token(TokenKind.WORD_SEPARATOR)


def letter_code(code: str, position: int = -1) -> Token:
    return Token(TokenKind.LETTER_CODE, code, position)


def render(tokens: Iterable[Token]) -> str:
    """
    Converts tokens back to Morse text.
    """
    pieces: list[str] = []
    for token in tokens:
        if token.kind is TokenKind.LETTER_CODE:
            pieces.append(token.code)
        elif token.kind is TokenKind.LETTER_SEPARATOR:
            pieces.append(LETTER_SEPARATOR_TEXT)
        else:
            pieces.append(WORD_SEPARATOR_TEXT)
    return "".join(pieces)


def tokenize(morse: str) -> list[Token]:
    """
    Splits Morse text into tokens on its two delimiters.

    " / " separates words and a single space separates letters inside a word.
    Anything else between the delimiters must be a non-empty run of dots and
    dashes. Empty words are only accepted at the very start or end of the
    message, so a lone " / " still reads as one word boundary.
    """
    tokens: list[Token] = []
    if not morse:
        return tokens

    words = morse.split(WORD_SEPARATOR_TEXT)
    last = len(words) - 1
    offset = 0

    for index, word in enumerate(words):
        if index > 0:
            tokens.append(Token(TokenKind.WORD_SEPARATOR, position=offset - len(WORD_SEPARATOR_TEXT)))

        if not word:
            if 0 < index < last:
                raise MalformedTokenError(
                    WORD_SEPARATOR_TEXT * 2, offset - len(WORD_SEPARATOR_TEXT), "consecutive word separators"
                )
        else:
            _tokenize_word(word, offset, tokens)

        offset += len(word) + len(WORD_SEPARATOR_TEXT)

    return tokens


def _tokenize_word(word: str, offset: int, tokens: list[Token]) -> None:
    position = offset
    for index, code in enumerate(word.split(LETTER_SEPARATOR_TEXT)):
        if index > 0:
            tokens.append(Token(TokenKind.LETTER_SEPARATOR, position=position - 1))

        if not code:
            # Leading, trailing or doubled space inside a word
            raise MalformedTokenError(LETTER_SEPARATOR_TEXT, position, "irregular spacing")
        for i, symbol in enumerate(code):
            if symbol not in (DOT, DASH):
                raise MalformedTokenError(code, position + i, f"unexpected symbol {symbol!r}")

        tokens.append(letter_code(code, position))
        position += len(code) + len(LETTER_SEPARATOR_TEXT)
