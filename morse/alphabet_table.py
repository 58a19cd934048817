"""
International Morse code for the 26 Latin letters.

Both directions of the table are built from the single list of (letter, code)
pairs below, so the forward and reverse mappings can never disagree.
"""

from types import MappingProxyType
from typing import Iterable, Iterator


DOT = "."
DASH = "-"

LETTER_CODES: tuple[tuple[str, str], ...] = (
    ("A", ".-"), ("B", "-..."), ("C", "-.-."), ("D", "-.."),
    ("E", "."), ("F", "..-."), ("G", "--."), ("H", "...."),
    ("I", ".."), ("J", ".---"), ("K", "-.-"), ("L", ".-.."),
    ("M", "--"), ("N", "-."), ("O", "---"), ("P", ".--."),
    ("Q", "--.-"), ("R", ".-."), ("S", "..."), ("T", "-"),
    ("U", "..-"), ("V", "...-"), ("W", ".--"), ("X", "-..-"),
    ("Y", "-.--"), ("Z", "--.."),
)


class AlphabetTable:
    def __init__(self, pairs: Iterable[tuple[str, str]] = LETTER_CODES):
        # Dictionary to hold letter to code mappings
        mappings: dict[str, str] = {}
        # Dictionary to hold code to letter mappings
        reverse_mappings: dict[str, str] = {}

        for letter, code in pairs:
            if letter in mappings:
                raise ValueError(f"Duplicate letter in table: {letter!r}")
            if code in reverse_mappings:
                raise ValueError(
                    f"Code {code!r} is shared by {reverse_mappings[code]!r} and {letter!r}"
                )
            if not code or set(code) - {DOT, DASH}:
                raise ValueError(f"Code for {letter!r} is not a dot/dash run: {code!r}")
            mappings[letter] = code
            reverse_mappings[code] = letter

        self.mappings = MappingProxyType(mappings)
        self.reverse_mappings = MappingProxyType(reverse_mappings)

    def lookup_code(self, letter: str) -> str | None:
        """Return the dot/dash code for letter, or None if it has none."""
        return self.mappings.get(letter, None)

    def lookup_letter(self, code: str) -> str | None:
        """Return the letter for a dot/dash code, or None if no letter uses it."""
        return self.reverse_mappings.get(code, None)

    def letters(self) -> list[str]:
        return list(self.mappings)

    def __contains__(self, letter: object) -> bool:
        return letter in self.mappings

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.mappings.items())

    def __len__(self) -> int:
        return len(self.mappings)


# Shared, read-only for the lifetime of the process
ALPHABET_TABLE = AlphabetTable()
