from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np

from morse.alphabet_table import ALPHABET_TABLE, DASH, DOT, AlphabetTable
from morse.corpus import load_wikipedia_corpus, normalize_text
from morse.morse_codec import MorseEncoder


# ---------------------- Statistics ---------------------- #
class CodeStatistics:
    """
    Per-letter shape of the Morse alphabet, and how it plays out on a corpus:
    - code length, dot and dash counts for every letter
    - letter frequencies of a corpus
    - frequency-weighted average code length
    - Morse-to-text length ratio
    """

    def __init__(self, table: AlphabetTable = ALPHABET_TABLE):
        self.table = table
        self.encoder = MorseEncoder(table)
        self.letters: list[str] = table.letters()
        self.letter_to_index: dict[str, int] = {
            letter: index for index, letter in enumerate(self.letters)
        }

        codes = [table.lookup_code(letter) for letter in self.letters]
        self.code_lengths = np.array([len(code) for code in codes])
        self.dot_counts = np.array([code.count(DOT) for code in codes])
        self.dash_counts = np.array([code.count(DASH) for code in codes])

    def letter_counts(self, corpus: Iterable[str]) -> np.ndarray:
        counts = np.zeros(len(self.letters))
        for text in corpus:
            for char in normalize_text(text):
                index = self.letter_to_index.get(char)
                if index is not None:
                    counts[index] += 1
        return counts

    def letter_frequencies(self, corpus: Iterable[str]) -> np.ndarray:
        counts = self.letter_counts(corpus)
        total = np.sum(counts)
        if total == 0:
            return counts
        return counts / total

    def average_code_length(self, corpus: Iterable[str]) -> float:
        """
        Expected number of dots and dashes per letter, weighted by how often each letter occurs.
        """
        frequencies = self.letter_frequencies(corpus)
        return float(np.dot(frequencies, self.code_lengths))

    def compression_ratio(self, corpus: Iterable[str]) -> float:
        """
        Length of the encoded corpus divided by the length of the normalized text.
        """
        text_length = 0
        morse_length = 0
        for text in corpus:
            normalized = normalize_text(text)
            text_length += len(normalized)
            morse_length += len(self.encoder.encode(normalized))
        if text_length == 0:
            return 0.0
        return morse_length / text_length

    def most_common(self, corpus: Iterable[str], n: int = 5) -> list[tuple[str, str, float]]:
        """
        Return the n most frequent letters with their codes and frequencies.
        """
        frequencies = self.letter_frequencies(corpus)
        best_ids = np.argsort(-frequencies, kind="stable")[:n]
        return [
            (self.letters[i], self.table.lookup_code(self.letters[i]), float(frequencies[i]))
            for i in best_ids
        ]


# ---------------------- Visualizer ---------------------- #
class Visualizer:
    """
    Plots letter frequency against code length.
    """

    def __init__(self, statistics: CodeStatistics):
        self.statistics = statistics

    def plot_frequency_vs_length(self, corpus: list[str]):
        frequencies = self.statistics.letter_frequencies(corpus)
        lengths = self.statistics.code_lengths

        plt.figure(figsize=(8, 6))
        plt.scatter(frequencies, lengths, c="steelblue", s=50)

        for i, letter in enumerate(self.statistics.letters):
            plt.text(frequencies[i], lengths[i] + 0.05, letter, fontsize=12)

        plt.title("Letter Frequency vs Morse Code Length")
        plt.xlabel("Relative frequency")
        plt.ylabel("Symbols per letter")
        plt.grid(True)
        plt.show()


def main():
    corpus = load_wikipedia_corpus("Morse code", n_articles=3)
    statistics = CodeStatistics()

    print("Most common letters:")
    for letter, code, frequency in statistics.most_common(corpus, n=10):
        print(f"{letter} {code:6s} -> {frequency:.4f}")

    print(f"Average code length: {statistics.average_code_length(corpus):.3f} symbols")
    print(f"Morse/text length ratio: {statistics.compression_ratio(corpus):.3f}")

    visualizer = Visualizer(statistics)
    visualizer.plot_frequency_vs_length(corpus)


if __name__ == "__main__":
    main()
