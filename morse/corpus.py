import re

import requests
import wikipedia


_NON_LETTER_RE = re.compile(r"[^A-Z]+")


def normalize_text(text: str) -> str:
    """
    Reduces text to the encoder's alphabet: uppercase A-Z words joined by single spaces.
    """
    return _NON_LETTER_RE.sub(" ", text.upper()).strip()


# ---------------------- Wikipedia ---------------------- #
def load_wikipedia_corpus(query="Morse code", n_articles=3):
    """
    Fetches paragraphs from a few Wikipedia articles, normalized for encoding.
    """
    sentences = []
    topics = [
        query,
        "Samuel Morse",
        "Telegraphy",
        "Amateur radio",
        "Prosigns for Morse code",
    ]
    for topic in topics[:n_articles]:
        try:
            text = wikipedia.page(topic).content
        except (wikipedia.exceptions.WikipediaException, requests.exceptions.RequestException) as e:
            print(f"Skipping {topic}: {e}")
            continue

        for paragraph in text.split("\n"):
            if len(paragraph.split()) > 5:  # Skip short lines
                normalized = normalize_text(paragraph)
                if normalized:
                    sentences.append(normalized)

    print(f"Loaded {len(sentences)} Wikipedia paragraphs.")
    return sentences
