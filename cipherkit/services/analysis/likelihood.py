"""
English-likelihood scoring.

Turns a candidate plaintext into a single plausibility score (higher is
more English-like) from five independent signals:

1. Common-word hit rate                (weight 0.20)
2. Word-length plausibility            (weight 0.10)
3. Alphabetic density                  (weight 0.25)
4. First/last-letter plausibility      (weight 0.15)
5. Letter-frequency fit                (weight 0.30)

The final score is ``100 * sum(weight * signal)``.
"""

import math
import string
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

# Only text with no letters at all scores this; real scores are unbounded below
MINIMUM_SCORE = -math.inf


@dataclass(frozen=True)
class LikelihoodSignals:
    """The normalized sub-signals behind one score."""

    word_hits: float
    word_length: float
    alphabetic_density: float
    edge_letters: float
    frequency_fit: float


class EnglishScorer:
    """
    Scores how plausibly a string is English plaintext.

    The wordlist is fixed at construction and never modified, so one
    scorer can be shared by every worker of a brute-force run.
    """

    # Relative English letter frequencies, a..z
    LETTER_FREQ: ClassVar[dict[str, float]] = dict(zip(string.ascii_lowercase, (
        0.08167, 0.01492, 0.02782, 0.04253, 0.12702, 0.02228, 0.02015, 0.06094,
        0.06966, 0.00153, 0.00772, 0.04025, 0.02406, 0.06749, 0.07507, 0.01929,
        0.00095, 0.05987, 0.06327, 0.09056, 0.02758, 0.00978, 0.02360, 0.00150,
        0.01974, 0.00074,
    )))

    # The ten most common word-initial and word-final letters
    FIRST_LETTER: ClassVar[dict[str, float]] = {
        "t": 0.1594, "a": 0.1550, "i": 0.0823, "s": 0.0775, "o": 0.0712,
        "c": 0.0597, "m": 0.0426, "f": 0.0408, "p": 0.0400, "w": 0.0382,
    }
    LAST_LETTER: ClassVar[dict[str, float]] = {
        "e": 0.1917, "s": 0.1435, "d": 0.0923, "t": 0.0864, "n": 0.0786,
        "y": 0.0730, "r": 0.0693, "o": 0.0467, "l": 0.0456, "f": 0.0408,
    }
    # A word starting with 't' and ending with 'e'
    PERFECT_EDGE: ClassVar[float] = 0.1594 + 0.1917

    AVG_WORD_LENGTH: ClassVar[float] = 4.7

    WEIGHTS: ClassVar[dict[str, float]] = {
        "word_hits": 0.20,
        "word_length": 0.10,
        "alphabetic_density": 0.25,
        "edge_letters": 0.15,
        "frequency_fit": 0.30,
    }

    def __init__(self, wordlist: Iterable[str] = ()):
        self.wordlist = tuple(wordlist)

    def score(self, message: str) -> float:
        """
        Score a candidate plaintext.

        Empty or letter-free input scores MINIMUM_SCORE, which ranks
        below every real score. Real scores have no lower bound; long
        unspaced text can score far below zero.
        """
        signals = self.signals(message)
        if signals is None:
            return MINIMUM_SCORE

        total = sum(weight * getattr(signals, name) for name, weight in self.WEIGHTS.items())
        return 100.0 * total

    def signals(self, message: str) -> LikelihoodSignals | None:
        """Compute the normalized sub-signals, or None for letter-free text."""
        text = message.strip().lower()
        char_count = len(text)
        letter_counts = Counter(c for c in text if c in self.LETTER_FREQ)
        letter_total = sum(letter_counts.values())

        if char_count == 0 or letter_total == 0:
            return None

        words = text.split()

        hits = sum(1 for word in self.wordlist if word in text)

        length_penalty = sum(
            abs(len(word) - self.AVG_WORD_LENGTH) ** 1.3 for word in words
        ) / len(words)

        edge = sum(
            self.FIRST_LETTER.get(word[0], 0.0) + self.LAST_LETTER.get(word[-1], 0.0)
            for word in words
        )

        deviation = sum(
            abs(expected - letter_counts[letter] / char_count)
            for letter, expected in self.LETTER_FREQ.items()
        )

        return LikelihoodSignals(
            word_hits=hits * 3 / char_count,
            word_length=1.0 - length_penalty / 8,
            alphabetic_density=letter_total / char_count,
            edge_letters=edge / self.PERFECT_EDGE / len(words),
            frequency_fit=1.0 - deviation,
        )
