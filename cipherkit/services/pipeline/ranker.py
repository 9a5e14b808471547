"""
Candidate ranking and result sinks.

Ranking sorts candidates by descending score and drops repeated
plaintexts, keeping the best-ranked occurrence of each.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ScoredCandidate:
    """A decoded string with its likelihood score and origin label."""

    score: float
    text: str
    label: str

    def format(self) -> str:
        return f"({self.score:.2f}): {self.text.strip()} [{self.label.strip()}]"


class CandidateRanker:
    """Sorts, deduplicates and formats scored candidates."""

    def rank(self, candidates: Iterable[ScoredCandidate]) -> list[ScoredCandidate]:
        """
        Sort descending by score and remove duplicate texts.

        Ties are broken by text then label so the ranking depends only on
        the set of candidates, not on the order they arrived in.
        """
        ordered = sorted(candidates, key=lambda c: (-c.score, c.text, c.label))

        seen: set[str] = set()
        ranked = []
        for candidate in ordered:
            if candidate.text in seen:
                continue
            seen.add(candidate.text)
            ranked.append(candidate)

        return ranked

    def top(self, ranked: list[ScoredCandidate], limit: int) -> list[ScoredCandidate]:
        return ranked[:limit]

    def format_lines(self, candidates: Iterable[ScoredCandidate]) -> list[str]:
        return [c.format() for c in candidates]


class ResultSink(ABC):
    """Destination for the ranked output of a brute-force run."""

    @abstractmethod
    def write(self, top: list[ScoredCandidate], ranked: list[ScoredCandidate]) -> None:
        """Receive the top-K candidates and, separately, the full ranked list."""
        pass


class FileResultSink(ResultSink):
    """Writes the full ranked list to a text file, one candidate per line."""

    def __init__(self, path: str | Path, append: bool = False):
        self.path = Path(path)
        self.append = append

    def write(self, top: list[ScoredCandidate], ranked: list[ScoredCandidate]) -> None:
        mode = "a" if self.append else "w"
        with self.path.open(mode, encoding="utf-8") as handle:
            for candidate in ranked:
                handle.write(candidate.format() + "\n")


class MemoryResultSink(ResultSink):
    """Keeps the formatted output in memory, e.g. for a UI text box."""

    def __init__(self) -> None:
        self.top_text = ""
        self.ranked_text = ""

    def write(self, top: list[ScoredCandidate], ranked: list[ScoredCandidate]) -> None:
        self.top_text += "".join(c.format() + "\n\n" for c in top)
        self.ranked_text += "".join(c.format() + "\n" for c in ranked)
