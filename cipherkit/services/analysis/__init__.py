"""Wordlist loading and English-likelihood scoring."""

from cipherkit.services.analysis.likelihood import EnglishScorer, LikelihoodSignals
from cipherkit.services.analysis.wordlist import load_dictionary, load_wordlist

__all__ = [
    "EnglishScorer",
    "LikelihoodSignals",
    "load_dictionary",
    "load_wordlist",
]
