"""
Brute-force pipeline.

Given a ciphertext and a set of cipher types, the pipeline:
1. Sweeps each cipher's key space (bounded range or password dictionary)
2. Scores every decoded candidate for English likelihood
3. Ranks and deduplicates the candidates
4. Hands the top-K and full ranked lists to a result sink
"""

from cipherkit.services.pipeline.progress import MAX_PROGRESS, BruteforceContext
from cipherkit.services.pipeline.ranker import (
    CandidateRanker,
    FileResultSink,
    MemoryResultSink,
    ResultSink,
    ScoredCandidate,
)
from cipherkit.services.pipeline.orchestrator import (
    BruteforceOrchestrator,
    BruteforceResult,
    SweepReport,
)

__all__ = [
    "MAX_PROGRESS",
    "BruteforceContext",
    "BruteforceOrchestrator",
    "BruteforceResult",
    "CandidateRanker",
    "FileResultSink",
    "MemoryResultSink",
    "ResultSink",
    "ScoredCandidate",
    "SweepReport",
]
