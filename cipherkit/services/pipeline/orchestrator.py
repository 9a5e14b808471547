"""
Brute-force orchestrator - recovers plaintext without a known key.

For each requested cipher the orchestrator picks one of two strategies:
1. Bounded sweep: try every key in the cipher's small closed parameter
   range, sequentially on the calling thread
2. Dictionary sweep: try every key from a password dictionary, split into
   fixed-size chunks processed concurrently by a thread pool

Every candidate is scored for English likelihood, then the whole set is
ranked, deduplicated and reported.
"""

import logging
import math
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from pathlib import Path

from cipherkit.core.config import Settings, get_settings
from cipherkit.core.exceptions import (
    CryptanalysisError,
    EmptyMessageError,
    InvalidKeyError,
    SweepCancelledError,
)
from cipherkit.models.schemas import CipherType, SweepStrategy
from cipherkit.services.analysis.likelihood import EnglishScorer
from cipherkit.services.analysis.wordlist import load_dictionary
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.registry import EngineRegistry
from cipherkit.services.pipeline.progress import MAX_PROGRESS, BruteforceContext
from cipherkit.services.pipeline.ranker import CandidateRanker, ResultSink, ScoredCandidate

logger = logging.getLogger(__name__)


@dataclass
class SweepReport:
    """Outcome of sweeping one cipher."""

    cipher_type: CipherType
    strategy: SweepStrategy
    status: str = "pending"
    candidates: int = 0
    skipped_keys: int = 0
    error: CryptanalysisError | None = None

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error is not None else None


@dataclass
class BruteforceResult:
    """Result of a brute-force run."""

    # Best candidates (top-K) and the full ranked, deduplicated list
    top: list[ScoredCandidate]
    ranked: list[ScoredCandidate]

    # One report per requested cipher, in the order they were swept
    sweeps: list[SweepReport]

    warnings: list[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    cancelled: bool = False

    @property
    def failed_sweeps(self) -> list[SweepReport]:
        return [s for s in self.sweeps if s.status == "failed"]

    def report(self) -> str:
        """Human-readable summary with the top candidates."""
        header = f"\nFinished! Total time elapsed: {int(self.elapsed_seconds)} seconds\n\n"
        lines = "".join(c.format() + "\n\n" for c in self.top)
        problems = "".join(
            f"[{s.cipher_type.value}] {s.status}: {s.error_message}\n"
            for s in self.sweeps
            if s.error is not None
        )
        notes = "".join(f"Warning: {w}\n" for w in self.warnings)
        return header + lines + problems + notes


@dataclass
class _ChunkResult:
    candidates: list[ScoredCandidate]
    skipped: int


class BruteforceOrchestrator:
    """
    Runs bounded and dictionary sweeps for a set of ciphers.

    One cipher's failure (bad input for that decoder, missing dictionary)
    is recorded in its SweepReport and never stops the other sweeps.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: EngineRegistry | None = None,
        ranker: CandidateRanker | None = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry or EngineRegistry()
        self.ranker = ranker or CandidateRanker()

    def run(
        self,
        message: str,
        cipher_types: Iterable[CipherType],
        wordlist: Iterable[str],
        *,
        dictionary_limit: int | None = None,
        dictionary: Sequence[str] | None = None,
        dictionary_path: str | Path | None = None,
        context: BruteforceContext | None = None,
        sink: ResultSink | None = None,
        max_workers: int | None = None,
        timeout_seconds: float | None = None,
    ) -> BruteforceResult:
        """
        Brute-force a message against every requested cipher.

        Args:
            message: The ciphertext
            cipher_types: Ciphers to try; repeats are ignored
            wordlist: Common words used by the scorer, loaded once
            dictionary_limit: Only use this many dictionary keys
            dictionary: In-memory keys, used instead of reading a file
            dictionary_path: Password dictionary file (defaults to settings)
            context: Caller-owned progress/cancellation state
            sink: Receives the top-K and full ranked lists
            max_workers: Thread pool size for dictionary sweeps
            timeout_seconds: Stop dictionary sweeps after this long

        Returns:
            BruteforceResult with ranked candidates and per-cipher reports

        Raises:
            EmptyMessageError: If the message is empty
        """
        if not message:
            raise EmptyMessageError()

        started = time.perf_counter()
        context = context or BruteforceContext()
        scorer = EnglishScorer(wordlist)
        max_workers = max_workers or self.settings.max_workers
        timeout = timeout_seconds
        if timeout is None:
            timeout = self.settings.bruteforce_timeout_seconds
        deadline = time.monotonic() + timeout if timeout is not None else None

        engines = [self.registry.get_engine(t) for t in dict.fromkeys(cipher_types)]
        warnings: list[str] = []

        # The password list is read once and shared by every dictionary sweep
        keys: Sequence[str] = ()
        dictionary_error: CryptanalysisError | None = None
        if any(e.strategy == SweepStrategy.DICTIONARY for e in engines):
            context.report_status("Loading password bruteforce list...")
            try:
                keys = self._load_keys(dictionary, dictionary_path, dictionary_limit)
            except CryptanalysisError as e:
                dictionary_error = e
                logger.warning("%s", e.message)
                warnings.append(e.message)
            else:
                if not keys:
                    warnings.append("Password dictionary is empty; dictionary sweeps tried no keys")

        chunk_size = self.settings.chunk_size
        chunk_count = max(1, math.ceil(len(keys) / chunk_size))
        units = sum(
            chunk_count if e.strategy == SweepStrategy.DICTIONARY else 1 for e in engines
        )
        unit = MAX_PROGRESS / units if units else MAX_PROGRESS

        candidates: list[ScoredCandidate] = []
        reports: list[SweepReport] = []

        for engine in engines:
            report = SweepReport(cipher_type=engine.cipher_type, strategy=engine.strategy)
            reports.append(report)
            share = unit * (chunk_count if engine.strategy == SweepStrategy.DICTIONARY else 1)

            if self._should_stop(context, deadline):
                report.status = "cancelled"
                report.error = self._cancelled_error(engine, context)
                continue

            context.report_status(f"Checking {engine.name}...")
            logger.info("Sweeping %s (%s)", engine.name, engine.strategy.value)

            try:
                if engine.strategy == SweepStrategy.BOUNDED:
                    found = self._sweep_bounded(engine, message, scorer, context, deadline)
                    context.report_progress(share)
                else:
                    if dictionary_error is not None:
                        raise dictionary_error
                    found, report.skipped_keys = self._sweep_dictionary(
                        engine, message, scorer, keys, context, unit, max_workers, deadline
                    )
            except CryptanalysisError as e:
                report.status = "failed"
                report.error = e
                context.report_progress(share)
                logger.error("%s sweep failed: %s", engine.name, e.message)
                continue

            candidates.extend(found)
            report.candidates = len(found)

            if self._should_stop(context, deadline):
                report.status = "cancelled"
                report.error = self._cancelled_error(engine, context)
            else:
                report.status = "completed"
            if report.skipped_keys:
                logger.debug("%s skipped %d unusable keys", engine.name, report.skipped_keys)

        context.report_status("Sorting results...")
        ranked = self.ranker.rank(candidates)
        top = self.ranker.top(ranked, self.settings.top_results)

        if sink is not None:
            sink.write(top, ranked)

        context.complete()
        elapsed = time.perf_counter() - started
        logger.info("Brute force finished in %.2fs with %d unique candidates", elapsed, len(ranked))

        return BruteforceResult(
            top=top,
            ranked=ranked,
            sweeps=reports,
            warnings=warnings,
            elapsed_seconds=elapsed,
            cancelled=context.cancelled,
        )

    def _load_keys(
        self,
        dictionary: Sequence[str] | None,
        dictionary_path: str | Path | None,
        limit: int | None,
    ) -> Sequence[str]:
        if dictionary is not None:
            return dictionary if limit is None else dictionary[:limit]
        return load_dictionary(dictionary_path or self.settings.dictionary_path, limit)

    def _sweep_bounded(
        self,
        engine: CipherEngine,
        message: str,
        scorer: EnglishScorer,
        context: BruteforceContext,
        deadline: float | None,
    ) -> list[ScoredCandidate]:
        """Try every key in the engine's closed parameter range until stopped."""
        found = []
        for key in engine.sweep_keys(message):
            if self._should_stop(context, deadline):
                break
            text = engine.decrypt(message, key)
            found.append(ScoredCandidate(scorer.score(text), text, engine.candidate_label(key)))
        return found

    def _sweep_dictionary(
        self,
        engine: CipherEngine,
        message: str,
        scorer: EnglishScorer,
        keys: Sequence[str],
        context: BruteforceContext,
        unit: float,
        max_workers: int,
        deadline: float | None,
    ) -> tuple[list[ScoredCandidate], int]:
        """
        Try every dictionary key, one pool task per chunk.

        Each task builds its own result list; the lists are merged once,
        in chunk order, after all tasks finish.
        """
        chunk_size = self.settings.chunk_size
        chunks = [keys[i:i + chunk_size] for i in range(0, len(keys), chunk_size)]

        if not chunks:
            context.report_progress(unit)
            return [], 0

        results: list[_ChunkResult | None] = [None] * len(chunks)
        pending: dict[Future, int] = {}
        next_chunk = 0
        max_in_flight = max_workers * 2

        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            while next_chunk < len(chunks) or pending:
                while next_chunk < len(chunks) and len(pending) < max_in_flight:
                    if self._should_stop(context, deadline):
                        next_chunk = len(chunks)
                        break
                    future = pool.submit(
                        self._process_chunk,
                        engine, message, scorer, chunks[next_chunk], context, unit, deadline,
                    )
                    pending[future] = next_chunk
                    next_chunk += 1

                if not pending:
                    break

                done, _ = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    results[pending.pop(future)] = future.result()

        context.report_status("Collecting and joining results...")
        found: list[ScoredCandidate] = []
        skipped = 0
        for result in results:
            if result is None:
                continue
            found.extend(result.candidates)
            skipped += result.skipped

        return found, skipped

    def _process_chunk(
        self,
        engine: CipherEngine,
        message: str,
        scorer: EnglishScorer,
        chunk: Sequence[str],
        context: BruteforceContext,
        unit: float,
        deadline: float | None,
    ) -> _ChunkResult | None:
        if self._should_stop(context, deadline):
            return None

        found = []
        skipped = 0
        for raw_key in chunk:
            try:
                key = engine.parse_key(raw_key, message)
            except InvalidKeyError:
                skipped += 1
                continue
            text = engine.decrypt(message, key)
            found.append(ScoredCandidate(scorer.score(text), text, engine.candidate_label(key)))

        context.report_progress(unit)
        return _ChunkResult(found, skipped)

    @staticmethod
    def _cancelled_error(engine: CipherEngine, context: BruteforceContext) -> SweepCancelledError:
        return SweepCancelledError(engine.cipher_type.value, context.cancel_reason or "cancelled")

    @staticmethod
    def _should_stop(
        context: BruteforceContext,
        deadline: float | None,
    ) -> bool:
        if context.cancelled:
            return True
        if deadline is not None and time.monotonic() >= deadline:
            context.cancel("deadline exceeded")
            return True
        return False
