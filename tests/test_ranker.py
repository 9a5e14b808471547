"""
Tests for candidate ranking, result sinks and progress reporting.
"""
import threading
import time

import pytest

from cipherkit.services.pipeline import (
    MAX_PROGRESS,
    BruteforceContext,
    CandidateRanker,
    FileResultSink,
    MemoryResultSink,
    ScoredCandidate,
)


@pytest.fixture
def candidates():
    return [
        ScoredCandidate(10.0, "ifmmp", "Caesar[1]"),
        ScoredCandidate(55.5, "hello", "Caesar[2]"),
        ScoredCandidate(30.0, "hello", "Vigenere - b"),
        ScoredCandidate(-100.0, "zzzz", "Atbash"),
    ]


class TestCandidateRanker:
    def test_rank_sorts_descending_and_dedupes(self, candidates):
        ranked = CandidateRanker().rank(candidates)
        assert [c.text for c in ranked] == ["hello", "ifmmp", "zzzz"]
        assert ranked[0].label == "Caesar[2]"

    def test_rank_is_order_independent(self, candidates):
        ranker = CandidateRanker()
        assert ranker.rank(candidates) == ranker.rank(list(reversed(candidates)))

    def test_top(self, candidates):
        ranker = CandidateRanker()
        assert len(ranker.top(ranker.rank(candidates), 2)) == 2

    def test_format(self):
        candidate = ScoredCandidate(12.5, "  hello world \n", " Caesar[5] ")
        assert candidate.format() == "(12.50): hello world [Caesar[5]]"


class TestResultSinks:
    def test_file_sink_writes_full_ranking(self, tmp_path, candidates):
        ranked = CandidateRanker().rank(candidates)
        path = tmp_path / "results.txt"
        FileResultSink(path).write(ranked[:1], ranked)

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines == [c.format() for c in ranked]

    def test_file_sink_append(self, tmp_path, candidates):
        path = tmp_path / "results.txt"
        path.write_text("previous\n", encoding="utf-8")
        FileResultSink(path, append=True).write([], candidates[:1])
        assert path.read_text(encoding="utf-8").splitlines()[0] == "previous"

    def test_memory_sink(self, candidates):
        sink = MemoryResultSink()
        sink.write(candidates[:1], candidates)
        assert sink.top_text == candidates[0].format() + "\n\n"
        assert sink.ranked_text.count("\n") == len(candidates)


class TestBruteforceContext:
    def test_progress_is_capped(self):
        context = BruteforceContext()
        context.report_progress(300)
        context.report_progress(300)
        assert context.progress == MAX_PROGRESS
        assert context.percent == 100.0

    def test_negative_delta_is_ignored(self):
        context = BruteforceContext()
        context.report_progress(10)
        context.report_progress(-5)
        assert context.progress == 10

    def test_concurrent_updates(self):
        context = BruteforceContext()

        def work():
            for _ in range(1000):
                context.report_progress(0.01)

        threads = [threading.Thread(target=work) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert context.progress == pytest.approx(80.0)

    def test_progress_callbacks_are_serialized(self):
        seen = []
        active = 0
        max_active = 0
        guard = threading.Lock()

        def on_progress(value):
            nonlocal active, max_active
            with guard:
                active += 1
                max_active = max(max_active, active)
            time.sleep(0.0001)
            seen.append(value)
            with guard:
                active -= 1

        context = BruteforceContext(on_progress=on_progress)

        def work():
            for _ in range(50):
                context.report_progress(0.5)

        threads = [threading.Thread(target=work) for _ in range(6)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert max_active == 1
        assert len(seen) == 300
        assert seen == sorted(seen)
        assert seen[-1] == pytest.approx(150.0)

    def test_callbacks(self):
        progress, status = [], []
        context = BruteforceContext(on_progress=progress.append, on_status=status.append)
        context.report_status("Checking Caesar Cipher...")
        context.report_progress(90)
        context.complete()
        assert status == ["Checking Caesar Cipher..."]
        assert progress == [90, MAX_PROGRESS]

    def test_reset_clears_cancellation(self):
        context = BruteforceContext()
        context.report_progress(100)
        context.cancel("stop")
        assert context.cancelled
        assert context.cancel_reason == "stop"

        context.reset()
        assert not context.cancelled
        assert context.progress == 0
        assert context.cancel_reason is None
