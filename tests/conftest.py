import pytest

from cipherkit.core.config import DATA_DIR, Settings
from cipherkit.services.engines.registry import EngineRegistry


@pytest.fixture
def registry():
    return EngineRegistry()


@pytest.fixture
def settings(tmp_path):
    """Settings pointing every file resource at a throwaway directory."""
    return Settings(
        wordlist_path=DATA_DIR / "1000_most_common.txt",
        dictionary_path=tmp_path / "missing_dictionary.txt",
        results_path=tmp_path / "results.txt",
        max_workers=2,
    )
