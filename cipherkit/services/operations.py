"""
Public operations of the toolkit.

These are the entry points a presentation layer (HTTP API, GUI, CLI)
calls: apply a cipher, score a message, brute-force a ciphertext and
look up cipher descriptions.
"""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from cipherkit.core.config import Settings, get_settings
from cipherkit.core.exceptions import (
    EmptyMessageError,
    EngineNotFoundError,
    MessageTooLongError,
    MissingResourceError,
)
from cipherkit.models.schemas import CipherInfo, CipherType, Direction, KeyMaterial
from cipherkit.services.analysis.likelihood import EnglishScorer
from cipherkit.services.analysis.wordlist import load_wordlist
from cipherkit.services.engines.registry import EngineRegistry
from cipherkit.services.pipeline.orchestrator import BruteforceOrchestrator, BruteforceResult
from cipherkit.services.pipeline.progress import BruteforceContext
from cipherkit.services.pipeline.ranker import ResultSink

logger = logging.getLogger(__name__)


def apply_cipher(
    cipher_type: CipherType | str,
    message: str,
    key: KeyMaterial = None,
    direction: Direction | str = Direction.ENCRYPT,
    settings: Settings | None = None,
) -> str:
    """
    Encrypt or decrypt a message with a known key.

    Raises:
        EmptyMessageError: If the message is empty
        MessageTooLongError: If the message exceeds the configured limit
        EngineNotFoundError: If the cipher type is unknown
        InvalidKeyError: If the key does not fit the cipher
        DecodeError: If the ciphertext is malformed
    """
    validate_message(message, settings)
    engine = EngineRegistry().get_engine(_cipher_type(cipher_type))
    return engine.apply(message, key, Direction(direction))


def score_text(
    message: str,
    wordlist_path: str | Path | None = None,
    settings: Settings | None = None,
) -> float:
    """
    Score how likely a message is to be English.

    Raises:
        EmptyMessageError: If the message is empty
        MissingResourceError: If the wordlist cannot be read
    """
    settings = settings or get_settings()
    validate_message(message, settings)
    wordlist = load_wordlist(wordlist_path or settings.wordlist_path)
    return EnglishScorer(wordlist).score(message)


def bruteforce(
    message: str,
    cipher_types: Iterable[CipherType | str],
    *,
    dictionary_limit: int | None = None,
    wordlist_path: str | Path | None = None,
    context: BruteforceContext | None = None,
    sink: ResultSink | None = None,
    dictionary: Sequence[str] | None = None,
    max_workers: int | None = None,
    settings: Settings | None = None,
) -> BruteforceResult:
    """
    Try to recover plaintext for every requested cipher.

    A missing wordlist is reported as a warning and scoring continues
    without the common-word signal.

    Raises:
        EmptyMessageError: If the message is empty
        EngineNotFoundError: If a cipher type is unknown
    """
    settings = settings or get_settings()
    validate_message(message, settings)
    kinds = [_cipher_type(t) for t in cipher_types]

    wordlist, warnings = load_scoring_wordlist(wordlist_path or settings.wordlist_path)

    orchestrator = BruteforceOrchestrator(settings=settings)
    result = orchestrator.run(
        message,
        kinds,
        wordlist,
        dictionary_limit=dictionary_limit,
        dictionary=dictionary,
        context=context,
        sink=sink,
        max_workers=max_workers,
    )
    result.warnings[:0] = warnings
    return result


def describe_cipher(cipher_type: CipherType | str) -> CipherInfo:
    """Catalogue entry for one cipher."""
    engine = EngineRegistry().get_engine(_cipher_type(cipher_type))
    return CipherInfo(
        cipher_type=engine.cipher_type,
        name=engine.name,
        family=engine.cipher_family,
        strategy=engine.strategy,
        description=engine.description,
        key_description=engine.key_description,
    )


def list_ciphers() -> list[CipherInfo]:
    return [describe_cipher(engine.cipher_type) for engine in EngineRegistry().get_all_engines()]


def validate_message(message: str, settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    if not message:
        raise EmptyMessageError()
    if len(message) > settings.max_message_length:
        raise MessageTooLongError(len(message), settings.max_message_length)


def load_scoring_wordlist(path: str | Path) -> tuple[tuple[str, ...], list[str]]:
    """Load the scoring wordlist, turning a missing file into a warning."""
    try:
        return load_wordlist(path), []
    except MissingResourceError as e:
        logger.warning("%s; scoring without common words", e.message)
        return (), [f"{e.message}; scoring without common words"]


def _cipher_type(value: CipherType | str) -> CipherType:
    try:
        return CipherType(value)
    except ValueError:
        raise EngineNotFoundError(str(value)) from None
