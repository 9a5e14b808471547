import logging
from itertools import islice
from pathlib import Path

from cipherkit.core.exceptions import MissingResourceError

logger = logging.getLogger(__name__)


def load_wordlist(path: str | Path) -> tuple[str, ...]:
    """
    Load a newline-delimited list of common words.

    Words are stripped and lowercased; blank lines and repeats are dropped
    while keeping file order. The result is immutable so it can be shared
    across worker threads.

    Raises:
        MissingResourceError: If the file cannot be read
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as handle:
            words = (line.strip().lower() for line in handle)
            wordlist = tuple(dict.fromkeys(w for w in words if w))
    except OSError as e:
        raise MissingResourceError("Wordlist", str(path)) from e

    logger.debug("Loaded %d words from %s", len(wordlist), path)
    return wordlist


def load_dictionary(path: str | Path, limit: int | None = None) -> list[str]:
    """
    Load candidate keys from a password dictionary.

    Only the first ``limit`` lines are read when a limit is given. Line
    endings are removed but the keys are otherwise kept verbatim; bytes
    that are not UTF-8 are replaced, and the engines reject such keys.

    Raises:
        MissingResourceError: If the file cannot be read
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            lines = handle if limit is None else islice(handle, limit)
            keys = [line.rstrip("\r\n") for line in lines]
    except OSError as e:
        raise MissingResourceError("Password dictionary", str(path)) from e

    logger.debug("Loaded %d candidate keys from %s", len(keys), path)
    return keys
