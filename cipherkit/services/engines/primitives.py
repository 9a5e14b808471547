"""
Transform primitives shared by several cipher engines.

The band shift works over the 79 printable symbols ``'0'..'~'`` rather
than the 26-letter alphabet, so digits and punctuation are scrambled too.
Characters outside the band (whitespace, control characters, anything
non-ASCII) are never touched.
"""

import math
import string

BAND_LOW = 48  # '0'
BAND_HIGH = 126  # '~'
BAND_SIZE = BAND_HIGH - BAND_LOW + 1  # 79

ALPHABET_SIZE = 26


def shift_char(char: str, delta: int) -> str:
    """Shift a character within the printable band, wrapping around."""
    code = ord(char)
    if code < BAND_LOW or code > BAND_HIGH:
        return char
    # Python's % is already non-negative for a positive modulus
    return chr((code - BAND_LOW + delta) % BAND_SIZE + BAND_LOW)


def shift_text(text: str, delta: int) -> str:
    """Apply the band shift to every character of a string."""
    return "".join(shift_char(c, delta) for c in text)


def key_shift(key_char: str) -> int:
    """Shift value contributed by one key character (``'a'`` is zero)."""
    return ord(key_char.lower()) - ord("a")


def mod_inverse(a: int, m: int = ALPHABET_SIZE) -> int | None:
    """Modular multiplicative inverse of ``a`` mod ``m``, or None if none exists."""
    if math.gcd(a, m) != 1:
        return None
    return pow(a, -1, m)


def is_ascii_letter(char: str) -> bool:
    return char in string.ascii_letters


def letter_index(char: str) -> int:
    """0-25 position of an ASCII letter, ignoring case."""
    return ord(char.lower()) - ord("a")


def letter_from_index(index: int, upper: bool) -> str:
    """Letter at position ``index`` (taken mod 26) in the requested case."""
    alphabet = string.ascii_uppercase if upper else string.ascii_lowercase
    return alphabet[index % ALPHABET_SIZE]
