import random
import re

from cipherkit.core.exceptions import DecodeError
from cipherkit.models.schemas import CipherFamily, CipherType, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.primitives import ALPHABET_SIZE, is_ascii_letter, letter_index
from cipherkit.services.engines.registry import EngineRegistry

BITS_PER_LETTER = 5
ONE_THRESHOLD = 7

_TOKEN = re.compile(r"[0-9]+|\s+|.", re.DOTALL)


@EngineRegistry.register
class BaconianEngine(CipherEngine):
    """
    Baconian cipher engine.

    Each letter becomes the 5-bit binary form of its 0-25 position, and
    every bit is written as a random digit: 0-6 for a zero bit, 7-9 for a
    one bit. Encryption is therefore non-deterministic; decryption only
    looks at the threshold.

    Whitespace passes through in both directions. Characters that are
    neither letters nor whitespace cannot be represented and are left out
    of the encoding. Decoded letters come back lowercase.
    """

    name = "Baconian Cipher"
    label = "Bacon"
    cipher_type = CipherType.BACONIAN
    cipher_family = CipherFamily.ENCODING
    strategy = SweepStrategy.BOUNDED
    description = (
        "A substitution cipher that encodes each letter as five binary digits, "
        "written here as randomized digits where 6 and below are 0s and 7 and "
        "above are 1s. Numbers in the message do not survive encryption."
    )

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def encrypt(self, message: str, key: None = None) -> str:
        result = []
        for char in message:
            if is_ascii_letter(char):
                bits = format(letter_index(char), f"0{BITS_PER_LETTER}b")
                result.extend(self._digit_for(bit) for bit in bits)
            elif char.isspace():
                result.append(char)

        return "".join(result)

    def decrypt(self, message: str, key: None = None) -> str:
        result = []
        for match in _TOKEN.finditer(message):
            token = match.group()
            if token.isspace():
                result.append(token)
            elif token[0] in "0123456789":
                result.append(self._decode_run(token, match.start()))
            else:
                raise DecodeError(
                    f"Unexpected character {token!r} at position {match.start()}; "
                    "Baconian ciphertext may only contain digits and whitespace",
                    {"position": match.start(), "character": token},
                )

        return "".join(result)

    def _digit_for(self, bit: str) -> str:
        if bit == "1":
            return str(self.rng.randint(ONE_THRESHOLD, 9))
        return str(self.rng.randint(0, ONE_THRESHOLD - 1))

    def _decode_run(self, run: str, offset: int) -> str:
        if len(run) % BITS_PER_LETTER:
            raise DecodeError(
                f"Digit run of length {len(run)} at position {offset} is not a "
                f"multiple of {BITS_PER_LETTER}",
                {"position": offset, "length": len(run)},
            )

        letters = []
        for start in range(0, len(run), BITS_PER_LETTER):
            group = run[start:start + BITS_PER_LETTER]
            value = int("".join("1" if int(d) >= ONE_THRESHOLD else "0" for d in group), 2)
            if value >= ALPHABET_SIZE:
                raise DecodeError(
                    f"Digit group {group!r} at position {offset + start} decodes to "
                    f"{value}, outside the alphabet",
                    {"position": offset + start, "value": value},
                )
            letters.append(chr(ord("a") + value))

        return "".join(letters)
