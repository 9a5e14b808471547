import base64
import binascii

from cipherkit.core.exceptions import DecodeError
from cipherkit.models.schemas import CipherFamily, CipherType, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.registry import EngineRegistry


@EngineRegistry.register
class Base64Engine(CipherEngine):
    """
    Base64 encoding.

    Not a cipher: the UTF-8 bytes of the message are grouped into 6-bit
    units, mapped onto the standard 64-symbol alphabet and padded with
    '=' to a 24-bit boundary. Decoding must produce valid UTF-8.
    """

    name = "Base64 Encoding"
    label = "Base64"
    cipher_type = CipherType.BASE64
    cipher_family = CipherFamily.ENCODING
    strategy = SweepStrategy.BOUNDED
    description = (
        "Encodes a string in base 64 (6-bit groups mapped to a set of 64 "
        "characters). It is not secure, but can be used as a primitive means "
        "of obscuring data to the untrained eye."
    )

    def encrypt(self, message: str, key: None = None) -> str:
        return base64.b64encode(message.encode("utf-8")).decode("ascii")

    def decrypt(self, message: str, key: None = None) -> str:
        compact = "".join(message.split())
        try:
            raw = base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"Invalid Base64 input: {e}") from e

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("Base64 payload is not valid UTF-8 text") from e
