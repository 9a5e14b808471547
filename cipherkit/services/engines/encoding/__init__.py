"""Encoding engines (Baconian digits, Base64)."""

from cipherkit.services.engines.encoding.baconian import BaconianEngine
from cipherkit.services.engines.encoding.base64_codec import Base64Engine

__all__ = [
    "BaconianEngine",
    "Base64Engine",
]
