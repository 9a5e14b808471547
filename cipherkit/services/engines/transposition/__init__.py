"""Transposition cipher engines."""

from cipherkit.services.engines.transposition.rail_fence import RailFenceEngine
from cipherkit.services.engines.transposition.columnar import ColumnarEngine

__all__ = [
    "RailFenceEngine",
    "ColumnarEngine",
]
