import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"
    ENCODING = "encoding"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    VIGENERE = "vigenere"
    BEAUFORT = "beaufort"
    AUTOKEY = "autokey"
    ATBASH = "atbash"
    ROT13 = "rot13"
    AFFINE = "affine"
    BACONIAN = "baconian"
    RAIL_FENCE = "railfence"
    POLYBIUS = "polybius"
    SIMPLE_SUBSTITUTION = "simplesub"
    COLUMNAR = "columnar"
    BASE64 = "base64"


class Direction(str, Enum):
    """Direction of a cipher transform."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class SweepStrategy(str, Enum):
    """How the brute-force orchestrator searches a cipher's key space."""

    BOUNDED = "bounded"
    DICTIONARY = "dictionary"


# Key material accepted by the engines: an integer, an (a, b) pair,
# a string, a dict with named parameters, or nothing at all.
KeyMaterial = int | str | list[int] | tuple[int, int] | dict[str, Any] | None


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1)
    cipher_type: CipherType
    key: KeyMaterial = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1)
    cipher_type: CipherType
    key: KeyMaterial = None


class ScoreRequest(BaseModel):
    """Request schema for /score endpoint."""

    message: str = Field(min_length=1)


class BruteforceRequest(BaseModel):
    """Request schema for /bruteforce endpoint."""

    ciphertext: str = Field(min_length=1)
    cipher_types: list[CipherType] = Field(min_length=1)
    bruteforce_limit: int | None = Field(default=None, ge=0)
    bruteforce_percentage: float | None = Field(default=None, ge=0.0, le=100.0)
    write_results: bool = False


# ============================================================================
# Response Schemas
# ============================================================================


class CipherResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    text: str
    cipher_type: CipherType
    direction: Direction
    key_used: KeyMaterial = None


class ScoreResponse(BaseModel):
    """Response schema for /score endpoint."""

    # None when the message has no letters to score
    score: float | None


class CandidateModel(BaseModel):
    """A single ranked plaintext candidate."""

    score: float | None
    text: str
    label: str


class SweepReportModel(BaseModel):
    """Outcome of one cipher's sweep."""

    cipher_type: CipherType
    strategy: SweepStrategy
    status: str
    candidates: int
    skipped_keys: int = 0
    error: str | None = None


class BruteforceResponse(BaseModel):
    """Response schema for /bruteforce endpoint."""

    top_candidates: list[CandidateModel]
    total_candidates: int
    sweeps: list[SweepReportModel]
    warnings: list[str]
    elapsed_seconds: float
    cancelled: bool
    report: str


class CipherInfo(BaseModel):
    """Catalogue entry for one cipher."""

    cipher_type: CipherType
    name: str
    family: CipherFamily
    strategy: SweepStrategy
    description: str
    key_description: str


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


def json_score(score: float) -> float | None:
    """JSON has no infinity; letter-free candidates are reported as null."""
    return score if math.isfinite(score) else None
