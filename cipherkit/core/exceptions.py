from typing import Any


class CryptanalysisError(Exception):
    """Base exception for all cryptanalysis errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CryptanalysisError):
    """Raised when input validation fails."""

    pass


class EmptyMessageError(ValidationError):
    """Raised when an operation is requested on an empty message."""

    def __init__(self) -> None:
        super().__init__("Message is empty; nothing to transform")


class MessageTooLongError(ValidationError):
    """Raised when a message exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Message length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InvalidKeyError(ValidationError):
    """Raised when key material has the wrong type, shape or range."""

    def __init__(self, parameter: str, reason: str, value: Any = None):
        self.parameter = parameter
        super().__init__(
            f"Invalid key parameter '{parameter}': {reason}",
            {"parameter": parameter, "reason": reason, "value": repr(value)},
        )


class EngineError(CryptanalysisError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )


class DecodeError(EngineError):
    """Raised when ciphertext is malformed for a deterministic decode."""

    pass


class SweepCancelledError(EngineError):
    """Raised when a brute-force sweep is cancelled or runs past its deadline."""

    def __init__(self, cipher: str, reason: str):
        super().__init__(
            f"Sweep for '{cipher}' stopped: {reason}",
            {"cipher": cipher, "reason": reason},
        )


class ResourceError(CryptanalysisError):
    """Base exception for external file resources."""

    pass


class MissingResourceError(ResourceError):
    """Raised when a wordlist or dictionary file cannot be read."""

    def __init__(self, resource: str, path: str):
        super().__init__(
            f"{resource} not found or unreadable: {path}",
            {"resource": resource, "path": path},
        )
