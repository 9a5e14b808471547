from fastapi import HTTPException, status

from cipherkit.core.exceptions import (
    CryptanalysisError,
    DecodeError,
    EngineNotFoundError,
    ResourceError,
    ValidationError,
)
from cipherkit.models.schemas import ErrorResponse


def to_http_exception(error: CryptanalysisError) -> HTTPException:
    """Map a toolkit error onto the HTTP status a client should see."""
    if isinstance(error, EngineNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, DecodeError):
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif isinstance(error, ResourceError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR

    body = ErrorResponse(
        error=type(error).__name__,
        message=error.message,
        details=error.details,
    )
    return HTTPException(status_code=code, detail=body.model_dump())
