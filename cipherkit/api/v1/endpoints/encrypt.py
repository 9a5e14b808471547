from fastapi import APIRouter

from cipherkit.api.errors import to_http_exception
from cipherkit.core.exceptions import CryptanalysisError
from cipherkit.dependencies import SettingsDep
from cipherkit.models.schemas import CipherResponse, Direction, EncryptRequest, ErrorResponse
from cipherkit.services.operations import apply_cipher

router = APIRouter()


@router.post(
    "",
    response_model=CipherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        422: {"model": ErrorResponse, "description": "Input cannot be encoded"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with a specified cipher type and key.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> CipherResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Keyed ciphers require a key; there is no default key.
    """
    try:
        text = apply_cipher(
            request.cipher_type,
            request.plaintext,
            request.key,
            Direction.ENCRYPT,
            settings,
        )
    except CryptanalysisError as e:
        raise to_http_exception(e) from e

    return CipherResponse(
        text=text,
        cipher_type=request.cipher_type,
        direction=Direction.ENCRYPT,
        key_used=request.key,
    )
