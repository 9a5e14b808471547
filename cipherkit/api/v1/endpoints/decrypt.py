from fastapi import APIRouter

from cipherkit.api.errors import to_http_exception
from cipherkit.core.exceptions import CryptanalysisError
from cipherkit.dependencies import SettingsDep
from cipherkit.models.schemas import CipherResponse, DecryptRequest, Direction, ErrorResponse
from cipherkit.services.operations import apply_cipher

router = APIRouter()


@router.post(
    "",
    response_model=CipherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        422: {"model": ErrorResponse, "description": "Malformed ciphertext"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and known key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
) -> CipherResponse:
    try:
        text = apply_cipher(
            request.cipher_type,
            request.ciphertext,
            request.key,
            Direction.DECRYPT,
            settings,
        )
    except CryptanalysisError as e:
        raise to_http_exception(e) from e

    return CipherResponse(
        text=text,
        cipher_type=request.cipher_type,
        direction=Direction.DECRYPT,
        key_used=request.key,
    )
