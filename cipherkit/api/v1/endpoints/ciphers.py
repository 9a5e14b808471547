from fastapi import APIRouter

from cipherkit.api.errors import to_http_exception
from cipherkit.core.exceptions import CryptanalysisError
from cipherkit.models.schemas import CipherInfo, ErrorResponse
from cipherkit.services.operations import describe_cipher, list_ciphers

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List every supported cipher with its family, sweep strategy and key format.",
)
async def get_ciphers() -> list[CipherInfo]:
    return list_ciphers()


@router.get(
    "/{cipher_type}",
    response_model=CipherInfo,
    responses={404: {"model": ErrorResponse, "description": "Cipher type not supported"}},
    summary="Describe a cipher",
)
async def get_cipher(cipher_type: str) -> CipherInfo:
    try:
        return describe_cipher(cipher_type)
    except CryptanalysisError as e:
        raise to_http_exception(e) from e
