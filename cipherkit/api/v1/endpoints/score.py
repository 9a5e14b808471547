from fastapi import APIRouter

from cipherkit.api.errors import to_http_exception
from cipherkit.core.exceptions import CryptanalysisError
from cipherkit.dependencies import SettingsDep
from cipherkit.models.schemas import ErrorResponse, ScoreRequest, ScoreResponse, json_score
from cipherkit.services.operations import score_text

router = APIRouter()


@router.post(
    "",
    response_model=ScoreResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        503: {"model": ErrorResponse, "description": "Wordlist unavailable"},
    },
    summary="Score English likelihood",
    description="Score how likely a message is to be English plaintext.",
)
async def score_message(
    request: ScoreRequest,
    settings: SettingsDep,
) -> ScoreResponse:
    try:
        score = score_text(request.message, settings=settings)
    except CryptanalysisError as e:
        raise to_http_exception(e) from e

    return ScoreResponse(score=json_score(score))
