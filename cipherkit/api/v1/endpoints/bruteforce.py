import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from cipherkit.api.errors import to_http_exception
from cipherkit.core.exceptions import CryptanalysisError
from cipherkit.dependencies import SettingsDep
from cipherkit.models.schemas import (
    BruteforceRequest,
    BruteforceResponse,
    CandidateModel,
    ErrorResponse,
    SweepReportModel,
    json_score,
)
from cipherkit.services.operations import bruteforce
from cipherkit.services.pipeline import FileResultSink

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=BruteforceResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Brute-force ciphertext",
    description=(
        "Try to recover plaintext without a key. Bounded ciphers are swept over "
        "their full key range; keyword ciphers are swept with the password dictionary."
    ),
)
async def bruteforce_ciphertext(
    request: BruteforceRequest,
    settings: SettingsDep,
) -> BruteforceResponse:
    """
    Brute-force a ciphertext against the requested ciphers.

    ``bruteforce_limit`` caps the number of dictionary keys; otherwise
    ``bruteforce_percentage`` is converted into a limit against the
    full dictionary size. With neither, the whole dictionary is used.
    """
    limit = request.bruteforce_limit
    if limit is None and request.bruteforce_percentage is not None:
        limit = settings.limit_from_percentage(request.bruteforce_percentage)

    sink = FileResultSink(settings.results_path) if request.write_results else None

    try:
        # Sweeps are CPU bound and use their own thread pool
        result = await run_in_threadpool(
            bruteforce,
            request.ciphertext,
            request.cipher_types,
            dictionary_limit=limit,
            sink=sink,
            settings=settings,
        )
    except CryptanalysisError as e:
        raise to_http_exception(e) from e

    if result.failed_sweeps:
        logger.info("%d of %d sweeps failed", len(result.failed_sweeps), len(result.sweeps))

    return BruteforceResponse(
        top_candidates=[
            CandidateModel(score=json_score(c.score), text=c.text, label=c.label)
            for c in result.top
        ],
        total_candidates=len(result.ranked),
        sweeps=[
            SweepReportModel(
                cipher_type=s.cipher_type,
                strategy=s.strategy,
                status=s.status,
                candidates=s.candidates,
                skipped_keys=s.skipped_keys,
                error=s.error_message,
            )
            for s in result.sweeps
        ],
        warnings=result.warnings,
        elapsed_seconds=result.elapsed_seconds,
        cancelled=result.cancelled,
        report=result.report(),
    )
