from fastapi import APIRouter

from cipherkit.api.v1.endpoints import bruteforce, ciphers, decrypt, encrypt, score

api_router = APIRouter()

api_router.include_router(
    ciphers.router,
    prefix="/ciphers",
    tags=["Ciphers"],
)

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    score.router,
    prefix="/score",
    tags=["Analysis"],
)

api_router.include_router(
    bruteforce.router,
    prefix="/bruteforce",
    tags=["Brute Force"],
)
