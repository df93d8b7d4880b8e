"""
Shared exception -> HTTP mapping for the dashboard routes.
"""
from fastapi import HTTPException

from app.services.pokedex_store import DataStoreUnavailableError, PokemonNotFoundError


def map_exception_to_http(exc: Exception) -> HTTPException:
    if isinstance(exc, PokemonNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, DataStoreUnavailableError):
        return HTTPException(status_code=503, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))
