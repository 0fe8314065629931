"""
Mise en forme des erreurs du catalogue en reponses JSON.

Chaque type d'erreur a un statut HTTP distinct pour que les clients puissent
distinguer "rien a afficher" (404) de "service degrade" (5xx).
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..core.errors import (
    CatalogError,
    EmptyCatalogError,
    InternalRequestError,
    ProviderEmptyResultError,
    ProviderRejectedError,
    ProviderUnreachableError,
    StoreUnavailableError,
)

# Statut HTTP par type d'erreur (le premier type de la MRO gagne)
_STATUS_BY_ERROR: dict[type[CatalogError], int] = {
    EmptyCatalogError: 404,
    ProviderEmptyResultError: 404,
    ProviderRejectedError: 502,
    ProviderUnreachableError: 503,
    InternalRequestError: 500,
    StoreUnavailableError: 500,
}


# Seules ces erreurs exposent leurs details au client
_DETAILED_ERRORS = (ProviderRejectedError, InternalRequestError, StoreUnavailableError)


def status_for(exc: CatalogError) -> int:
    """Retourne le statut HTTP associe a une erreur du catalogue."""
    for cls in type(exc).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return 500


def error_body(exc: CatalogError) -> dict:
    """Construit le corps JSON {error, details?}."""
    body = {"error": exc.message}
    if isinstance(exc, _DETAILED_ERRORS):
        body["details"] = exc.details
    return body


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info(
        "Requete catalogue en echec",
        path=request.url.path,
        kind=type(exc).__name__,
        status=status_code,
    )
    return JSONResponse(status_code=status_code, content=error_body(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("Erreur non classee", path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": InternalRequestError.default_message, "details": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Installe les gestionnaires d'erreurs sur l'application."""
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
