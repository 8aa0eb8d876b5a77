"""
Traduction des erreurs metier en reponses HTTP.

Seul endroit ou un ErrorKind devient un code de statut :
- validation, type refuse, taille invalide : 400
- introuvable : 404
- conflits d'etat (doublon, transition, prix manquant, ordre termine) : 409
- erreurs internes (numero deja assigne, stockage, donnee corrompue) : 500
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..core.errors import ErrorKind, OsServiceError

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNSUPPORTED_TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_SIZE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorKind.MISSING_PRICE: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_STATE: status.HTTP_409_CONFLICT,
    ErrorKind.ALREADY_SET: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.CORRUPT_RECORD: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(kind: ErrorKind) -> int:
    """Retourne le code HTTP associe a une categorie d'erreur."""
    return STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_response(exc: OsServiceError) -> JSONResponse:
    """Construit la reponse JSON d'une erreur metier."""
    code = status_code_for(exc.kind)
    content = {"error": exc.kind.value, "detail": str(exc)}
    field = getattr(exc, "field", None)
    if field:
        content["field"] = field
    return JSONResponse(status_code=code, content=content)


async def handle_service_error(request: Request, exc: OsServiceError) -> JSONResponse:
    if status_code_for(exc.kind) >= 500:
        logger.error(f"{request.method} {request.url.path} : {exc.kind.value} - {exc}")
    else:
        logger.debug(f"{request.method} {request.url.path} : {exc.kind.value} - {exc}")
    return error_response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre la traduction des erreurs metier sur l'application."""
    app.add_exception_handler(OsServiceError, handle_service_error)
