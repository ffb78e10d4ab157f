"""
➡️ But : Convertir toutes les erreurs en réponses JSON {"error": ...}.

Validation (corps JSON invalide, titre manquant, statut inconnu, patch vide) → 400

Tâche introuvable → 404 (+ id)

Échec de sérialisation / erreur inattendue → 500, sans faire tomber le process.

🔹 Avantages :

Routes et services ne connaissent pas le format des erreurs HTTP.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.domain.models import TaskStatus
from todo_api.domain.services import EmptyPatchError, TaskNotFoundError

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, **context: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, **context})


def _validation_payload(errors: list[dict]) -> dict[str, Any]:
    """Choisit le message d'erreur : corps JSON, puis titre, puis statut."""
    for err in errors:
        loc = tuple(err.get("loc", ()))
        # corps absent, illisible ou pas un objet JSON
        if err.get("type") == "json_invalid" or loc == ("body",):
            payload: dict[str, Any] = {"error": "Invalid JSON format"}
            detail = (err.get("ctx") or {}).get("error")
            if detail:
                payload["details"] = str(detail)
            return payload

    fields = {tuple(e.get("loc", ()))[1:2]: e for e in errors}
    if ("title",) in fields:
        return {"error": "Title is required"}
    if ("status",) in fields:
        return {"error": "Invalid status", "valid_statuses": TaskStatus.values()}

    return {
        "error": "Invalid request body",
        "details": [f"{'.'.join(str(p) for p in e.get('loc', ())[1:])}: {e.get('msg')}" for e in errors],
    }


def install_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def on_request_validation(request: Request, exc: RequestValidationError):
        errors = list(exc.errors())
        # id non entier dans l'URL : aucune route ne correspond
        if any(e.get("loc", ("",))[0] == "path" for e in errors):
            return _error(status.HTTP_404_NOT_FOUND, "Not Found")
        payload = _validation_payload(errors)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload)

    @app.exception_handler(TaskNotFoundError)
    async def on_task_not_found(request: Request, exc: TaskNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, "Task not found", id=exc.task_id)

    @app.exception_handler(EmptyPatchError)
    async def on_empty_patch(request: Request, exc: EmptyPatchError):
        return _error(status.HTTP_400_BAD_REQUEST, "No fields to update")

    @app.exception_handler(StarletteHTTPException)
    async def on_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(ResponseValidationError)
    async def on_response_validation(request: Request, exc: ResponseValidationError):
        logger.error("Failed to serialize response for %s %s: %s", request.method, request.url.path, exc.errors())
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to serialize task")

    @app.exception_handler(Exception)
    async def on_unexpected(request: Request, exc: Exception):
        logger.exception("error in %s %s", request.method, request.url.path)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", details=str(exc))
