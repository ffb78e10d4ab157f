"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l'instance FastAPI (create_app).

Configure :

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

handlers d'erreurs (réponses {"error": ...})

Inclut les routers (/status, /tasks).

Crée le TaskStore (un seul par application) et, au démarrage,
ajoute les tâches d'exemple puis affiche la bannière.

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d'exécution : uvicorn todo_api.main:app --reload (ou `todo-api`).
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response, status as http_status
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.errors import install_exception_handlers
from todo_api.api.v1.routers import status, tasks
from todo_api.core.config import Settings, settings as default_settings
from todo_api.core.logging_setup import setup_logging
from todo_api.core.openapi import custom_openapi
from todo_api.domain.repositories import TaskStore
from todo_api.domain.seed import seed_example_tasks

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type"]

ENDPOINTS = [
    ("GET", "/status", "API status"),
    ("GET", "/tasks", "Get all tasks"),
    ("GET", "/tasks/{id}", "Get task by ID"),
    ("POST", "/tasks", "Create new task"),
    ("PUT", "/tasks/{id}", "Update task"),
    ("PATCH", "/tasks/{id}", "Partially update task"),
    ("DELETE", "/tasks/{id}", "Delete task"),
]


def log_banner(app_settings: Settings) -> None:
    line = "_" * 40
    logger.info(line)
    logger.info("%s Server", app_settings.APP_NAME)
    logger.info("Port: %s", app_settings.PORT)
    logger.info(line)
    logger.info("Endpoints:")
    for method, path, label in ENDPOINTS:
        logger.info("  %-7s%-16s- %s", method, path, label)
    logger.info(line)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Démarrage
    app_settings: Settings = app.state.settings
    log_banner(app_settings)
    if app_settings.SEED_EXAMPLE_TASKS:
        seeded = seed_example_tasks(app.state.store)
        logger.info("Seeded %s example tasks", len(seeded))
    yield


def create_app(app_settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    app_settings = app_settings or default_settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        version="1.0.0",
        openapi_tags=[
            {"name": "tasks", "description": "Opérations sur les tâches"},
            {"name": "status", "description": "État du service"},
        ],
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else TaskStore()

    # OPTIONS hors pré-vol CORS : 200 sur n'importe quel chemin, en-têtes CORS compris.
    # Ajouté avant CORSMiddleware pour que celui-ci reste la couche externe.
    options_headers = {
        "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
    }
    if "*" in app_settings.CORS_ORIGINS:
        options_headers["Access-Control-Allow-Origin"] = "*"

    @app.middleware("http")
    async def answer_options(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(
                status_code=http_status.HTTP_200_OK,
                media_type="application/json",
                headers=options_headers,
            )
        return await call_next(request)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    install_exception_handlers(app)

    # Routers
    app.include_router(tasks.router)
    app.include_router(status.router)

    # Génération du schéma OpenAPI custom
    app.openapi = lambda: custom_openapi(app)

    return app


app = create_app()


def run() -> None:
    setup_logging(default_settings.LOG_LEVEL)
    uvicorn.run(
        app,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    run() # http://localhost:8080
