"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_task_store() : récupère le TaskStore créé au démarrage (app.state.store).

get_task_service() : crée un TaskService à partir de ce store.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Pas de singleton global : le store est injecté par l'application (Depends()).
"""

from fastapi import Depends, Request

from todo_api.domain.repositories import TaskStore
from todo_api.domain.services import TaskService


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.store


def get_task_service(request: Request, store: TaskStore = Depends(get_task_store)) -> TaskService:
    return TaskService(store, service_name=request.app.state.settings.APP_NAME)
