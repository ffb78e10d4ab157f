"""
➡️ But : Contenir la logique métier : orchestrer le store, appliquer des règles, gérer les erreurs.

TaskService : transforme les résultats "absent" du store (None / False)
en exceptions métier, que l'API convertit en réponses JSON {"error": ...}.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging

from todo_api.domain.models import Task
from todo_api.domain.repositories import TaskStore
from todo_api.domain.schemas import TaskCreate, TaskPatch, TaskReplace

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id

class EmptyPatchError(ValueError):
    pass


class TaskService:
    def __init__(self, store: TaskStore, service_name: str = "Todo API"):
        self.store = store
        self.service_name = service_name

    def status(self) -> dict:
        return {"status": "ok", "tasks_count": self.store.count(), "service": self.service_name}

    def list(self) -> list[Task]:
        tasks = self.store.list()
        logger.info("Tasks count: %s", len(tasks))
        return tasks

    def get(self, task_id: int) -> Task:
        task = self.store.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create(self, payload: TaskCreate) -> Task:
        draft = Task.from_json(payload.model_dump())
        return self.store.create(title=draft.title, description=draft.description, status=draft.status)

    def replace(self, task_id: int, payload: TaskReplace) -> Task:
        draft = Task.from_json(payload.model_dump())
        if not self.store.update(
            task_id, title=draft.title, description=draft.description, status=draft.status
        ):
            raise TaskNotFoundError(task_id)
        return self.get(task_id)

    def patch(self, task_id: int, payload: TaskPatch) -> Task:
        # seul un corps sans aucune clé est refusé
        if not payload.model_fields_set and not payload.model_extra:
            raise EmptyPatchError("No fields to update")
        # un null explicite vaut "champ non fourni" ; les clés inconnues sont ignorées
        changes = payload.model_dump(
            include=set(TaskPatch.model_fields), exclude_unset=True, exclude_none=True
        )
        if not self.store.patch(task_id, changes):
            raise TaskNotFoundError(task_id)
        return self.get(task_id)

    def delete(self, task_id: int) -> None:
        if not self.store.delete(task_id):
            raise TaskNotFoundError(task_id)
