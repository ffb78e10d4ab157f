"""
➡️ But : Encapsuler le stockage des tâches (en mémoire, sans persistance).

TaskStore : CRUD (create, read, update, patch, delete) sur les tâches.

Seul propriétaire des Task et du compteur d'identifiants.

Ne contient aucune logique métier ni validation : les cas "absent" sont
exprimés par None / False, jamais par une exception.

🔹 Avantages :

Thread-safe : un seul verrou autour de la map (lectures comprises).

Testable indépendamment (aucune dépendance web).
"""

import logging
import threading
from dataclasses import replace
from typing import Any, Mapping, Optional

from todo_api.domain.models import Task, TaskStatus

logger = logging.getLogger(__name__)

PATCHABLE_FIELDS = ("title", "description", "status")


class TaskStore:
    """
    Store en mémoire, détenu par l'application (app.state.store).

    Les tâches renvoyées sont des copies : l'appelant ne modifie jamais
    un enregistrement hors du verrou.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        # jamais remis à zéro, même si toutes les tâches sont supprimées
        self._next_id = 1
        self._lock = threading.Lock()

    # ---------- READ ----------

    def list(self) -> list[Task]:
        """Retourne toutes les tâches, par id croissant."""
        with self._lock:
            return [replace(self._tasks[k]) for k in sorted(self._tasks)]

    def get(self, task_id: int) -> Optional[Task]:
        """Retourne la tâche, ou None si absente."""
        with self._lock:
            task = self._tasks.get(task_id)
            return replace(task) if task is not None else None

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ---------- CREATE ----------

    def create(
        self,
        *,
        title: str,
        description: str = "",
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        with self._lock:
            task = Task(id=self._next_id, title=title, description=description, status=status)
            self._next_id += 1
            task.stamp_created()
            self._tasks[task.id] = task
            created = replace(task)
        logger.debug("Task created id=%s status=%s", created.id, created.status.value)
        return created

    # ---------- UPDATE ----------

    def update(self, task_id: int, *, title: str, description: str, status: TaskStatus) -> bool:
        """Remplacement complet de title/description/status. id et created_at inchangés."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return False
            task.title = title
            task.description = description
            task.status = status
            task.stamp_updated()
        logger.debug("Task updated id=%s", task_id)
        return True

    def patch(self, task_id: int, changes: Mapping[str, Any]) -> bool:
        """
        Mise à jour partielle : seuls les champs présents dans `changes` sont appliqués.
        updated_at est rafraîchi même si `changes` est vide.
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return False
            for field in PATCHABLE_FIELDS:
                if field in changes:
                    setattr(task, field, changes[field])
            task.stamp_updated()
        logger.debug("Task patched id=%s fields=%s", task_id, sorted(changes))
        return True

    # ---------- DELETE ----------

    def delete(self, task_id: int) -> bool:
        with self._lock:
            removed = self._tasks.pop(task_id, None) is not None
        if removed:
            logger.debug("Task deleted id=%s", task_id)
        return removed
