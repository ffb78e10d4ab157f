"""
➡️ But : Définir l'entité métier Task (la "tâche" à faire).

Task est un simple conteneur de données : aucune validation ici,
c'est le rôle de la frontière HTTP (schemas + services).

Deux opérations dérivées du temps :

stamp_created() : pose created_at et updated_at (même instant)

stamp_updated() : rafraîchit updated_at seulement

🔹 Avantages :

Indépendant du web et du stockage (testable seul).

Format des dates fixe `YYYY-MM-DD HH:MM:SS` (heure locale, à la seconde).
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]


def now_timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


@dataclass
class Task:
    # id = 0 : pas encore enregistré dans le store
    id: int = 0
    title: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    created_at: str = ""
    updated_at: str = ""

    def stamp_created(self) -> None:
        now = now_timestamp()
        self.created_at = now
        self.updated_at = now

    def stamp_updated(self) -> None:
        self.updated_at = now_timestamp()

    # -----------------------------
    # Wire format
    # -----------------------------
    def to_json(self) -> dict[str, Any]:
        """
        Représentation JSON de la tâche.
        En cas d'échec de conversion, renvoie un payload d'erreur au lieu de lever.
        """
        try:
            return {
                "id": int(self.id),
                "title": str(self.title),
                "description": str(self.description),
                "status": TaskStatus(self.status).value,
                "created_at": self.created_at,
                "updated_at": self.updated_at,
            }
        except (TypeError, ValueError) as e:
            logger.error("Failed to serialize task id=%s: %s", self.id, e)
            return {"error": "Failed to serialize task"}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Task":
        """Tâche non enregistrée : seuls title/description/status sont repris."""
        task = cls()
        if "title" in data:
            task.title = data["title"]
        if "description" in data:
            task.description = data["description"]
        if "status" in data:
            task.status = TaskStatus(data["status"])
        return task
