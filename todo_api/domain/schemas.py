"""
➡️ But : Définir les formats d'entrée/sortie de l'API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TaskCreate → corps de requête POST

TaskReplace → corps PUT (remplacement complet)

TaskPatch → corps PATCH (champs optionnels)

TaskOut → réponse de l'API

Sépare l'entité métier (Task) des modèles de transfert (I/O API).

🔹 Avantages :

Validation automatique (titre non vide, statut connu).

Documente les champs dans Swagger (types, exemples...).
"""

from pydantic import BaseModel, Field

from todo_api.domain.models import TaskStatus

class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, examples=["Acheter du lait"])
    description: str = Field("", examples=["Demi-écrémé"])
    status: TaskStatus = Field(TaskStatus.TODO, examples=["todo"])

class TaskReplace(TaskCreate):
    # PUT : mêmes règles que POST, les champs absents reprennent leur valeur par défaut
    pass

class TaskPatch(BaseModel):
    # les clés inconnues sont conservées : un corps non vide n'est jamais "vide"
    model_config = {"extra": "allow"}

    title: str | None = Field(None, examples=["Aller courir"])
    description: str | None = Field(None, examples=["10 km"])
    status: TaskStatus | None = Field(None, examples=["done"])

class TaskOut(BaseModel):
    id: int
    title: str
    description: str
    status: TaskStatus
    created_at: str = Field(..., examples=["2025-01-01 10:00:00"])
    updated_at: str = Field(..., examples=["2025-01-01 10:00:00"])

class StatusOut(BaseModel):
    status: str
    tasks_count: int
    service: str

class ErrorOut(BaseModel):
    error: str
    id: int | None = None
    valid_statuses: list[str] | None = None
    details: str | list[str] | None = None
