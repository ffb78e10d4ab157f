"""
➡️ But : Définir les endpoints de l'API des tâches.

C'est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, PATCH, DELETE)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Les erreurs métier (tâche absente, patch vide) sont levées par le service
et converties en JSON par les handlers de todo_api.api.errors.
"""

from fastapi import APIRouter, Depends, Response, status

from todo_api.api.v1.dependencies import get_task_service
from todo_api.domain.schemas import ErrorOut, TaskCreate, TaskOut, TaskPatch, TaskReplace
from todo_api.domain.services import TaskService

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={404: {"description": "Task not found", "model": ErrorOut}},
)

@router.get(
    "",
    summary="Lister les tâches",
    description="Retourne toutes les tâches, par id croissant.",
    # une tâche non sérialisable devient une entrée {"error": ...} sans casser la liste
    response_model=list[TaskOut | ErrorOut],
    response_model_exclude_none=True,
)
def list_tasks(svc: TaskService = Depends(get_task_service)):
    return [t.to_json() for t in svc.list()]

@router.post(
    "",
    summary="Créer une tâche",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskOut,
    responses={400: {"description": "Invalid body", "model": ErrorOut}},
)
def create_task(payload: TaskCreate, svc: TaskService = Depends(get_task_service)):
    return svc.create(payload).to_json()

@router.get(
    "/{task_id}",
    summary="Récupérer une tâche",
    response_model=TaskOut,
)
def get_task(task_id: int, svc: TaskService = Depends(get_task_service)):
    return svc.get(task_id).to_json()

@router.put(
    "/{task_id}",
    summary="Remplacer une tâche",
    response_model=TaskOut,
    responses={400: {"description": "Invalid body", "model": ErrorOut}},
)
def replace_task(task_id: int, payload: TaskReplace, svc: TaskService = Depends(get_task_service)):
    return svc.replace(task_id, payload).to_json()

@router.patch(
    "/{task_id}",
    summary="Mettre à jour partiellement une tâche",
    response_model=TaskOut,
    responses={400: {"description": "Invalid body", "model": ErrorOut}},
)
def patch_task(task_id: int, payload: TaskPatch, svc: TaskService = Depends(get_task_service)):
    return svc.patch(task_id, payload).to_json()

@router.delete(
    "/{task_id}",
    summary="Supprimer une tâche",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_task(task_id: int, svc: TaskService = Depends(get_task_service)):
    svc.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
