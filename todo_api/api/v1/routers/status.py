from fastapi import APIRouter, Depends

from todo_api.api.v1.dependencies import get_task_service
from todo_api.domain.schemas import StatusOut
from todo_api.domain.services import TaskService

router = APIRouter(tags=["status"])

@router.get(
    "/status",
    summary="État du service",
    response_model=StatusOut,
)
def get_status(svc: TaskService = Depends(get_task_service)):
    return svc.status()
