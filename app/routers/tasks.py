from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.task import TaskStatus
from app.models.user import User
from app.schemas import task as task_schema
from app.services.task_service import TaskService
from app.utils.auth import get_current_user

router = APIRouter()

def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)

@router.post("", response_model=task_schema.TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    task: task_schema.TaskCreate,
    task_service: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    return task_service.create(task, current_user)


@router.get("", response_model=List[task_schema.TaskOut])
def list_tasks(
    status: Optional[TaskStatus] = Query(default=None),
    search: Optional[str] = Query(default=None, min_length=1),
    task_service: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    filters = task_schema.TaskFilter(status=status, search=search)
    return task_service.list(filters, current_user)


@router.get("/check-code/{task_code}", response_model=bool)
def check_task_code(
    task_code: str,
    task_service: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    """Advisory lookup for the task form; create() has the final say"""
    return task_service.task_code_exists(task_code, current_user)


@router.get("/{task_id}", response_model=task_schema.TaskOut)
def get_task(
    task_id: str,
    task_service: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    return task_service.get(task_id, current_user)


@router.patch("/{task_id}", response_model=task_schema.TaskOut)
def update_task(
    task_id: str,
    task_update: task_schema.TaskUpdate,
    task_service: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    return task_service.update(task_id, task_update, current_user)


@router.patch("/{task_id}/status", response_model=task_schema.TaskOut)
def update_task_status(
    task_id: str,
    status_update: task_schema.TaskStatusUpdate,
    task_service: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    return task_service.update_status(task_id, status_update, current_user)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: str,
    task_service: TaskService = Depends(get_task_service),
    current_user: User = Depends(get_current_user),
):
    task_service.remove(task_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
