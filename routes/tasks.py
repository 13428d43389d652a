from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List, Optional
from database import get_session
from schemas import (
    TaskCreate,
    TaskUpdate,
    TaskResponse,
    TaskCreatedResponse,
    MessageResponse,
)
from middleware.auth import verify_jwt_middleware
from services import tasks as task_service
from services.users import resolve_user

router = APIRouter()


@router.get("/tasks", response_model=List[TaskResponse])
def list_tasks(
    email: str = Depends(verify_jwt_middleware),
    session: Session = Depends(get_session)
) -> List[TaskResponse]:
    """
    Get all tasks for authenticated user

    Args:
        email: Email resolved from the bearer token
        session: Database session

    Returns:
        The user's tasks, in storage order
    """
    user = resolve_user(session, email)
    tasks = task_service.list_tasks(session, user.id)
    return [TaskResponse.model_validate(task) for task in tasks]


@router.post(
    "/tasks",
    response_model=TaskCreatedResponse,
    status_code=status.HTTP_201_CREATED
)
def create_task(
    task_data: TaskCreate,
    email: str = Depends(verify_jwt_middleware),
    session: Session = Depends(get_session)
) -> TaskCreatedResponse:
    """
    Create a new task

    Args:
        task_data: Task description and status
        email: Email resolved from the bearer token
        session: Database session

    Returns:
        Confirmation message and the new task id
    """
    user = resolve_user(session, email)
    task_id = task_service.create_task(session, user.id, task_data.task, task_data.status)
    return TaskCreatedResponse(message="task added successfully", taskId=task_id)


@router.put("/tasks/{task_id}", response_model=MessageResponse)
def update_task(
    task_id: int,
    task_data: Optional[TaskUpdate] = None,
    email: str = Depends(verify_jwt_middleware),
    session: Session = Depends(get_session)
) -> MessageResponse:
    """
    Update a task

    Args:
        task_id: Task ID
        task_data: Fields to change; omitted fields are kept. A missing body changes nothing
        email: Email resolved from the bearer token
        session: Database session

    Returns:
        Confirmation message
    """
    if task_data is None:
        task_data = TaskUpdate()
    # Reject an empty update before touching storage
    task_service.update_values(task_data.task, task_data.status)

    user = resolve_user(session, email)
    task_service.update_task(
        session,
        user.id,
        task_id,
        description=task_data.task,
        status=task_data.status,
    )
    return MessageResponse(message="task updated successfully")


@router.delete("/tasks/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: int,
    email: str = Depends(verify_jwt_middleware),
    session: Session = Depends(get_session)
) -> MessageResponse:
    """
    Delete a task

    Args:
        task_id: Task ID
        email: Email resolved from the bearer token
        session: Database session

    Returns:
        Confirmation message
    """
    user = resolve_user(session, email)
    task_service.delete_task(session, user.id, task_id)
    return MessageResponse(message="task deleted successfully")
