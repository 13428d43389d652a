"""Task repository. Every statement is scoped to the owning user in SQL."""
import logging
from typing import List, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from models import Task
from services.exceptions import BadRequestError, NotFoundError, StorageError

logger = logging.getLogger(__name__)


def create_task(session: Session, owner_id: int, description: str, status: str) -> int:
    """Insert a task for owner_id and return its id."""
    task = Task(user_id=owner_id, task=description, status=status)
    try:
        session.add(task)
        session.commit()
        session.refresh(task)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to insert task")
        raise StorageError() from exc

    logger.debug("Created task id=%s for user id=%s", task.id, owner_id)
    return task.id


def update_values(description: Optional[str], status: Optional[str]) -> dict:
    """
    Columns a partial update writes. Empty strings count as not supplied.

    Raises:
        BadRequestError: Neither description nor status was supplied.
    """
    values = {}
    if description:
        values["task"] = description
    if status:
        values["status"] = status
    if not values:
        raise BadRequestError("No valid fields to update")
    return values


def update_task(
    session: Session,
    owner_id: int,
    task_id: int,
    description: Optional[str] = None,
    status: Optional[str] = None,
) -> None:
    """
    Apply a partial update to one of the owner's tasks.

    Only the supplied fields are written. Empty strings count as not supplied.

    Raises:
        BadRequestError: Neither description nor status was supplied.
        NotFoundError: No task with this id belongs to owner_id.
        StorageError: The update failed.
    """
    values = update_values(description, status)
    statement = (
        update(Task)
        .where(Task.user_id == owner_id, Task.id == task_id)
        .values(**values)
    )
    affected = _execute_scoped(session, statement, "update")
    if affected == 0:
        raise NotFoundError("task not found")
    logger.debug("Updated task id=%s fields=%s", task_id, sorted(values))


def delete_task(session: Session, owner_id: int, task_id: int) -> None:
    """
    Delete one of the owner's tasks.

    Raises:
        NotFoundError: No task with this id belongs to owner_id.
        StorageError: The delete failed.
    """
    statement = delete(Task).where(Task.user_id == owner_id, Task.id == task_id)
    affected = _execute_scoped(session, statement, "delete")
    if affected == 0:
        raise NotFoundError("task not found")
    logger.debug("Deleted task id=%s", task_id)


def list_tasks(session: Session, owner_id: int) -> List[Task]:
    """All tasks of owner_id in storage order."""
    try:
        return list(session.exec(select(Task).where(Task.user_id == owner_id)).all())
    except SQLAlchemyError as exc:
        logger.exception("Failed to list tasks")
        raise StorageError() from exc


def get_task(session: Session, owner_id: int, task_id: int) -> Optional[Task]:
    """One of the owner's tasks by id, or None."""
    try:
        return session.exec(
            select(Task).where(Task.user_id == owner_id, Task.id == task_id)
        ).first()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch task")
        raise StorageError() from exc


def _execute_scoped(session: Session, statement, action: str) -> int:
    # Returns the number of matched rows
    try:
        result = session.exec(statement)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to %s task", action)
        raise StorageError() from exc
    return result.rowcount
