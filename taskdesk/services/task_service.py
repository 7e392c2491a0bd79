"""Task service"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskdesk.core.errors import StoreError
from taskdesk.models.task import Task
from taskdesk.services.task_query import (
    MAX_SQL_INT,
    FilterValues,
    TaskQuery,
    distinct_filter_values,
    list_filtered_paged,
)

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _store_failure(db: Session, action: str, exc: SQLAlchemyError) -> StoreError:
    db.rollback()
    logger.exception(f"Store failure while trying to {action}")
    return StoreError(f"Could not {action}: {exc}")


def create_task(db: Session, task: Task) -> Task:
    now = utcnow()
    task.created_at = now
    task.updated_at = now
    try:
        db.add(task)
        db.commit()
        db.refresh(task)
    except SQLAlchemyError as e:
        raise _store_failure(db, "create task", e) from e
    logger.info(f"Created task {task.id}")
    return task


def get_task(db: Session, task_id: int) -> Optional[Task]:
    # ids outside the INTEGER range can never have been assigned
    if not -MAX_SQL_INT - 1 <= task_id <= MAX_SQL_INT:
        return None
    try:
        return db.query(Task).filter(Task.id == task_id).first()
    except SQLAlchemyError as e:
        raise _store_failure(db, f"load task {task_id}", e) from e


def update_task(db: Session, task: Task) -> Task:
    now = utcnow()
    # updated_at must move forward even when two writes share a clock tick
    if task.updated_at is not None and now <= task.updated_at:
        now = task.updated_at + timedelta(microseconds=1)
    task.updated_at = now
    try:
        db.commit()
        db.refresh(task)
    except SQLAlchemyError as e:
        raise _store_failure(db, f"update task {task.id}", e) from e
    logger.info(f"Updated task {task.id}")
    return task


def delete_task(db: Session, task: Task) -> None:
    task_id = task.id
    try:
        db.delete(task)
        db.commit()
    except SQLAlchemyError as e:
        raise _store_failure(db, f"delete task {task_id}", e) from e
    logger.info(f"Deleted task {task_id}")


def list_tasks(db: Session, query: TaskQuery) -> List[Task]:
    try:
        return list_filtered_paged(db, query)
    except SQLAlchemyError as e:
        raise _store_failure(db, "list tasks", e) from e


def get_filter_values(db: Session) -> FilterValues:
    try:
        return distinct_filter_values(db)
    except SQLAlchemyError as e:
        raise _store_failure(db, "list filter values", e) from e
