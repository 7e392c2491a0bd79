from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime

from taskdesk.core.database import get_db
from taskdesk.core.errors import NotFoundError
from taskdesk.models.task import Task
from taskdesk.schemas.task import TaskCreate, TaskUpdate, TaskResponse, FilterValuesResponse
from taskdesk.services.task_query import TaskQuery, DEFAULT_PAGE_SIZE
from taskdesk.services.task_mapping import (
    task_from_create,
    check_update,
    apply_update,
    to_response,
    to_filter_values_response,
)
from taskdesk.services.task_service import (
    create_task as store_create,
    get_task as store_get,
    update_task as store_update,
    delete_task as store_delete,
    list_tasks as store_list,
    get_filter_values,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_existing_task(task_id: int, db: Session) -> Task:
    task = store_get(db, task_id)
    if not task:
        raise NotFoundError("Task", task_id)
    return task


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    db: Session = Depends(get_db),
    is_completed: Optional[bool] = Query(None, alias="isCompleted"),
    due_from: Optional[datetime] = Query(None, alias="dueFrom"),
    due_to: Optional[datetime] = Query(None, alias="dueTo"),
    created_by: Optional[str] = Query(None, alias="createdBy"),
    assigned_to: Optional[str] = Query(None, alias="assignedTo"),
    search: Optional[str] = Query(None),
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_direction: str = Query("desc", alias="sortDirection"),
    page: int = Query(1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize"),
):
    query = TaskQuery(
        is_completed=is_completed,
        due_from=due_from,
        due_to=due_to,
        created_by=created_by,
        assigned_to=assigned_to,
        search=search,
        sort_by=sort_by,
        sort_direction=sort_direction,
        page=page,
        page_size=page_size,
    )
    return [to_response(task) for task in store_list(db, query)]


@router.get("/filter-values", response_model=FilterValuesResponse)
def filter_values(db: Session = Depends(get_db)):
    return to_filter_values_response(get_filter_values(db))


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    return to_response(get_existing_task(task_id, db))


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, response: Response, db: Session = Depends(get_db)):
    task = store_create(db, task_from_create(task_data))
    response.headers["Location"] = f"{router.prefix}/{task.id}"
    return to_response(task)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task_data: TaskUpdate, db: Session = Depends(get_db)):
    # Title first, then existence: a bad payload never reaches the store
    check_update(task_data)
    task = get_existing_task(task_id, db)
    return to_response(store_update(db, apply_update(task, task_data)))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    store_delete(db, get_existing_task(task_id, db))
