"""
Task listing: filter, sort and paginate in a single query.

Filters are AND-ed together. Results are ordered by the requested key with
the id as tie-breaker, then sliced into one page. There is no total count;
a page shorter than page_size means there are no more pages.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, time, timezone
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from taskdesk.models.task import Task

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50

# Largest value a 64-bit INTEGER column or OFFSET can hold
MAX_SQL_INT = 2**63 - 1

SORT_COLUMNS = {
    "createdat": Task.created_at,
    "duedate": Task.due_date,
    "title": Task.title,
}


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored naive in UTC; aware inputs are converted first."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class TaskQuery:
    is_completed: Optional[bool] = None
    due_from: Optional[datetime] = None
    due_to: Optional[datetime] = None
    created_by: Optional[str] = None
    assigned_to: Optional[str] = None
    search: Optional[str] = None
    sort_by: str = "createdAt"
    sort_direction: str = "desc"
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def normalized(self) -> "TaskQuery":
        """Coerce out-of-range paging, unknown sort keys and day bounds."""
        page = self.page if self.page > 0 else 1
        page_size = self.page_size if self.page_size > 0 else DEFAULT_PAGE_SIZE
        page_size = min(page_size, MAX_PAGE_SIZE)

        sort_by = (self.sort_by or "").lower()
        if sort_by not in SORT_COLUMNS:
            sort_by = "createdat"
        sort_direction = "asc" if (self.sort_direction or "").lower() == "asc" else "desc"

        due_from = to_naive_utc(self.due_from)
        if due_from is not None:
            due_from = datetime.combine(due_from.date(), time.min)
        # due_to covers its whole calendar day
        due_to = to_naive_utc(self.due_to)
        if due_to is not None:
            due_to = datetime.combine(due_to.date(), time.max)

        return replace(
            self,
            due_from=due_from,
            due_to=due_to,
            created_by=_blank_to_none(self.created_by),
            assigned_to=_blank_to_none(self.assigned_to),
            search=_blank_to_none(self.search),
            sort_by=sort_by,
            sort_direction=sort_direction,
            page=page,
            page_size=page_size,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class FilterValues:
    created_by: List[str] = field(default_factory=list)
    assigned_to: List[str] = field(default_factory=list)


def list_filtered_paged(db: Session, query: TaskQuery) -> List[Task]:
    q = query.normalized()
    # a page starting past anything the database can address is empty
    if q.offset > MAX_SQL_INT:
        return []
    tasks = db.query(Task)

    if q.is_completed is not None:
        tasks = tasks.filter(Task.is_completed == q.is_completed)

    if q.due_from is not None:
        tasks = tasks.filter(Task.due_date >= q.due_from)

    if q.due_to is not None:
        tasks = tasks.filter(Task.due_date <= q.due_to)

    if q.created_by:
        tasks = tasks.filter(Task.created_by.icontains(q.created_by, autoescape=True))

    if q.assigned_to:
        tasks = tasks.filter(Task.assigned_to.icontains(q.assigned_to, autoescape=True))

    if q.search:
        # % and _ in the term match literally; NULL descriptions never match
        tasks = tasks.filter(or_(
            Task.title.icontains(q.search, autoescape=True),
            Task.description.icontains(q.search, autoescape=True),
        ))

    column = SORT_COLUMNS[q.sort_by]
    if q.sort_direction == "asc":
        tasks = tasks.order_by(column.asc(), Task.id.asc())
    else:
        tasks = tasks.order_by(column.desc(), Task.id.desc())

    return tasks.offset(q.offset).limit(q.page_size).all()


def _distinct_labels(db: Session, column) -> List[str]:
    rows = db.query(column).filter(column.isnot(None)).distinct().all()
    return sorted({value.strip() for (value,) in rows if value and value.strip()})


def distinct_filter_values(db: Session) -> FilterValues:
    """Label values currently in use, for populating the filter selectors."""
    return FilterValues(
        created_by=_distinct_labels(db, Task.created_by),
        assigned_to=_distinct_labels(db, Task.assigned_to),
    )
