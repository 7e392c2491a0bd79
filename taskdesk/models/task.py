"""Task model"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean
from taskdesk.core.database import Base

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 2000


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=True)
    is_completed = Column(Boolean, nullable=False, default=False, index=True)
    due_date = Column(DateTime, nullable=True, index=True)

    # Display-only labels, no identity behind them
    created_by = Column(String, nullable=True)
    assigned_to = Column(String, nullable=True)

    # Set explicitly by the store so created_at == updated_at on insert
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
