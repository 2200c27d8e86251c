"""Todo model."""

from typing import Any

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, String

from src.database import Base
from src.models.mixins import TimestampMixin


class Todo(Base, TimestampMixin):
    """A to-do item owned by exactly one user."""

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(500), nullable=True)
    completed = Column(Boolean, default=False, nullable=False)
    # Any other fields supplied by the client at creation: {"priority": 2, ...}
    attributes = Column(JSON, nullable=False, default=dict)

    def as_document(self) -> dict[str, Any]:
        """Flatten the record into the shape returned by the API."""
        document = dict(self.attributes or {})
        document.update(
            id=self.id,
            name=self.name,
            completed=self.completed,
            user=self.user_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
        return document
