"""Todo schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

# Fields the server owns; client-supplied values are dropped at creation
SERVER_FIELDS = frozenset({"id", "user", "completed", "created_at", "updated_at"})


class TodoCreate(BaseModel):
    """Create a new todo. Any additional fields are kept as attributes."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None

    @property
    def attributes(self) -> dict:
        """Extra fields supplied by the client, minus server-owned ones."""
        extra = self.model_extra or {}
        return {key: value for key, value in extra.items() if key not in SERVER_FIELDS}


class TodoUpdate(BaseModel):
    """Update a todo. Only fields present in the request are applied."""

    name: str | None = None
    completed: bool | None = None


class TodoResponse(BaseModel):
    """Todo document response, including any extra attributes."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str | None
    completed: bool
    user: int
    created_at: datetime
    updated_at: datetime


class UpdateResponse(BaseModel):
    """Store acknowledgment for a partial update."""

    model_config = ConfigDict(from_attributes=True)

    matched_count: int
    modified_count: int
