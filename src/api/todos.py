"""Todo API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.errors import NotFoundError, ValidationError
from src.models.todo import Todo
from src.models.user import User
from src.schemas.auth import MessageResponse
from src.schemas.todo import TodoCreate, TodoResponse, TodoUpdate, UpdateResponse
from src.services.repository import Repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["todos"])


def get_todo_repository(db: Annotated[Session, Depends(get_db)]) -> Repository[Todo]:
    """Get the todo repository for this request's session."""
    return Repository(db, Todo)


def get_user_todo(todos: Repository[Todo], todo_id: int, user: User) -> Todo:
    """Get a todo owned by the user.

    A todo owned by someone else is reported exactly like a missing one.
    """
    todo = todos.find_one(id=todo_id, user_id=user.id)
    if not todo:
        raise NotFoundError("Todo not found")
    return todo


@router.post("", response_model=TodoResponse)
def create_todo(
    todo_data: TodoCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    todos: Annotated[Repository[Todo], Depends(get_todo_repository)],
):
    """Create a todo owned by the current user; it always starts incomplete."""
    todo = todos.add_one(
        name=todo_data.name,
        attributes=todo_data.attributes,
        user_id=current_user.id,
        completed=False,
    )
    logger.info(f"User {current_user.id} created todo {todo.id}")
    return todo.as_document()


@router.get("", response_model=list[TodoResponse])
def get_todos(
    current_user: Annotated[User, Depends(get_current_user)],
    todos: Annotated[Repository[Todo], Depends(get_todo_repository)],
):
    """Get all todos owned by the current user."""
    return [todo.as_document() for todo in todos.find(user_id=current_user.id)]


@router.get("/{todo_id}", response_model=TodoResponse)
def get_todo(
    todo_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    todos: Annotated[Repository[Todo], Depends(get_todo_repository)],
):
    """Get a single todo."""
    return get_user_todo(todos, todo_id, current_user).as_document()


@router.put("/{todo_id}", response_model=UpdateResponse)
def update_todo(
    todo_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    todos: Annotated[Repository[Todo], Depends(get_todo_repository)],
    todo_data: Annotated[TodoUpdate | None, Body()] = None,
):
    """Update the name and/or completed flag; absent fields are left as they are."""
    todo = get_user_todo(todos, todo_id, current_user)

    values = (todo_data or TodoUpdate()).model_dump(exclude_unset=True)
    if "completed" in values and values["completed"] is None:
        raise ValidationError("Completed must be true or false")

    result = todos.update_one(todo, values)
    logger.info(f"User {current_user.id} updated todo {todo_id}: {result}")
    return result


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    todos: Annotated[Repository[Todo], Depends(get_todo_repository)],
):
    """Delete a todo."""
    todo = get_user_todo(todos, todo_id, current_user)

    todos.remove_one(todo)
    logger.info(f"User {current_user.id} deleted todo {todo_id}")
    return MessageResponse(response="Todo deleted")
