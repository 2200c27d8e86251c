"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import MessageResponse, UserLogin, UserRegister
from src.schemas.todo import TodoCreate, TodoResponse, TodoUpdate, UpdateResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "MessageResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
    "UpdateResponse",
]
