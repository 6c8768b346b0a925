# todoapp/api/todos.py

from fastapi import APIRouter, Depends, Request, status
from typing import List, Optional
import logging

from todoapp.db.store import TodoStore
from todoapp.models.todo import Todo, TodoCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/todos", tags=["Todos"])


def get_store(request: Request) -> TodoStore:
    """FastAPI dependency: the store built at startup."""
    return request.app.state.store


@router.get("", response_model=List[Todo])
def list_todos(store: TodoStore = Depends(get_store)):
    """List every todo, newest first."""
    return store.list()


@router.post("", response_model=Todo, status_code=status.HTTP_201_CREATED)
def create_todo(payload: TodoCreate, store: TodoStore = Depends(get_store)):
    """
    Create a todo from `content` (or its `action` alias).

    A missing or empty value raises TodoValidationError, answered with 422
    by the app-level handler.
    """
    todo = store.create(payload.content)
    logger.info(f"📝 Created todo {todo.id}")
    return todo


@router.delete("/{todo_id}", response_model=Optional[Todo])
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    """
    Delete a todo by id.

    Returns the removed record, or null when no record matched; deleting
    twice is not an error.
    """
    removed = store.delete(todo_id)
    if removed is None:
        logger.info(f"Delete requested for unknown todo {todo_id}")
    else:
        logger.info(f"🗑️  Deleted todo {todo_id}")
    return removed
