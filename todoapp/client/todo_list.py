# todoapp/client/todo_list.py

import enum
import logging
from typing import List

import requests

from todoapp.client.api_client import TodoApiClient
from todoapp.models.todo import Todo

logger = logging.getLogger(__name__)


class TodoListState(enum.Enum):
    IDLE    = "idle"
    LOADING = "loading"
    LOADED  = "loaded"


class TodoListController:
    """
    Page state for the todo list.

    Moves IDLE -> LOADING -> LOADED on load, and back through LOADING after
    every create or delete by re-fetching the whole list. A failed request
    is logged and leaves the last successful list and state in place.
    """

    def __init__(self, client: TodoApiClient) -> None:
        self.client = client
        self.state = TodoListState.IDLE
        self.todos: List[Todo] = []

    def load(self) -> List[Todo]:
        previous = self.state
        self.state = TodoListState.LOADING
        try:
            todos = self.client.list_todos()
        except requests.RequestException as e:
            logger.error(f"Could not load todos: {e}")
            self.state = previous
            return self.todos
        self.todos = todos
        self.state = TodoListState.LOADED
        return self.todos

    def add(self, content: str) -> List[Todo]:
        if not content:
            return self.todos
        try:
            self.client.create_todo(content)
        except requests.RequestException as e:
            logger.error(f"Could not add todo: {e}")
            return self.todos
        return self.load()

    def remove(self, todo_id: str) -> List[Todo]:
        try:
            self.client.delete_todo(todo_id)
        except requests.RequestException as e:
            logger.error(f"Could not delete todo {todo_id}: {e}")
            return self.todos
        return self.load()
