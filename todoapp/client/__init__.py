"""
Client side of the todo service: an HTTP client and the page controller
that drives the Streamlit front end.
"""

from .api_client import TodoApiClient
from .todo_list import TodoListController, TodoListState

__all__ = ["TodoApiClient", "TodoListController", "TodoListState"]
