# todoapp/client/api_client.py
from typing import List, Optional

import requests

from todoapp.models.todo import Todo


class TodoApiClient:
    """Thin `requests` wrapper around the /api/todos routes."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def todos_url(self) -> str:
        return f"{self.base_url}/api/todos"

    def _request(self, method: str, url: str, **kwargs):
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        response.raise_for_status()  # non-2xx raises requests.HTTPError
        return response.json()

    def list_todos(self) -> List[Todo]:
        data = self._request("GET", self.todos_url)
        return [Todo.model_validate(item) for item in data]

    def create_todo(self, content: str) -> Todo:
        data = self._request("POST", self.todos_url, json={"content": content})
        return Todo.model_validate(data)

    def delete_todo(self, todo_id: str) -> Optional[Todo]:
        """Returns the removed todo, or None if the server had no such id."""
        data = self._request("DELETE", f"{self.todos_url}/{todo_id}")
        return Todo.model_validate(data) if data else None
