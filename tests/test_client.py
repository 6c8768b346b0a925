from datetime import datetime

import pytest
import requests

from todoapp.client import TodoApiClient, TodoListController, TodoListState
from todoapp.models.todo import Todo


# ─────────────────────────────────────────────
#  Fake transport
# ─────────────────────────────────────────────

class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        return self._payload


class FakeSession:
    """Records calls and replays queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        return self.responses.pop(0)


def _todo_json(todo_id="abc", content="buy milk"):
    return {"id": todo_id, "content": content, "created_at": "2026-01-01T10:00:00"}


def test_list_todos_parses_records():
    session = FakeSession(FakeResponse(200, [_todo_json()]))
    client = TodoApiClient("http://api.local/", session=session)

    todos = client.list_todos()

    assert todos == [Todo(id="abc", content="buy milk", created_at=datetime(2026, 1, 1, 10))]
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://api.local/api/todos")
    assert kwargs["timeout"] == 10


def test_create_todo_posts_content():
    session = FakeSession(FakeResponse(201, _todo_json(content="write report")))
    client = TodoApiClient("http://api.local", session=session)

    todo = client.create_todo("write report")

    assert todo.content == "write report"
    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert kwargs["json"] == {"content": "write report"}


def test_delete_todo_returns_none_for_null_body():
    session = FakeSession(FakeResponse(200, None))
    client = TodoApiClient("http://api.local", session=session)

    assert client.delete_todo("gone") is None
    assert session.calls[0][:2] == ("DELETE", "http://api.local/api/todos/gone")


def test_http_errors_are_raised():
    session = FakeSession(FakeResponse(422, {"detail": "The content field cannot be empty"}))
    client = TodoApiClient("http://api.local", session=session)

    with pytest.raises(requests.HTTPError):
        client.create_todo("")


# ─────────────────────────────────────────────
#  Controller
# ─────────────────────────────────────────────

class FakeApiClient:
    """In-memory stand-in for TodoApiClient."""

    def __init__(self):
        self.todos = []
        self.list_calls = 0
        self.fail_next = False
        self._next_id = 0

    def _maybe_fail(self):
        if self.fail_next:
            self.fail_next = False
            raise requests.ConnectionError("network down")

    def list_todos(self):
        self._maybe_fail()
        self.list_calls += 1
        return list(reversed(self.todos))

    def create_todo(self, content):
        self._maybe_fail()
        self._next_id += 1
        todo = Todo(id=str(self._next_id), content=content, created_at=datetime(2026, 1, 1, 0, 0, self._next_id))
        self.todos.append(todo)
        return todo

    def delete_todo(self, todo_id):
        self._maybe_fail()
        for todo in self.todos:
            if todo.id == todo_id:
                self.todos.remove(todo)
                return todo
        return None


@pytest.fixture
def api():
    return FakeApiClient()


@pytest.fixture
def controller(api):
    return TodoListController(api)


def test_starts_idle(controller):
    assert controller.state is TodoListState.IDLE
    assert controller.todos == []


def test_load_moves_to_loaded(controller, api):
    api.todos.append(Todo(id="1", content="a", created_at=datetime(2026, 1, 1)))

    controller.load()

    assert controller.state is TodoListState.LOADED
    assert [t.content for t in controller.todos] == ["a"]


def test_add_refetches_whole_list(controller, api):
    controller.load()

    controller.add("buy milk")
    controller.add("write report")

    assert api.list_calls == 3
    assert [t.content for t in controller.todos] == ["write report", "buy milk"]
    assert controller.state is TodoListState.LOADED


def test_add_ignores_empty_input(controller, api):
    controller.load()
    controller.add("")

    assert api.todos == []
    assert api.list_calls == 1


def test_remove_refetches(controller, api):
    controller.load()
    controller.add("keep")
    controller.add("drop")
    drop_id = controller.todos[0].id

    controller.remove(drop_id)

    assert [t.content for t in controller.todos] == ["keep"]


def test_failed_load_keeps_previous_state(controller, api):
    api.fail_next = True

    controller.load()

    assert controller.state is TodoListState.IDLE
    assert controller.todos == []


def test_failed_mutation_keeps_last_list(controller, api):
    controller.load()
    controller.add("buy milk")
    snapshot = list(controller.todos)

    api.fail_next = True
    controller.add("never stored")

    assert controller.todos == snapshot
    assert controller.state is TodoListState.LOADED
