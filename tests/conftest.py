import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtWidgets import QApplication

from todo_api import FetchError
from todo_model import Todo


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


class FakeTodoApi:
    """
    In-memory stand-in for TodoApiClient.
    Set fail_on to a method name to make that call raise FetchError.
    """
    def __init__(self, todos=None):
        self.todos = [Todo.from_dict(t) for t in (todos or [])]
        self.next_id = max((t.id for t in self.todos), default=0) + 1
        self.calls = []
        self.fail_on = set()

    def _check(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail_on:
            raise FetchError(f"{name} failed", 500, "Internal Server Error")

    def list_todos(self):
        self._check("list_todos")
        return [Todo.from_dict(t.to_dict()) for t in self.todos]

    def create_todo(self, title, priority, due_date=None):
        self._check("create_todo", title, priority, due_date)
        self.todos.append(Todo(self.next_id, title, False, priority, due_date))
        self.next_id += 1

    def set_completed(self, todo_id, completed):
        self._check("set_completed", todo_id, completed)
        for todo in self.todos:
            if todo.id == todo_id:
                todo.completed = completed

    def replace_todo(self, todo_id, title, completed, priority):
        self._check("replace_todo", todo_id, title, completed, priority)
        for todo in self.todos:
            if todo.id == todo_id:
                todo.title, todo.completed, todo.priority = title, completed, priority

    def delete_completed(self):
        self._check("delete_completed")
        self.todos = [t for t in self.todos if not t.completed]


SAMPLE_TODOS = [
    {"id": 1, "title": "Buy milk", "completed": False, "priority": "Low"},
    {"id": 2, "title": "Write report", "completed": True, "priority": "High"},
    {"id": 3, "title": "Call bank", "completed": False, "priority": "Medium"},
]


@pytest.fixture
def fake_api():
    return FakeTodoApi(SAMPLE_TODOS)
