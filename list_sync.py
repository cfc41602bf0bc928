# list_sync.py

import logging
import threading

from PyQt5.QtCore import QObject, pyqtSignal

from todo_api import TodoApiError

logger = logging.getLogger(__name__)


class ViewState:
    """
    Immutable snapshot of the last successfully fetched collection.
    A new ViewState replaces the old one wholesale; rows are never patched in place.
    """
    def __init__(self, todos=(), generation=0):
        self.todos = tuple(todos)
        self.generation = generation # Bumped on every successful reload

    def __len__(self):
        return len(self.todos)

    def __iter__(self):
        return iter(self.todos)

    def __repr__(self):
        return f"ViewState(generation={self.generation}, rows={len(self.todos)})"


class ListSynchronizer(QObject):
    """
    Keeps a ViewState in line with the remote /todos collection.

    Every operation runs its requests one after another on the calling thread and
    reports through signals, so it can be started from a worker thread while the
    widgets listen on the GUI thread. Each successful mutation is followed by a
    full reload; failures are logged and otherwise dropped.

    There is no ordering between overlapping operations: whichever reload
    finishes last replaces the view, and observers see views in that same order.
    """
    view_changed = pyqtSignal(object) # ViewState
    create_finished = pyqtSignal(bool) # True when the todo was created

    def __init__(self, api_client, parent=None):
        super().__init__(parent)
        self.api = api_client
        self._lock = threading.Lock()
        self._view = ViewState()
        self._generation = 0

    @property
    def view(self):
        return self._view

    def _replace_view(self, todos):
        with self._lock:
            self._generation += 1
            view = ViewState(todos, self._generation)
            self._view = view
            # Emitting under the lock keeps signal order identical to swap order
            self.view_changed.emit(view)
        return view

    def load(self):
        logger.info("Fetching todos...")
        try:
            todos = self.api.list_todos()
        except TodoApiError as e:
            logger.error("Error fetching todos: %s", e)
            return False
        logger.info("Fetched %d todos", len(todos))
        self._replace_view(todos)
        return True

    def create(self, title, priority, due_date=None):
        logger.info("Adding todo: %s", title)
        try:
            self.api.create_todo(title, priority, due_date)
        except TodoApiError as e:
            logger.error("Error adding todo: %s", e)
            self.create_finished.emit(False)
            return False
        logger.info("Todo added successfully")
        self.create_finished.emit(True)
        self.load()
        return True

    def toggle(self, todo_id, completed):
        try:
            self.api.set_completed(todo_id, completed)
        except TodoApiError as e:
            logger.error("Error updating todo %s: %s", todo_id, e)
            return False
        logger.info("Todo with ID %s updated", todo_id)
        self.load()
        return True

    def update(self, todo, edit):
        """Replaces todo's title and priority; completion is carried over. A None edit means cancelled."""
        if edit is None:
            logger.debug("Update of todo %s cancelled", todo.id)
            return False
        try:
            self.api.replace_todo(todo.id, edit.title, todo.completed, edit.priority)
        except TodoApiError as e:
            logger.error("Error updating todo %s: %s", todo.id, e)
            return False
        logger.info("Todo updated successfully")
        self.load()
        return True

    def delete_completed(self):
        logger.info("Deleting completed todos...")
        try:
            self.api.delete_completed()
        except TodoApiError as e:
            logger.error("Error deleting completed todos: %s", e)
            return False
        logger.info("Completed todos deleted")
        self.load()
        return True
