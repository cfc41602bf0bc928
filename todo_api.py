# todo_api.py

import logging

import requests # For making API calls

import config
from todo_model import Todo, create_payload, replace_payload, toggle_payload

logger = logging.getLogger(__name__)


class TodoApiError(Exception):
    """Base class for errors raised while talking to the todo REST API."""


class FetchError(TodoApiError):
    """
    Raised when a request fails in transport or comes back with a non-ok status.
    status_code is None for transport failures; body holds the response text when there is one.
    """
    def __init__(self, message, status_code=None, body=""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self):
        text = super().__str__()
        if self.status_code is not None:
            text += f" (status {self.status_code})"
        if self.body:
            text += f": {self.body}"
        return text


class TodoApiClient:
    """
    Thin client for the /todos resource.
    Success is decided by response.ok alone; payloads of mutation responses are not inspected.
    """
    def __init__(self, base_url=None, session=None, timeout=None):
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.collection_url = self.base_url + config.TODOS_PATH
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT

    def item_url(self, todo_id):
        return f"{self.collection_url}/{todo_id}"

    def _send(self, method, url, failure_message, payload=None):
        kwargs = {"timeout": self.timeout}
        if payload is not None:
            kwargs["json"] = payload
            kwargs["headers"] = {"Content-Type": "application/json"}
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.exceptions.RequestException as e:
            raise FetchError(f"{failure_message}: {e}") from e

        if not response.ok:
            raise FetchError(failure_message, response.status_code, response.text)
        return response

    def list_todos(self):
        """GET /todos -> list of Todo in server order."""
        response = self._send("GET", self.collection_url, "Failed to fetch todos")
        try:
            data = response.json()
        except ValueError as e:
            raise FetchError("Failed to fetch todos: response is not JSON", response.status_code, response.text) from e
        if not isinstance(data, list):
            raise FetchError("Failed to fetch todos: expected a JSON array", response.status_code, response.text)
        if not all(isinstance(item, dict) for item in data):
            raise FetchError("Failed to fetch todos: expected an array of objects", response.status_code, response.text)

        todos = []
        for item in data:
            if item.get("id") is None:
                # Without an id the row could never be toggled, updated or relayed back
                logger.warning("Skipping todo without id: %s", item)
                continue
            todos.append(Todo.from_dict(item))
        return todos

    def create_todo(self, title, priority, due_date=None):
        payload = create_payload(title, priority, due_date)
        return self._send("POST", self.collection_url, "Failed to add todo", payload)

    def set_completed(self, todo_id, completed):
        return self._send("PATCH", self.item_url(todo_id), "Failed to update todo", toggle_payload(completed))

    def replace_todo(self, todo_id, title, completed, priority):
        payload = replace_payload(todo_id, title, completed, priority)
        return self._send("PUT", self.item_url(todo_id), "Failed to update todo", payload)

    def delete_completed(self):
        # Bodyless bulk delete; the server decides that this means "all completed todos"
        return self._send("DELETE", self.collection_url, "Failed to delete todo")

    def close(self):
        self.session.close()
