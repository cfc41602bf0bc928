# todo_model.py

from datetime import date

from config import DEFAULT_PRIORITY


class Todo:
    """
    Represents a single to-do record as served by the REST API.
    The id is assigned by the server and only ever relayed back to it;
    the client never creates or interprets ids.
    """
    def __init__(self, todo_id, title, completed=False, priority=DEFAULT_PRIORITY, due_date=None):
        self.id = todo_id
        self.title = title
        self.completed = completed
        self.priority = priority # "Low", "Medium", "High"
        self.due_date = due_date # Stored as an ISO string (e.g., "2024-05-01") or None

    def to_dict(self):
        """
        Converts the todo object to a dictionary for JSON serialization.
        """
        data = {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "priority": self.priority,
        }
        if self.due_date is not None:
            data["due_date"] = self.due_date
        return data

    @classmethod
    def from_dict(cls, data):
        """
        Creates a Todo object from a dictionary (e.g., a record in the GET /todos response).
        Uses .get() for optional fields so older servers without due dates still load.
        """
        return cls(
            data.get("id"),
            data.get("title", ""),
            parse_completed(data.get("completed", False)),
            data.get("priority", DEFAULT_PRIORITY),
            data.get("due_date"),
        )

    def display_text(self):
        text = f"{self.title} - {self.priority}"
        if self.due_date:
            text += f" (due {self.due_date})"
        return text

    def __eq__(self, other):
        if not isinstance(other, Todo):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Todo(id={self.id!r}, title={self.title!r}, completed={self.completed}, priority={self.priority!r})"


class TodoEdit:
    """Result of the edit dialog: the new title and priority for an existing todo."""
    def __init__(self, title, priority):
        self.title = title
        self.priority = priority

    def __eq__(self, other):
        if not isinstance(other, TodoEdit):
            return NotImplemented
        return (self.title, self.priority) == (other.title, other.priority)

    def __repr__(self):
        return f"TodoEdit(title={self.title!r}, priority={self.priority!r})"


def parse_completed(value):
    """Reads the completed flag; the strings "true"/"false" count as their boolean values."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def format_due_date(value):
    """Serialises a due date as YYYY-MM-DD; strings pass through untouched."""
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def create_payload(title, priority, due_date=None):
    # New todos always start out incomplete
    payload = {"title": title, "completed": False, "priority": priority}
    if due_date is not None:
        payload["due_date"] = format_due_date(due_date)
    return payload


def toggle_payload(completed):
    return {"completed": completed}


def replace_payload(todo_id, title, completed, priority):
    return {"id": todo_id, "title": title, "completed": completed, "priority": priority}
