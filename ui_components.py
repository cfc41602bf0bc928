# ui_components.py

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import (
    QCheckBox, QComboBox, QDialog, QDialogButtonBox, QFormLayout,
    QHBoxLayout, QLabel, QLineEdit, QPushButton, QWidget
)

from config import PRIORITIES
from todo_model import TodoEdit


def format_date(day):
    """
    Formats a date for the header label, e.g. 2024年5月1日.
    Month and day are not zero padded.
    """
    return f"{day.year}年{day.month}月{day.day}日"


class TodoRowWidget(QWidget):
    """
    One rendered todo: completion checkbox, "title - priority" label and an Update button.
    The row holds the Todo it was built from; it never changes it.
    """
    toggled = pyqtSignal(object, bool) # todo id, new completed state
    update_requested = pyqtSignal(object) # Todo

    def __init__(self, todo, parent=None):
        super().__init__(parent)
        self.todo = todo

        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 2, 6, 2)

        self.checkbox = QCheckBox()
        self.checkbox.setChecked(todo.completed)
        self.checkbox.toggled.connect(self._on_checkbox_toggled)
        layout.addWidget(self.checkbox)

        self.label = QLabel(todo.display_text())
        self.label.setObjectName("todoLabel")
        layout.addWidget(self.label, 1)

        self.update_button = QPushButton("Update")
        self.update_button.setObjectName("secondaryButton")
        self.update_button.clicked.connect(lambda: self.update_requested.emit(self.todo))
        layout.addWidget(self.update_button)

        self.set_completed_style(todo.completed)

    def _on_checkbox_toggled(self, checked):
        # Strike-through follows the checkbox right away; the list is redrawn once the server answers
        self.set_completed_style(checked)
        self.toggled.emit(self.todo.id, checked)

    def set_completed_style(self, completed):
        font = self.label.font()
        font.setStrikeOut(completed)
        self.label.setFont(font)
        self.label.setProperty("completed", "true" if completed else "false")


class EditTodoDialog(QDialog):
    """
    Collects a new title and priority for an existing todo.
    Use get_edit(); it returns a TodoEdit, or None when the dialog is cancelled.
    """
    def __init__(self, todo, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Update Todo")

        layout = QFormLayout(self)

        self.title_input = QLineEdit(todo.title)
        self.title_input.setPlaceholderText("Enter new title")
        layout.addRow("Title:", self.title_input)

        self.priority_combo = QComboBox()
        self.priority_combo.addItems(list(PRIORITIES))
        if todo.priority in PRIORITIES:
            self.priority_combo.setCurrentText(todo.priority)
        layout.addRow("Priority:", self.priority_combo)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        layout.addRow(self.buttons)

    def edit_result(self):
        return TodoEdit(self.title_input.text().strip(), self.priority_combo.currentText())

    @classmethod
    def get_edit(cls, todo, parent=None):
        dialog = cls(todo, parent)
        if dialog.exec_() == QDialog.Accepted:
            return dialog.edit_result()
        return None


STYLESHEET = """
    QWidget {
        background-color: #f0f2f5;
        color: #333333;
        font-family: "Segoe UI", "Helvetica Neue", Arial, sans-serif;
        font-size: 14px;
    }
    QFrame#formContainer, QFrame#listContainer {
        background-color: #ffffff;
        border: 1px solid #e0e0e0;
        border-radius: 12px;
        padding: 15px;
    }
    QLabel#h1 {
        font-size: 24px;
        font-weight: bold;
        color: #3a7fe0; /* Primary blue */
    }
    QLabel#dateLabel {
        font-size: 13px;
        color: #6c757d;
    }
    QLineEdit, QComboBox, QDateEdit {
        background-color: #f8f8f8;
        border: 1px solid #cccccc;
        border-radius: 8px;
        padding: 8px;
    }
    QLineEdit:focus, QComboBox:focus, QDateEdit:focus {
        border: 1px solid #3a7fe0;
        background-color: #ffffff;
    }
    QListWidget {
        background-color: #ffffff;
        border: 1px solid #e0e0e0;
        border-radius: 8px;
        outline: 0;
    }
    QLabel#todoLabel[completed="true"] {
        color: #777777; /* Grey out completed todos */
    }
    QPushButton {
        border: none;
        border-radius: 8px;
        padding: 8px 14px;
        font-weight: bold;
    }
    QPushButton#primaryButton {
        background-color: #3a7fe0;
        color: #ffffff;
    }
    QPushButton#primaryButton:hover {
        background-color: #4a8ff0;
    }
    QPushButton#secondaryButton {
        background-color: #6c757d; /* Grey */
        color: #ffffff;
    }
    QPushButton#dangerButton {
        background-color: #dc3545; /* Red */
        color: #ffffff;
    }
    QPushButton#dangerButton:hover {
        background-color: #c82333;
    }
"""
