# todo_list_ui.py

import logging
import threading
from datetime import date

from PyQt5.QtCore import QDate, Qt
from PyQt5.QtWidgets import (
    QCheckBox, QComboBox, QDateEdit, QFrame, QHBoxLayout, QLabel,
    QLineEdit, QListWidget, QListWidgetItem, QPushButton, QVBoxLayout, QWidget
)

import config
from ui_components import STYLESHEET, EditTodoDialog, TodoRowWidget, format_date

logger = logging.getLogger(__name__)


def start_worker(target, *args):
    """Runs target(*args) on a daemon thread so network calls never block the GUI."""
    worker = threading.Thread(target=target, args=args, daemon=True)
    worker.start()
    return worker


class TodoListUI(QWidget):
    """
    Main window: add form, the rendered todo list and the "Delete Completed" button.
    All remote work goes through the ListSynchronizer; this widget only
    draws whatever ViewState it is handed and turns clicks into synchronizer calls.
    """
    def __init__(self, synchronizer, run_in_background=None, collect_edit=None,
                 enable_due_date=None, today=None):
        super().__init__()
        self.synchronizer = synchronizer
        self.run_in_background = run_in_background or start_worker
        self.collect_edit = collect_edit or (lambda todo: EditTodoDialog.get_edit(todo, self))
        self.enable_due_date = config.ENABLE_DUE_DATE if enable_due_date is None else enable_due_date
        self.today = today or date.today()
        self.submitted_title = None # Title of the last form submission still waiting on the server
        self.rendered_generation = 0

        self.setWindowTitle("ToDo List")
        self.setGeometry(100, 100, 560, 520)

        self.init_ui()
        self.setStyleSheet(STYLESHEET)

        # Signals may arrive from worker threads; PyQt queues them onto the GUI thread
        self.synchronizer.view_changed.connect(self.render)
        self.synchronizer.create_finished.connect(self.on_create_finished)

    def init_ui(self):
        main_layout = QVBoxLayout(self)

        header_layout = QHBoxLayout()
        header_layout.addWidget(self.create_label("ToDo List", "h1"))
        header_layout.addStretch()
        self.date_label = self.create_label(format_date(self.today), "dateLabel")
        header_layout.addWidget(self.date_label)
        main_layout.addLayout(header_layout)

        # --- Add form ---
        self.form_frame = QFrame()
        self.form_frame.setObjectName("formContainer")
        form_layout = QHBoxLayout(self.form_frame)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("e.g., Buy milk")
        self.title_input.returnPressed.connect(self.submit_form)
        form_layout.addWidget(self.title_input, 2)

        self.priority_combo = QComboBox()
        self.priority_combo.addItems(list(config.PRIORITIES))
        self.priority_combo.setCurrentText(config.DEFAULT_PRIORITY)
        form_layout.addWidget(self.priority_combo)

        self.due_date_checkbox = None
        self.due_date_input = None
        if self.enable_due_date:
            self.due_date_checkbox = QCheckBox("Due")
            form_layout.addWidget(self.due_date_checkbox)
            self.due_date_input = QDateEdit(QDate.currentDate())
            self.due_date_input.setCalendarPopup(True)
            self.due_date_input.setDisplayFormat("yyyy-MM-dd")
            self.due_date_input.setEnabled(False)
            self.due_date_checkbox.toggled.connect(self.due_date_input.setEnabled)
            form_layout.addWidget(self.due_date_input)

        self.add_button = QPushButton("Add")
        self.add_button.setObjectName("primaryButton")
        self.add_button.clicked.connect(self.submit_form)
        form_layout.addWidget(self.add_button)
        main_layout.addWidget(self.form_frame)

        # --- List ---
        self.list_frame = QFrame()
        self.list_frame.setObjectName("listContainer")
        list_layout = QVBoxLayout(self.list_frame)
        self.todo_list_widget = QListWidget()
        self.todo_list_widget.setObjectName("todoList")
        list_layout.addWidget(self.todo_list_widget)

        self.delete_completed_button = QPushButton("Delete Completed")
        self.delete_completed_button.setObjectName("dangerButton")
        self.delete_completed_button.clicked.connect(self.delete_completed)
        list_layout.addWidget(self.delete_completed_button, alignment=Qt.AlignRight)
        main_layout.addWidget(self.list_frame, 1)

    def create_label(self, text, style_class=""):
        label = QLabel(text)
        if style_class:
            label.setObjectName(style_class)
        return label

    def refresh(self):
        self.run_in_background(self.synchronizer.load)

    # --- Form ---

    def selected_due_date(self):
        if self.due_date_checkbox is None or not self.due_date_checkbox.isChecked():
            return None
        return self.due_date_input.date().toString("yyyy-MM-dd")

    def submit_form(self):
        title = self.title_input.text().strip()
        if not title:
            # Mirrors a required form field: nothing is sent
            self.title_input.setFocus()
            return
        priority = self.priority_combo.currentText()
        due_date = self.selected_due_date()
        logger.debug("Form submitted")
        self.submitted_title = title
        self.run_in_background(self.synchronizer.create, title, priority, due_date)

    def on_create_finished(self, ok):
        # A failed create keeps what the user typed; so does a form already edited since submitting
        submitted, self.submitted_title = self.submitted_title, None
        if ok and self.title_input.text().strip() == submitted:
            self.clear_form()

    def clear_form(self):
        self.title_input.clear()
        self.priority_combo.setCurrentText(config.DEFAULT_PRIORITY)
        if self.due_date_checkbox is not None:
            self.due_date_checkbox.setChecked(False)
            self.due_date_input.setDate(QDate.currentDate())

    # --- List ---

    def render(self, view):
        """Throws away every rendered row and builds one per todo, in server order."""
        if view.generation < self.rendered_generation:
            logger.debug("Ignoring stale %r", view)
            return
        self.rendered_generation = view.generation
        self.todo_list_widget.clear()
        for todo in view:
            row = TodoRowWidget(todo)
            row.toggled.connect(self.toggle_todo)
            row.update_requested.connect(self.edit_todo)

            item = QListWidgetItem()
            item.setData(Qt.UserRole, todo.id)
            item.setSizeHint(row.sizeHint())
            self.todo_list_widget.addItem(item)
            self.todo_list_widget.setItemWidget(item, row)

    def toggle_todo(self, todo_id, completed):
        self.run_in_background(self.synchronizer.toggle, todo_id, completed)

    def edit_todo(self, todo):
        edit = self.collect_edit(todo)
        if edit is None:
            return
        self.run_in_background(self.synchronizer.update, todo, edit)

    def delete_completed(self):
        self.run_in_background(self.synchronizer.delete_completed)
