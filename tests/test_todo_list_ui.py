from datetime import date

import pytest

from list_sync import ListSynchronizer, ViewState
from todo_list_ui import TodoListUI
from todo_model import Todo, TodoEdit
from ui_components import EditTodoDialog, format_date


def run_now(target, *args):
    target(*args)


@pytest.fixture
def edits():
    return []


@pytest.fixture
def window(qapp, fake_api, edits):
    sync = ListSynchronizer(fake_api)
    ui = TodoListUI(
        sync,
        run_in_background=run_now,
        collect_edit=lambda todo: edits.pop(0) if edits else None,
        enable_due_date=True,
        today=date(2024, 5, 1),
    )
    ui.refresh()
    return ui


def row_widgets(window):
    widget = window.todo_list_widget
    return [widget.itemWidget(widget.item(i)) for i in range(widget.count())]


def is_struck_out(row):
    return row.label.font().strikeOut()


def find_todo(view, todo_id):
    return next((t for t in view if t.id == todo_id), None)


def row_titles(window):
    return [row.label.text() for row in row_widgets(window)]


def test_format_date():
    assert format_date(date(2024, 5, 1)) == "2024年5月1日"
    assert format_date(date(2023, 12, 31)) == "2023年12月31日"


def test_header_shows_today(window):
    assert window.date_label.text() == "2024年5月1日"


def test_renders_one_row_per_todo_in_order(window):
    assert window.todo_list_widget.count() == 3
    assert row_titles(window) == ["Buy milk - Low", "Write report - High", "Call bank - Medium"]


def test_completed_rows_are_checked_and_struck_out(window):
    rows = row_widgets(window)
    assert [r.checkbox.isChecked() for r in rows] == [False, True, False]
    assert [is_struck_out(r) for r in rows] == [False, True, False]


def test_rerender_does_not_duplicate_rows(window):
    window.refresh()
    window.refresh()
    assert window.todo_list_widget.count() == 3


def test_submit_creates_and_clears_form(window, fake_api):
    window.title_input.setText("Plan trip")
    window.priority_combo.setCurrentText("High")
    window.submit_form()
    assert ("create_todo", "Plan trip", "High", None) in fake_api.calls
    assert window.todo_list_widget.count() == 4
    assert row_titles(window)[-1] == "Plan trip - High"
    assert window.title_input.text() == ""
    assert window.priority_combo.currentText() == "Low"


def test_submit_with_due_date(window, fake_api):
    window.title_input.setText("Pay rent")
    window.due_date_checkbox.setChecked(True)
    window.submit_form()
    due = fake_api.calls[-2][3]
    assert due is not None and len(due) == 10
    assert window.due_date_checkbox.isChecked() is False


def test_failed_create_keeps_title(window, fake_api):
    fake_api.fail_on.add("create_todo")
    window.title_input.setText("Plan trip")
    window.submit_form()
    assert window.title_input.text() == "Plan trip"
    assert window.todo_list_widget.count() == 3


def test_empty_title_sends_nothing(window, fake_api):
    calls_before = list(fake_api.calls)
    window.title_input.setText("   ")
    window.submit_form()
    assert fake_api.calls == calls_before


def test_checkbox_toggles_remote_flag(window, fake_api):
    row_widgets(window)[0].checkbox.setChecked(True)
    assert ("set_completed", 1, True) in fake_api.calls
    assert find_todo(window.synchronizer.view, 1).completed is True


def test_failed_toggle_leaves_checkbox_toggled(window, fake_api):
    fake_api.fail_on.add("set_completed")
    row = row_widgets(window)[0]
    row.checkbox.setChecked(True)
    assert row.checkbox.isChecked() is True
    assert is_struck_out(row) is True
    assert find_todo(window.synchronizer.view, 1).completed is False


def test_update_button_replaces_record(window, fake_api, edits):
    edits.append(TodoEdit("Buy oat milk", "Medium"))
    row_widgets(window)[0].update_button.click()
    assert ("replace_todo", 1, "Buy oat milk", False, "Medium") in fake_api.calls
    assert row_titles(window)[0] == "Buy oat milk - Medium"


def test_cancelled_edit_sends_nothing(window, fake_api):
    calls_before = list(fake_api.calls)
    row_widgets(window)[0].update_button.click()
    assert fake_api.calls == calls_before


def test_delete_completed_button(window):
    window.delete_completed_button.click()
    assert window.todo_list_widget.count() == 2
    assert not any(row.checkbox.isChecked() for row in row_widgets(window))


def test_edit_dialog_prefills_and_returns_edit(qapp, fake_api):
    todo = fake_api.list_todos()[1]
    dialog = EditTodoDialog(todo)
    assert dialog.title_input.text() == "Write report"
    assert dialog.priority_combo.currentText() == "High"
    dialog.title_input.setText("  Write summary ")
    dialog.priority_combo.setCurrentText("Low")
    assert dialog.edit_result() == TodoEdit("Write summary", "Low")


def test_stale_view_is_not_rendered(window):
    newer = ViewState([Todo(1, "Newer")], generation=50)
    older = ViewState([Todo(1, "Older"), Todo(2, "Other")], generation=49)
    window.render(newer)
    window.render(older)
    assert row_titles(window) == ["Newer - Low"]


def test_create_does_not_clear_text_typed_after_submit(qapp, fake_api):
    pending = []
    ui = TodoListUI(
        ListSynchronizer(fake_api),
        run_in_background=lambda target, *args: pending.append((target, args)),
        enable_due_date=False,
    )
    ui.title_input.setText("Plan trip")
    ui.submit_form()
    ui.title_input.setText("Book hotel")
    for target, args in pending:
        target(*args)
    assert ("create_todo", "Plan trip", "Low", None) in fake_api.calls
    assert ui.title_input.text() == "Book hotel"
