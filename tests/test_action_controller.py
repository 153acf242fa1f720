# tests/test_action_controller.py

import threading

import pytest
from PySide6.QtCore import QObject

from file_organizer.core.results import Severity
from file_organizer.gui.action_controller import OrganizeOrchestrator
from file_organizer.gui.models import ConfigState, PathInputGate
from file_organizer.gui.notifications import NotificationSink, NOTIFICATION_LIFETIME_MS

pytestmark = pytest.mark.usefixtures("qapp")


@pytest.fixture
def orchestrator(fake_executor):
    return OrganizeOrchestrator(PathInputGate(), ConfigState(), NotificationSink(), fake_executor)


def _settle(qtbot, orchestrator):
    """Clicks the organize button and waits for the request to settle."""
    with qtbot.waitSignal(orchestrator.request_settled, timeout=5000) as blocker:
        orchestrator.request_organize()
    return blocker.args


# --- Tests for the organize workflow ---

def test_organize_scenario_success(qtbot, orchestrator, fake_executor):
    """Path + backup flag go out once; the tag-stripped message comes back."""
    orchestrator.config_state.set_backup_enabled(True)
    orchestrator.gate.set_path("/home/user/Downloads")

    _, result = _settle(qtbot, orchestrator)

    assert fake_executor.organize_calls == [("/home/user/Downloads", True)]
    assert result.severity is Severity.SUCCESS
    [notification] = orchestrator.sink.active()
    assert (notification.severity, notification.message) == (Severity.SUCCESS, " 5 files organized")
    assert notification.position == "top-center"
    assert notification.emphasis == 1.0
    assert orchestrator.gate.path == ""
    assert orchestrator.gate.is_action_enabled() is False


def test_organize_error_result(qtbot, orchestrator, fake_executor):
    fake_executor.organize_result = "Error: disk full"
    orchestrator.gate.set_path("/data")

    _, result = _settle(qtbot, orchestrator)

    assert result.is_error
    [notification] = orchestrator.sink.active()
    assert (notification.severity, notification.message) == (Severity.ERROR, " disk full")
    assert orchestrator.gate.path == ""
    assert orchestrator.gate.is_action_enabled() is False


def test_success_message_with_tag(qtbot, orchestrator, fake_executor):
    fake_executor.organize_result = "Success: moved 12 files"
    orchestrator.gate.set_path("/data")

    _settle(qtbot, orchestrator)

    assert orchestrator.sink.active()[0].message == " moved 12 files"


def test_executor_exception_becomes_error_text(qtbot, orchestrator, fake_executor):
    fake_executor.organize_result = RuntimeError("backend crashed")
    orchestrator.gate.set_path("/data")

    _, result = _settle(qtbot, orchestrator)

    assert result.raw_text == "Error: backend crashed"
    assert orchestrator.sink.active()[0].severity is Severity.ERROR
    assert orchestrator.gate.path == ""


def test_empty_path_never_organizes(orchestrator, fake_executor):
    orchestrator.gate.set_path("")
    assert orchestrator.request_organize() is None
    assert orchestrator.is_idle()
    assert fake_executor.organize_calls == []


def test_organize_rejects_empty_path(orchestrator):
    with pytest.raises(ValueError):
        orchestrator.organize("", False)


def test_flag_is_read_from_store_at_click_time(qtbot, orchestrator, fake_executor):
    orchestrator.gate.set_path("/first")
    _settle(qtbot, orchestrator)

    orchestrator.config_state.set_backup_enabled(True)
    orchestrator.gate.set_path("/second")
    _settle(qtbot, orchestrator)

    assert fake_executor.organize_calls == [("/first", False), ("/second", True)]


def test_one_request_per_click(qtbot, orchestrator, fake_executor):
    started = []
    orchestrator.request_started.connect(lambda *args: started.append(args))
    orchestrator.gate.set_path("/data")

    _settle(qtbot, orchestrator)

    assert len(started) == 1
    assert len(fake_executor.organize_calls) == 1


# --- Tests for concurrency behaviour ---

def test_second_click_during_flight_issues_second_request(qtbot, orchestrator, fake_executor):
    """There is no busy lock: re-entering a path while one request runs starts another."""
    fake_executor.gate = threading.Event()

    orchestrator.gate.set_path("/one")
    orchestrator.request_organize()
    orchestrator.gate.set_path("/two")
    orchestrator.request_organize()

    assert orchestrator.in_flight_count() == 2

    fake_executor.gate.set()
    qtbot.waitUntil(orchestrator.is_idle, timeout=5000)

    assert sorted(fake_executor.organize_calls) == [("/one", False), ("/two", False)]
    assert len(orchestrator.sink.active()) == 2
    assert orchestrator.gate.path == ""


def test_results_processed_in_completion_order(qtbot, orchestrator):
    release = {"/slow": threading.Event(), "/fast": threading.Event()}

    class OrderedExecutor:
        def organize_files(self, path, is_backup):
            release[path].wait(timeout=5)
            return f"Success: {path}"

    orchestrator.executor = OrderedExecutor()
    settled = []
    orchestrator.request_settled.connect(lambda request_id, result: settled.append(result.message))

    orchestrator.gate.set_path("/slow")
    orchestrator.request_organize()
    orchestrator.gate.set_path("/fast")
    orchestrator.request_organize()

    release["/fast"].set()
    qtbot.waitUntil(lambda: settled == [" /fast"], timeout=5000)
    release["/slow"].set()
    qtbot.waitUntil(lambda: settled == [" /fast", " /slow"], timeout=5000)


# --- Tests for NotificationSink ---

def test_sink_ignores_unknown_severity():
    sink = NotificationSink()
    assert sink.notify("Success: hi", "warning") is None
    assert sink.active() == []


def test_sink_stacks_without_deduplication():
    sink = NotificationSink()
    sink.notify("Error: same", "error")
    sink.notify("Error: same", Severity.ERROR)
    sink.notify("Success: other", "success")

    assert [n.message for n in sink.active()] == [" same", " same", " other"]


def test_sink_auto_dismisses(qtbot):
    sink = NotificationSink(lifetime_ms=50)
    posted = sink.notify("Success: done", "success")

    with qtbot.waitSignal(sink.notification_dismissed, timeout=2000) as blocker:
        pass

    assert blocker.args == [posted]
    assert sink.active() == []


def test_sink_default_lifetime_is_five_seconds():
    notification = NotificationSink().notify("Success: done", "success")
    assert notification.lifetime_ms == NOTIFICATION_LIFETIME_MS == 5000


def test_sink_manual_dismiss():
    sink = NotificationSink()
    notification = sink.notify("Error: x", "error")
    assert sink.dismiss(notification) is True
    assert sink.dismiss(notification) is False


def test_sink_timer_is_dropped_with_the_sink(qtbot):
    """Deleting the sink's owner cancels its pending auto-dismiss timers."""
    owner = QObject()
    sink = NotificationSink(lifetime_ms=50, parent=owner)
    sink.notify("Success: done", "success")

    with qtbot.waitSignal(owner.destroyed, timeout=2000):
        owner.deleteLater()

    # A timer firing into the deleted sink would raise here and fail the test.
    qtbot.wait(200)
