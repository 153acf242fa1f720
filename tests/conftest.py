# tests/conftest.py
import json
import os
import threading

import pytest

# Qt must run headless in CI; this has to be set before any QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeExecutor:
    """
    Stands in for CommandExecutor. Returns canned text and records every call.
    If `gate` is set, organize calls block until it is released.
    """

    def __init__(self, organize_result="Success: 5 files organized", config_result="Success:Opened config file"):
        self.organize_result = organize_result
        self.config_result = config_result
        self.organize_calls = []
        self.config_calls = 0
        self.gate = None
        self._lock = threading.Lock()

    def organize_files(self, path, is_backup):
        with self._lock:
            self.organize_calls.append((path, is_backup))
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if isinstance(self.organize_result, Exception):
            raise self.organize_result
        return self.organize_result

    def open_config_file(self):
        with self._lock:
            self.config_calls += 1
        return self.config_result


@pytest.fixture
def fake_executor():
    return FakeExecutor()


@pytest.fixture
def config_file(tmp_path):
    """Writes a config.json and returns a function to rewrite it."""
    path = tmp_path / "config.json"

    def write(enable_backup=True):
        path.write_text(json.dumps({"enableBackup": enable_backup}))
        return path

    write(False)
    return write


@pytest.fixture
def file_map_file(tmp_path):
    path = tmp_path / "file_map-config.json"
    path.write_text(json.dumps({
        "Images": [".jpg", ".png"],
        "Documents": [".pdf", "TXT"],
    }))
    return path


@pytest.fixture
def messy_folder(tmp_path):
    """A folder with a few files of different types and one sub-folder."""
    folder = tmp_path / "Downloads"
    folder.mkdir()
    (folder / "holiday.jpg").write_text("jpg")
    (folder / "scan.PDF").write_text("pdf")
    (folder / "notes.txt").write_text("txt")
    (folder / "setup.xyz").write_text("xyz")
    (folder / "empty_dir").mkdir()
    (folder / "project").mkdir()
    (folder / "project" / "keep.py").write_text("print('hi')")
    return folder
