import logging
import os
import threading
import time

import pytest

from media_renamer.modules.fs import LocalFileSystem
from media_renamer.settings import LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class InstrumentedFS(LocalFileSystem):
    """Real filesystem, but records how many renames run at the same time."""

    def __init__(self, delay: float = 0.0, fail_names=(), gate=None):
        self.delay = delay
        self.gate = gate
        self.fail_names = set(fail_names)
        self._lock = threading.Lock()
        self.in_flight = 0
        self.max_in_flight = 0
        self.calls = []

    def rename(self, old_path, new_path):
        with self._lock:
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
            self.calls.append((old_path, new_path))
        try:
            if self.gate is not None:
                self.gate.wait(timeout=5)
            if self.delay:
                time.sleep(self.delay)
            if os.path.basename(old_path) in self.fail_names:
                raise PermissionError(13, "Permission denied", old_path)
            super().rename(old_path, new_path)
        finally:
            with self._lock:
                self.in_flight -= 1


@pytest.fixture
def make_files(tmp_path):
    def _make(names):
        for name in names:
            (tmp_path / name).write_bytes(name.encode())
        return tmp_path
    return _make
