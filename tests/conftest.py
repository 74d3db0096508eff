"""Shared fixtures: one offscreen QApplication and a clean layout config per test."""

import os
import sys
import time

import pytest

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from talkrow.core import config as layout_config


@pytest.fixture(scope='session')
def qapp():
    """Set up QApplication for testing."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def clean_layout_config(monkeypatch):
    """Every test starts without an installed layout config."""
    monkeypatch.delenv(layout_config.CONFIG_ENV_VAR, raising=False)
    layout_config._reset_layout_config()
    yield
    layout_config._reset_layout_config()


@pytest.fixture
def drain_events(qapp):
    """Callable that lets worker threads finish and delivers their queued results."""

    def drain(fetcher, timeout=5.0):
        deadline = time.monotonic() + timeout
        fetcher.wait_for_done(int(timeout * 1000))
        while fetcher.pending_count() and time.monotonic() < deadline:
            QCoreApplication.processEvents()
            time.sleep(0.01)
        QCoreApplication.processEvents()

    return drain
