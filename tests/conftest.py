"""Pytest fixtures for quiltdesigner tests."""

import os

import pytest

from PySide6 import QtCore

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Application for QObject / QSettings based tests.

    A QApplication when QtWidgets loads, so widget tests can share it.
    """
    app = QtCore.QCoreApplication.instance()
    if app is None:
        try:
            from PySide6 import QtWidgets
        except ImportError:
            app = QtCore.QCoreApplication([])
        else:
            app = QtWidgets.QApplication([])
    return app


@pytest.fixture
def widgets_app(qapp):
    """The session application, skipping the test if it cannot show widgets."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    if not isinstance(qapp, QtWidgets.QApplication):
        pytest.skip("QtWidgets unavailable")
    return qapp


@pytest.fixture
def settings(qapp, tmp_path) -> QtCore.QSettings:
    """File-backed settings store, isolated per test."""
    return QtCore.QSettings(str(tmp_path / "designs.ini"), QtCore.QSettings.IniFormat)
