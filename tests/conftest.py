"""Pytest configuration and shared fixtures."""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtWidgets import QApplication  # noqa: E402

from inkmark.core.document import parse_html  # noqa: E402
from inkmark.core.search import HighlightEngine  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    # Widgets, signals and timers all need an application object
    return QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Keep pinned searches written by tests out of the user's data directory."""
    path = tmp_path / "data"
    monkeypatch.setenv("INKMARK_DATA_DIR", str(path))
    return path


@pytest.fixture
def make_engine():
    """Build an engine over a document parsed from HTML, recording every snapshot."""
    def factory(markup):
        root = parse_html(markup)
        engine = HighlightEngine(root)
        snapshots = []
        engine.setup(snapshots.append)
        return root, engine, snapshots
    return factory
