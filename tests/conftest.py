import os
import sys

# Run headless
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure project root is on sys.path so local packages (ui, config) can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def panel(qapp):
    from ui.components.dp_table_panel import TablePanel
    w = TablePanel()
    yield w
    w.deleteLater()
