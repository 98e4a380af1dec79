from PyQt6.QtWidgets import QMainWindow, QToolBar, QStatusBar, QLabel
from PyQt6.QtGui import QAction, QKeySequence
from ui.components.dp_table_panel import TablePanel
from ui.components.cell_style import RowMaxHighlighter
from config import load_config
import logging

logger = logging.getLogger(__name__)

# Precomputed 0/1 knapsack table for items (weight, value):
# (1, 1), (3, 4), (4, 5), (5, 7) and capacity 7.
SAMPLE_NUM_ITEMS = 4
SAMPLE_CAPACITY = 7
SAMPLE_TABLE = [
    [0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 1, 1, 1, 1, 1, 1],
    [0, 1, 1, 4, 5, 5, 5, 5],
    [0, 1, 1, 4, 5, 6, 6, 9],
    [0, 1, 1, 4, 5, 7, 8, 9],
]


class MainWindow(QMainWindow):
    def __init__(self, cfg=None):
        super().__init__()
        self.cfg = cfg or load_config()
        self.setWindowTitle("DP Table Viewer")
        self.resize(self.cfg["window_width"], self.cfg["window_height"])

        self.panel = TablePanel(
            style_provider=RowMaxHighlighter(self.cfg["highlight_color"], self.cfg["neutral_color"]),
            header_background=self.cfg["header_background"],
            header_foreground=self.cfg["header_foreground"],
        )
        self.setCentralWidget(self.panel)

        self._init_toolbar()
        self._init_status_bar()
        self.load_sample()
        logger.info("Main window initialized")

    def _init_toolbar(self):
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.reload_action = QAction("Reload Sample", self)
        self.reload_action.setShortcut(QKeySequence.StandardKey.Refresh)
        self.reload_action.setToolTip("Show the sample knapsack table")
        self.reload_action.triggered.connect(self.load_sample)
        toolbar.addAction(self.reload_action)

        self.clear_action = QAction("Clear", self)
        self.clear_action.setToolTip("Remove all rows and columns")
        self.clear_action.triggered.connect(self.clear)
        toolbar.addAction(self.clear_action)

    def _init_status_bar(self):
        status_bar = QStatusBar()
        self.setStatusBar(status_bar)
        self.size_label = QLabel()
        self.size_label.setStyleSheet("color: #2c3e50; font-weight: bold;")
        status_bar.addWidget(self.size_label)
        self._update_size_label()

    def _update_size_label(self):
        rows = self.panel.row_count()
        if rows == 0:
            self.size_label.setText("Empty")
        else:
            self.size_label.setText(f"{rows} rows x {self.panel.column_count() - 1} capacities")

    def show_table(self, data, num_items, capacity):
        try:
            self.panel.display_dp_table(data, num_items, capacity)
        except Exception:
            logger.exception("Failed to render DP table")
            raise
        finally:
            self._update_size_label()
        logger.info(f"Displayed table for {num_items} items, capacity {capacity}")

    def load_sample(self):
        self.show_table(SAMPLE_TABLE, SAMPLE_NUM_ITEMS, SAMPLE_CAPACITY)

    def clear(self):
        self.panel.clear_table()
        self._update_size_label()
        logger.info("Table cleared")
