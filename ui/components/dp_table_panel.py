import logging
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QTableWidget, QTableWidgetItem, QScrollArea,
    QAbstractItemView, QHeaderView, QFrame
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush
from config import DEFAULTS
from ui.components.cell_style import RowMaxHighlighter, row_maxima

logger = logging.getLogger(__name__)

HEADER_MARKER = "Item \\ Capacity"
EMPTY_ROW_LABEL = "No items"
HIGHLIGHT_ROLE = Qt.ItemDataRole.UserRole.value + 1


def generate_column_names(capacity):
    """Header labels: the marker, then one label per capacity 0..capacity.

    The result has ``capacity + 2`` entries, one for the label column plus one
    per value column, so ``generate_column_names(0)`` is ``[marker, "0"]``.
    """
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    return [HEADER_MARKER] + [str(w) for w in range(capacity + 1)]


def row_label(i):
    return EMPTY_ROW_LABEL if i == 0 else f"Item {i}"


class TablePanel(QWidget):
    """Read-only grid showing a DP table with each row's maximum highlighted.

    Column 0 holds the row label; column ``w + 1`` holds ``data[i][w]``.
    The panel copies values into its own table model and keeps no reference to
    the caller's array.
    """

    def __init__(self, parent=None, style_provider=None, header_background=None, header_foreground=None):
        super().__init__(parent)
        self.style_provider = style_provider or RowMaxHighlighter()

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.table = QTableWidget(0, 0)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setDefaultAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        self.table.setStyleSheet(f"""
            QHeaderView::section {{
                background-color: {header_background or DEFAULTS["header_background"]};
                color: {header_foreground or DEFAULTS["header_foreground"]};
                font-weight: bold;
                border: none;
                padding: 6px;
            }}
        """)

        # Scroll area for table
        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.scroll.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.scroll.setWidget(self.table)
        self.layout.addWidget(self.scroll)

    def _make_item(self, text):
        item = QTableWidgetItem(text)
        item.setFlags(Qt.ItemFlag.ItemIsSelectable | Qt.ItemFlag.ItemIsEnabled)
        item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
        return item

    def display_dp_table(self, data, num_items, capacity):
        if num_items < 0:
            raise ValueError(f"num_items must be non-negative, got {num_items}")
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.clear_table()
        headers = generate_column_names(capacity)
        self.table.setColumnCount(len(headers))
        self.table.setHorizontalHeaderLabels(headers)

        for i in range(num_items + 1):
            r = self.table.rowCount()
            self.table.insertRow(r)
            self.table.setItem(r, 0, self._make_item(row_label(i)))
            for w in range(capacity + 1):
                self.table.setItem(r, w + 1, self._make_item(str(data[i][w])))

        self.apply_color_coding(data, num_items, capacity)
        logger.debug(f"Rendered DP table with {num_items + 1} rows and {capacity + 1} value columns")

    def apply_color_coding(self, data, num_items, capacity):
        for i, row_max in enumerate(row_maxima(data, num_items, capacity)):
            for w in range(capacity + 1):
                item = self.table.item(i, w + 1)
                if item is None:
                    continue
                value = data[i][w]
                item.setBackground(QBrush(self.style_provider.background(value, row_max)))
                fg = self.style_provider.foreground(value, row_max)
                if fg is not None:
                    item.setForeground(QBrush(fg))
                item.setData(HIGHLIGHT_ROLE, self.style_provider.is_highlight(value, row_max))

    def clear_table(self):
        self.table.setRowCount(0)
        self.table.setColumnCount(0)
        logger.debug("DP table cleared")

    def row_count(self):
        return self.table.rowCount()

    def column_count(self):
        return self.table.columnCount()

    def header_labels(self):
        labels = []
        for col in range(self.table.columnCount()):
            item = self.table.horizontalHeaderItem(col)
            labels.append(item.text() if item else "")
        return labels

    def cell_text(self, row, col):
        item = self.table.item(row, col)
        return item.text() if item else None

    def is_highlighted(self, row, col):
        item = self.table.item(row, col)
        return bool(item and item.data(HIGHLIGHT_ROLE))
