from PyQt6.QtGui import QColor
from config import DEFAULTS


def row_maxima(data, num_items, capacity):
    """Return the largest value of each row over columns 0..capacity."""
    return [max(data[i][w] for w in range(capacity + 1)) for i in range(num_items + 1)]


class CellStyleProvider:
    """Decides how a single value cell of the DP grid is painted.

    The panel asks the provider once per cell, passing the cell value and the
    maximum of the row it belongs to. Subclasses normally override only
    ``is_highlight``; the background follows from it.
    """

    def __init__(self, highlight_color=None, neutral_color=None):
        self.highlight_color = QColor(highlight_color or DEFAULTS["highlight_color"])
        self.neutral_color = QColor(neutral_color or DEFAULTS["neutral_color"])

    def is_highlight(self, value, row_max):
        return False

    def background(self, value, row_max):
        if self.is_highlight(value, row_max):
            return self.highlight_color
        return self.neutral_color

    def foreground(self, value, row_max):
        return None


class RowMaxHighlighter(CellStyleProvider):
    """Highlights every cell holding its row's maximum, unless that maximum is 0."""

    def is_highlight(self, value, row_max):
        return row_max != 0 and value == row_max
