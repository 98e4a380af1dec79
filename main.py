# main.py
import logging
import os
import sys

# Add the project root directory to Python path
root_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, root_dir)

os.environ["QT_API"] = "pyqt6"

from PyQt6.QtWidgets import QApplication
from config import load_config
from ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def configure_logging(level):
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def main(argv=None):
    cfg = load_config()
    configure_logging(cfg["log_level"])

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName("DP Table Viewer")
    app.setApplicationVersion("1.0.0")

    try:
        window = MainWindow(cfg)
        window.show()
    except Exception as e:
        logger.error(f"MainWindow initialization error: {e}")
        return 1
    logger.info("MainWindow shown")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
