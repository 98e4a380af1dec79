import json
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_FILE = os.environ.get(
    'DP_VIEWER_CONFIG',
    os.path.join(os.path.dirname(os.path.abspath(__file__)), 'app_config.json')
)

DEFAULTS = {
    "highlight_color": "#90ee90",
    "neutral_color": "#ffffff",
    "header_background": "#2c3e50",
    "header_foreground": "#ecf0f1",
    "window_width": 900,
    "window_height": 600,
    "log_level": "INFO"
}


def load_config(path=None):
    path = path or CONFIG_FILE
    try:
        if os.path.exists(path):
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                cfg = DEFAULTS.copy()
                cfg.update(data)
                return cfg
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Could not read config {path}, using defaults: {e}")
    return DEFAULTS.copy()


def save_config(cfg, path=None):
    path = path or CONFIG_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(cfg, f, indent=2)
        return True
    except OSError as e:
        logger.warning(f"Could not save config {path}: {e}")
        return False
