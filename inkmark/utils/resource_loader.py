"""
Per-user data locations.
"""
import os
import sys
from pathlib import Path

APP_NAME = "Inkmark"

# Overrides the data directory, mostly for tests and portable installs
DATA_DIR_ENV_VAR = "INKMARK_DATA_DIR"


def get_app_data_dir(app_name: str = APP_NAME) -> Path:
    """
    Get the application data directory for storing user data.

    Args:
        app_name: Name of the application

    Returns:
        Path to the app data directory
    """
    override = os.environ.get(DATA_DIR_ENV_VAR)
    if override:
        app_dir = Path(override).expanduser()
    else:
        if os.name == 'nt':  # Windows
            base_dir = os.environ.get('APPDATA', os.path.expanduser('~'))
        elif sys.platform == 'darwin':  # macOS
            base_dir = os.path.expanduser('~/Library/Application Support')
        else:  # Linux and others
            base_dir = os.path.expanduser('~/.local/share')
        app_dir = Path(base_dir) / app_name

    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir
