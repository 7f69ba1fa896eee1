"""
Per-user filesystem locations
"""
import sys
import os
from pathlib import Path

from config.defaults import APP_DATA_DIRNAME


def get_app_data_dir() -> Path:
    """
    Get application data directory
    Windows: %APPDATA%/SvgToPptx
    Others: ~/.config/SvgToPptx

    Returns:
        Path: Application data directory
    """
    if sys.platform == 'win32':
        base = Path(os.environ.get('APPDATA', ''))
    else:
        base = Path.home() / '.config'

    app_dir = base / APP_DATA_DIRNAME
    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir
