"""
Utility functions and helpers.
"""
from .resource_loader import APP_NAME, DATA_DIR_ENV_VAR, get_app_data_dir

__all__ = [
    'APP_NAME',
    'DATA_DIR_ENV_VAR',
    'get_app_data_dir',
]
