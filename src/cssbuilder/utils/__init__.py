"""Utility components for cssbuilder."""

from cssbuilder.utils.files import get_logs_path, get_project_root, init_cssbuilder
from cssbuilder.utils.logging import setup_local_logging

__all__ = [
    'get_logs_path',
    'get_project_root',
    'init_cssbuilder',
    'setup_local_logging',
]
