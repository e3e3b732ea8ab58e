"""Utils module."""

from .helpers import (
    escape_html,
    ensure_dir,
    get_file_size_kb,
)
from .parsing import TextParser
from .logger import setup_logger

__all__ = [
    'escape_html',
    'ensure_dir',
    'get_file_size_kb',
    'TextParser',
    'setup_logger',
]
