"""
Problem file formats.
"""

from .base import FileFormat
from .dimacs import DimacsFormat, read_file, read_string
from .registry import get_format_handler, format_for_path, list_formats

__all__ = [
    'FileFormat', 'DimacsFormat', 'read_file', 'read_string',
    'get_format_handler', 'format_for_path', 'list_formats'
]
