"""Registry for file format handlers."""

from pathlib import Path
from typing import Dict, Type, List

from .base import FileFormat
from .dimacs import DimacsFormat


_FORMATS: Dict[str, Type[FileFormat]] = {
    'dimacs': DimacsFormat,
    'cnf': DimacsFormat,
}


def get_format_handler(name: str) -> FileFormat:
    """Get a file format handler by name."""
    name = name.lower()
    if name not in _FORMATS:
        raise ValueError(f"Unknown file format: {name}")
    return _FORMATS[name]()


def format_for_path(path: Path) -> FileFormat:
    """Pick a handler from a file's extension, defaulting to DIMACS."""
    suffix = Path(path).suffix.lower()
    for format_class in dict.fromkeys(_FORMATS.values()):
        handler = format_class()
        if suffix in handler.extensions:
            return handler
    return DimacsFormat()


def list_formats() -> List[str]:
    return list(_FORMATS.keys())
