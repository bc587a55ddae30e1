# src/sct_reader/utils/__init__.py

from .pathing import (
    CONFIG_DIR,
    MOCK_FILES_DIR,
    PROJECT_ROOT,
    mock_file_path,
    project_root,
    resolve_project_path,
)

__all__ = [
    "CONFIG_DIR",
    "MOCK_FILES_DIR",
    "PROJECT_ROOT",
    "project_root",
    "resolve_project_path",
    "mock_file_path",
]
