# src/sct_reader/utils/pathing.py

"""
Locations inside a repository checkout.

``src/sct_reader/utils/pathing.py`` sits three levels below the checkout
root, which holds ``config/``, ``logs/`` and ``mock_files/``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parents[3]
CONFIG_DIR = PROJECT_ROOT / "config"
MOCK_FILES_DIR = PROJECT_ROOT / "mock_files"


def project_root() -> Path:
    return PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Anchor a relative path at the checkout root; absolute paths pass through.

    Used for configured directories such as ``paths.logs_dir``.
    """
    path = Path(relative)
    return path if path.is_absolute() else PROJECT_ROOT / path


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Absolute path of a sample sector file under ``mock_files/``."""
    return MOCK_FILES_DIR / filename
