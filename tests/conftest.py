import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def info_block():
    """A complete nine-line [INFO] section, header included."""
    return [
        "[INFO]",
        "Test Sector",
        "TEST_CTR",
        "EGLL",
        "N051.28.39.000",
        "W000.27.41.000",
        "60",
        "38",
        "-1.0",
        "1",
    ]
