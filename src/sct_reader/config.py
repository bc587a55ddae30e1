import os
from pathlib import Path

import yaml

from sct_reader.utils.pathing import CONFIG_DIR

CONFIG_PATH = CONFIG_DIR / "sct_reader.yml"

DEFAULT_SID_STAR_NAME_WIDTH = 26


class SctConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.format = data.get("format", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def sid_star_name_width(self) -> int:
        return int(self.format.get("sid_star_name_width", DEFAULT_SID_STAR_NAME_WIDTH))


def config_path() -> Path:
    override = os.environ.get("SCT_READER_CONFIG")
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'SctConfig':
    path = config_path()
    if not path.exists():
        # Installed without the repository checkout; run on defaults.
        return SctConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return SctConfig(data)

_config_cache = None

def get_config() -> 'SctConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
