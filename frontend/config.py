# frontend/config.py

import copy
import os

import yaml

DEFAULT_CONFIG_PATH = os.path.join("config", "server.yaml")
CONFIG_ENV_VAR = "MINESWEEPER_CONFIG"

DEFAULTS = {
    "game": {"rows": 8, "cols": 8, "mines": 10, "seed": None},
    "server": {"host": "0.0.0.0", "port": 8000, "base_url": None},
    "images": {"directory": None},
    "redirect": {"github_user": None, "fallback_url": "https://github.com"},
    "logging": {"level": "INFO"},
}


def load_config(path: str = None) -> dict:
    """
    Load the server configuration.

    The path comes from the argument, then $MINESWEEPER_CONFIG, then
    config/server.yaml. A missing file yields the defaults; sections in the
    file override the matching default keys and unknown keys are ignored.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH

    loaded = {}
    if os.path.exists(path):
        with open(path, "r") as f:
            loaded = yaml.safe_load(f) or {}

    return merge_config(loaded)


def merge_config(overrides: dict) -> dict:
    config = copy.deepcopy(DEFAULTS)
    for section, defaults in config.items():
        values = overrides.get(section) or {}
        for key in defaults:
            if key in values:
                defaults[key] = values[key]
    return config
