import os
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "GEDCOM_TREE_CONFIG"
CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_tree.yml"

DEFAULTS = {
    "parser": {"strict_levels": True},
    "linking": {"warn_unresolved": False},
    "export": {"indent": 2},
    "logging": {"level": "INFO", "to_file": False},
}


class GTConfig:
    def __init__(self, data):
        self.paths = data.get("paths") or {}
        self.parser = {**DEFAULTS["parser"], **(data.get("parser") or {})}
        self.linking = {**DEFAULTS["linking"], **(data.get("linking") or {})}
        self.export = {**DEFAULTS["export"], **(data.get("export") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = data.get("debug", False)


def load_config(path=None) -> 'GTConfig':
    """
    Load configuration from ``path``, the ``GEDCOM_TREE_CONFIG`` environment
    variable, or the project's ``config/gedcom_tree.yml``, in that order.

    An explicitly named file must exist. A missing default file falls back
    to built-in defaults.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return GTConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GTConfig(data)


_config_cache = None


def get_config() -> 'GTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
