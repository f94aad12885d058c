"""Logic for loading and merging settings files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from super_toolbelt.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "features": {
        "class_copy": True,
        "quick_open_from_clipboard": True,
    },
    "extensions": [
        ".gemspec",
        ".jbuilder",
        ".rake",
        ".rb",
        ".ru",
    ],
    "filenames": [
        "Capfile",
        "Gemfile",
        "Guardfile",
        "Rakefile",
    ],
    "quick_open": {
        "primary": ["fzf", "--query", "{query}"],
        "fallback": ["fd", "--full-path", "{query}"],
    },
    "cache": {
        "path": ".super_toolbelt_cache.json",
        "prune_stale_after_runs": 5,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load settings from a YAML file and merge them with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Settings file not found: %s. Using defaults.", path)
    return config


def is_feature_enabled(config: dict[str, Any], name: str) -> bool:
    """Check a feature flag, defaulting to enabled."""
    return bool(config.get("features", {}).get(name, True))
