"""Static configuration for nospam.

App-level settings (where filter settings live, host page rules, logging)
are loaded from a single config.json at the project root. The user's filter
settings themselves live in their own versioned JSON record.
"""

import json
import os

from dotenv import load_dotenv

from core.config import DEFAULT_SKIP_URL_FRAGMENTS, HostConfig

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")

# .env may override paths without editing config.json.
load_dotenv()


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _resolve_path(path: str) -> str:
    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Filter settings record (patterns + flags) edited by the config panel.
SETTINGS_PATH = _resolve_path(
    os.getenv("NOSPAM_SETTINGS_PATH") or _CONFIG.get("settings_path", "filter_settings.json")
)

# Host page rules for the filtering pass.
_host = _CONFIG.get("host", {})
HOST = HostConfig(
    skip_url_fragments=tuple(_host.get("skip_url_fragments", DEFAULT_SKIP_URL_FRAGMENTS)),
)

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
