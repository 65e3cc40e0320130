"""Configuration: schema, loading from env, and shared constants."""

from .schema import ConsulSettings, HoneydewRecord, HoneydewSettings
from .loader import load_settings
from .constants import (
    APPENDED_LINE,
    COMMIT_MESSAGE,
    CONFIG_KEY,
    CONSUL_DEFAULT_ADDR,
    PUSH_REFSPEC,
    PUSH_REMOTE,
    REPO_DIR_ENV,
    TRACKED_FILE_MODE,
    TRACKED_FILE_NAME,
)

get_settings = load_settings  # alias

__all__ = [
    "ConsulSettings", "HoneydewRecord", "HoneydewSettings",
    "load_settings", "get_settings",
    "APPENDED_LINE", "COMMIT_MESSAGE", "CONFIG_KEY", "CONSUL_DEFAULT_ADDR",
    "PUSH_REFSPEC", "PUSH_REMOTE", "REPO_DIR_ENV",
    "TRACKED_FILE_MODE", "TRACKED_FILE_NAME",
]
