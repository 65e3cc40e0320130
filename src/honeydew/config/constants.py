"""Fixed names and literals shared by the config fetcher, commit driver and push driver."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Consul
# ---------------------------------------------------------------------------

# Key holding the JSON record {"num": <int>}.
CONFIG_KEY: str = "config/honeydew"

# Consul agent address used when CONSUL_HTTP_ADDR is not set (same as the
# official clients).
CONSUL_DEFAULT_ADDR: str = "127.0.0.1:8500"

# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

REPO_DIR_ENV: str = "HONEYDEW_REPO_DIR"

TRACKED_FILE_NAME: str = "hello.txt"

# Created owner read/write only.
TRACKED_FILE_MODE: int = 0o600

APPENDED_LINE: str = "random word\n"

COMMIT_MESSAGE: str = "regular"

# ---------------------------------------------------------------------------
# Push
# ---------------------------------------------------------------------------

PUSH_REMOTE: str = "origin"

# Local master is published as remote main.
PUSH_REFSPEC: str = "master:main"
