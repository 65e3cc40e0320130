"""Load process settings from the environment.

``load_settings()`` is memoised with ``functools.lru_cache`` so the
environment is read at most once per process.  Call
``load_settings.cache_clear()`` to force a re-read (tests do this around
every case).
"""

from __future__ import annotations

import functools
import os
import shlex
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CONFIG_KEY, CONSUL_DEFAULT_ADDR
from .schema import ConsulSettings, HoneydewSettings


class _HoneydewEnv(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HONEYDEW_", extra="ignore", env_ignore_empty=True)
    repo_dir: Optional[str] = None
    consul_key: str = CONFIG_KEY
    consul_timeout_s: Optional[float] = None
    # Shell-style string, e.g. "--force" or "--force-with-lease"
    force_push_flags: str = ""


class _ConsulEnv(BaseSettings):
    """Same variables the official Consul clients read."""
    model_config = SettingsConfigDict(env_prefix="CONSUL_", extra="ignore", env_ignore_empty=True)
    http_addr: str = CONSUL_DEFAULT_ADDR
    http_token: Optional[str] = None
    http_ssl: bool = False
    datacenter: Optional[str] = None


@functools.lru_cache(maxsize=1)
def load_settings() -> HoneydewSettings:
    """Build ``HoneydewSettings`` from HONEYDEW_*, CONSUL_* and HOME.

    Result is cached for the lifetime of the process.  Call
    ``load_settings.cache_clear()`` to force a reload.
    """
    env = _HoneydewEnv()
    consul_env = _ConsulEnv()
    return HoneydewSettings(
        consul=ConsulSettings(
            http_addr=consul_env.http_addr,
            http_token=consul_env.http_token,
            http_ssl=consul_env.http_ssl,
            datacenter=consul_env.datacenter,
            timeout_s=env.consul_timeout_s,
        ),
        config_key=env.consul_key,
        repo_dir=env.repo_dir,
        home=os.environ.get("HOME"),
        force_push_flags=shlex.split(env.force_push_flags),
    )
