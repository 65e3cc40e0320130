"""Configuration schema: the Consul record plus process settings."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import CONFIG_KEY, CONSUL_DEFAULT_ADDR


class HoneydewRecord(BaseModel):
    """JSON value of ``config/honeydew``: ``{"num": <commit count>}``."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    num: int = Field(
        ...,
        strict=True,
        ge=0,
        description="How many append-and-commit cycles to run before pushing.",
    )


class ConsulSettings(BaseModel):
    """Where and how to reach the Consul HTTP API."""
    http_addr: str = Field(
        CONSUL_DEFAULT_ADDR,
        description="host:port of the agent, optionally prefixed with http:// or https://.",
    )
    http_token: Optional[str] = Field(None, description="ACL token sent as X-Consul-Token.")
    http_ssl: bool = Field(False, description="Use https when http_addr carries no scheme.")
    datacenter: Optional[str] = Field(None, description="Datacenter to query; agent default when unset.")
    timeout_s: Optional[float] = Field(
        None,
        description="HTTP timeout for the KV read. None waits until the agent answers or the OS gives up.",
    )

    @property
    def base_url(self) -> str:
        addr = self.http_addr.strip().rstrip("/")
        if addr.startswith(("http://", "https://")):
            return addr
        scheme = "https" if self.http_ssl else "http"
        return f"{scheme}://{addr}"


class HoneydewSettings(BaseModel):
    """Process-level settings read from the environment once per run."""
    consul: ConsulSettings = Field(default_factory=ConsulSettings)
    config_key: str = CONFIG_KEY
    repo_dir: Optional[str] = Field(None, description="Raw HONEYDEW_REPO_DIR value; validated by the repository locator.")
    home: Optional[str] = Field(None, description="Raw HOME value; only its presence is checked.")
    force_push_flags: List[str] = Field(
        default_factory=list,
        description="Extra git push flags for the fallback push (e.g. ['--force']). Empty repeats the normal push.",
    )
