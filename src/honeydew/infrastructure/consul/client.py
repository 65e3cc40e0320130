"""Consul KV client over the HTTP API.

Only the single read the run needs: ``GET /v1/kv/<key>``.  Consul answers
with a JSON list of entries whose ``Value`` is base64-encoded; a missing key
is a 404.
"""

from __future__ import annotations

import base64
import logging
from typing import Dict, Optional

import httpx

from honeydew.config.schema import ConsulSettings

logger = logging.getLogger(__name__)


class ConsulKVClient:
    """``KVStore`` backed by a Consul agent.

    Settings mirror the official clients (CONSUL_HTTP_ADDR, CONSUL_HTTP_TOKEN,
    CONSUL_HTTP_SSL, CONSUL_DATACENTER); see ``honeydew.config.loader``.
    """

    def __init__(self, settings: Optional[ConsulSettings] = None):
        self._settings = settings or ConsulSettings()

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self._settings.http_token:
            headers["X-Consul-Token"] = self._settings.http_token
        return headers

    def _params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self._settings.datacenter:
            params["dc"] = self._settings.datacenter
        return params

    def get(self, key: str) -> Optional[bytes]:
        """Return the decoded value of ``key``; None when Consul reports 404.

        ``httpx.HTTPError`` (connect failures, timeouts, non-2xx statuses other
        than 404) propagates to the caller.  A body that is not a KV listing
        raises ``ValueError``; a stored value that is not valid base64 raises
        ``binascii.Error``.
        """
        url = f"{self.base_url}/v1/kv/{key.lstrip('/')}"
        logger.debug("GET %s", url)
        with httpx.Client(timeout=self._settings.timeout_s) as client:
            r = client.get(url, params=self._params(), headers=self._headers())
            if r.status_code == 404:
                return None
            r.raise_for_status()
            entries = r.json()
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            raise ValueError(f"unexpected KV response for {key!r}: {type(entries).__name__}")
        if not entries:
            return None
        value = entries[0].get("Value")
        # A key created without a value comes back as null
        if value is None:
            return b""
        return base64.b64decode(value, validate=True)
