"""Config fetcher: read the commit count from the key-value store."""

from __future__ import annotations

import binascii
import json
import logging

import httpx
from pydantic import ValidationError

from honeydew.application.ports import KVStore
from honeydew.config.constants import CONFIG_KEY
from honeydew.config.schema import HoneydewRecord
from honeydew.domain import ConfigMalformed, ConfigUnavailable

logger = logging.getLogger(__name__)


def fetch_record(kv: KVStore, key: str = CONFIG_KEY) -> HoneydewRecord:
    """Fetch ``key`` and validate it as ``{"num": <int >= 0>}``."""
    # ValueError: the agent answered with a body that is not a KV listing
    try:
        raw = kv.get(key)
    except binascii.Error as e:
        raise ConfigMalformed(f"value of {key!r} is not valid base64: {e}") from e
    except (httpx.HTTPError, ValueError) as e:
        raise ConfigUnavailable(f"reading {key!r} from Consul failed: {e}") from e
    if raw is None:
        raise ConfigUnavailable(f"key {key!r} not found in Consul")
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigMalformed(f"value of {key!r} is not valid JSON: {e}") from e
    try:
        return HoneydewRecord.model_validate(data)
    except ValidationError as e:
        raise ConfigMalformed(f"value of {key!r} is not a {{\"num\": <int>}} record: {e}") from e


def fetch_commit_count(kv: KVStore, key: str = CONFIG_KEY, *, verbose: bool = False) -> int:
    record = fetch_record(kv, key)
    if verbose:
        logger.info("config record %s: %r", key, record)
    return record.num
