from .client import ConsulKVClient

__all__ = ["ConsulKVClient"]
