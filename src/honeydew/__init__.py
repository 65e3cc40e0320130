from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("honeydew")
except PackageNotFoundError:
    # Package not installed (e.g. running from source without pip install)
    __version__ = "0.0.0.dev0"

__all__ = ["__version__"]

import logging

# Library convention: logging calls inside honeydew are discarded unless the
# CLI (or a test harness) configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())
