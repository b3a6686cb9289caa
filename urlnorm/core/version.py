from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


DISTRIBUTION = "urlnorm"
UNKNOWN_VERSION = "0+unknown"


def get_urlnorm_version() -> str:
    """Installed distribution version, or a PEP 440 placeholder from a source tree."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
