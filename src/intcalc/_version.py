"""Package version lookup."""

from importlib.metadata import PackageNotFoundError, version

_DISTRIBUTION = "intcalc"
_UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """Return the installed intcalc version, or "0.0.0" for an uninstalled checkout."""
    try:
        return version(_DISTRIBUTION)
    except PackageNotFoundError:
        return _UNKNOWN_VERSION
