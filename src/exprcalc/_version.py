"""Version lookup for exprcalc."""

from importlib.metadata import PackageNotFoundError, version

# Used when running from a source checkout that was never installed
_SOURCE_VERSION = "0.1.0"


def get_version() -> str:
    """Get the exprcalc version from package metadata."""
    try:
        return version("exprcalc")
    except PackageNotFoundError:
        return _SOURCE_VERSION
