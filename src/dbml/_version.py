"""Installed version of the dbml distribution."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Version recorded in the package metadata, or 0.0.0 when dbml is not installed."""
    try:
        return version("dbml")
    except PackageNotFoundError:
        return "0.0.0"
