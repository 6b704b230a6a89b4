"""Version information for FS Operations."""

from importlib.metadata import PackageNotFoundError, version

__version__ = "0.3.0"  # Fallback version


def get_version() -> str:
    """Get the current version string.

    Reads the installed distribution metadata, falling back to __version__
    when running from a source checkout.

    Returns:
        Version string (e.g., "0.3.0").
    """
    try:
        return version("fsops")
    except PackageNotFoundError:
        return __version__
