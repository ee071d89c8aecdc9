"""Package metadata and naming constants."""

PACKAGE_NAME = "solid-city"
__version__ = "1.0.0"  # Read by pyproject.toml as the project version
VERSION = __version__  # Alias for compatibility
