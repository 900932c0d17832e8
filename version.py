"""
Version information for the Metrolink router.

Centralized version management for the package and the command-line driver.
"""

# Core application information
__version__ = "1.2.0"
__version_info__ = (1, 2, 0)
__app_name__ = "Metrolink Router"
__description__ = "Route finding over a colour-coded tram network with live delays and closures"

# License information
__license__ = "GPL v3"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"
