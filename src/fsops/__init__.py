"""FS Operations - flight-simulation community operations toolkit.

Provides runway recommendations from wind, METAR/TAF and flight lookups,
and templated flight-status announcements for a community chat server.
"""

from fsops.version import __version__

__all__ = ["__version__"]
