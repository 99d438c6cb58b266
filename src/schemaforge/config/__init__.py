"""Generator configuration loading."""

from .connection_profiles import ConnectionProfile, ConnectionProfileLoader, load_connection_profile

__all__ = ["ConnectionProfile", "ConnectionProfileLoader", "load_connection_profile"]
