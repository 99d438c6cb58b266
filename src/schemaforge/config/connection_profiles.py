"""
Connection Profiles - Load generator configuration from YAML files.

A profile names a dialect and the connection parameters for it:

    name: local-firebird
    dialect: firebird
    connection:
      dbName: EMPLOYEE
      dbConfig:
        host: localhost
        port: 3050
        user: SYSDBA
        password: masterkey

JSON files are accepted as well (JSON is a subset of YAML).
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from ..dialects.dialect import Dialect
from ..exceptions import InvalidConnectionConfig
from ..models.connection import GeneratorConnection

logger = logging.getLogger(__name__)

_PROFILE_SUFFIXES = (".yaml", ".yml", ".json")


@dataclass
class ConnectionProfile:
    """A named (dialect, connection) pair."""
    name: str
    dialect: Dialect
    connection: GeneratorConnection
    file_path: Optional[str] = None


def load_connection_profile(path: Union[str, Path]) -> ConnectionProfile:
    """
    Load one connection profile.

    Raises:
        UnsupportedDialect: profile names an unknown dialect
        InvalidConnectionConfig: file is not a mapping or has no dialect
    """
    p = Path(path)
    with open(p, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise InvalidConnectionConfig(
            "profile", message=f"Profile {p} must be a YAML/JSON mapping, got {type(data).__name__}"
        )
    if not data.get("dialect"):
        raise InvalidConnectionConfig("profile", ["dialect"])

    connection = data.get("connection") or {}
    if not isinstance(connection, dict):
        raise InvalidConnectionConfig(
            "profile", message=f"Profile {p}: connection must be a mapping"
        )

    return ConnectionProfile(
        name=data.get("name") or p.stem,
        dialect=Dialect.parse(data["dialect"]),
        connection=GeneratorConnection.from_dict(connection),
        file_path=str(p),
    )


class ConnectionProfileLoader:
    """
    Loads connection profiles from a directory.

    Usage:
        loader = ConnectionProfileLoader(Path("profiles"))
        profile = loader.get_profile("local-firebird")
        generator = SqlGenerator(profile.dialect, profile.connection)
    """

    def __init__(self, profiles_dir: Path):
        self.profiles_dir = Path(profiles_dir)
        self._cache: Dict[str, ConnectionProfile] = {}
        self._loaded = False

    def _load_profiles(self, force: bool = False):
        """Load all profiles; files that fail to load are logged and skipped."""
        if self._loaded and not force:
            return

        self._cache.clear()

        if not self.profiles_dir.exists():
            logger.warning(f"Profiles directory does not exist: {self.profiles_dir}")
            self._loaded = True
            return

        for profile_file in sorted(self.profiles_dir.iterdir()):
            if profile_file.suffix.lower() not in _PROFILE_SUFFIXES:
                continue
            try:
                profile = load_connection_profile(profile_file)
            except (OSError, yaml.YAMLError, ValueError) as e:
                logger.error(f"Error loading profile {profile_file}: {e}")
                continue
            self._cache[profile.name] = profile
            logger.debug(f"Loaded connection profile: {profile.name}")

        self._loaded = True
        logger.info(f"Loaded {len(self._cache)} connection profiles from {self.profiles_dir}")

    def get_all_profiles(self) -> List[ConnectionProfile]:
        self._load_profiles()
        return list(self._cache.values())

    def get_profile(self, name: str) -> Optional[ConnectionProfile]:
        self._load_profiles()
        return self._cache.get(name)

    def reload(self):
        self._load_profiles(force=True)
