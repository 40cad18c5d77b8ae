"""Server profile configuration loaded from the user's config directory."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from .errors import ConfigFileError, ServerNotDefined

logger = logging.getLogger(__name__)

CONFIG_PREFIX = "matrixapi"
CONFIG_FILE_NAME = "config.toml"


@dataclass(frozen=True)
class ServerConfig:
    """Connection settings of a single homeserver."""

    server_url: str
    pass_access_token: str
    # only needed to expand bare localparts in `user detail`
    server_name: str = ""


@dataclass
class Config:
    default_server: str
    server: dict[str, ServerConfig]

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        """Decode parsed TOML into a Config, rejecting missing or mistyped keys."""
        default_server = data.get("default_server")
        if not isinstance(default_server, str):
            msg = "missing or invalid field `default_server`"
            raise ConfigFileError(msg)

        servers = data.get("server")
        if not isinstance(servers, dict):
            msg = "missing or invalid table `server`"
            raise ConfigFileError(msg)

        profiles = {}
        for name, profile in servers.items():
            if not isinstance(profile, dict):
                msg = f"server `{name}` is not a table"
                raise ConfigFileError(msg)
            server_name = profile.get("server_name", "")
            if not isinstance(server_name, str):
                msg = f"invalid field `server_name` for server `{name}`"
                raise ConfigFileError(msg)
            fields = {"server_name": server_name}
            for key in ("server_url", "pass_access_token"):
                value = profile.get(key)
                if not isinstance(value, str):
                    msg = f"missing or invalid field `{key}` for server `{name}`"
                    raise ConfigFileError(msg)
                fields[key] = value
            profiles[name] = ServerConfig(**fields)

        return cls(default_server=default_server, server=profiles)

    def get_server(self, server: str | None = None) -> ServerConfig:
        """Return a copy of the named profile, or of the default one."""
        name = server if server is not None else self.default_server
        profile = self.server.get(name)
        if profile is None:
            raise ServerNotDefined(name)
        return replace(profile)


class ConfigManager:
    """Locate, read and parse the config file."""

    @staticmethod
    def config_search_paths() -> list[Path]:
        """Candidate config files in XDG lookup order."""
        config_home = os.getenv("XDG_CONFIG_HOME")
        if not config_home:
            try:
                config_home = str(Path.home() / ".config")
            except RuntimeError as e:
                msg = f"could not determine the config directory: {e}"
                raise ConfigFileError(msg) from e

        config_dirs = os.getenv("XDG_CONFIG_DIRS") or "/etc/xdg"

        directories = [Path(config_home)]
        directories.extend(Path(d) for d in config_dirs.split(os.pathsep) if d)
        return [d / CONFIG_PREFIX / CONFIG_FILE_NAME for d in directories]

    @staticmethod
    def find_config_file() -> Path:
        """Return the config file to use, honouring MATRIXAPI_CONFIG."""
        override = os.getenv("MATRIXAPI_CONFIG")
        if override:
            path = Path(override)
            if not path.is_file():
                msg = f"config file {path} does not exist"
                raise ConfigFileError(msg)
            return path

        for path in ConfigManager.config_search_paths():
            if path.is_file():
                return path

        msg = "config file does not exist"
        raise ConfigFileError(msg)

    @staticmethod
    def load_config(path: Path | None = None) -> Config:
        """Read and decode the config file."""
        if path is None:
            path = ConfigManager.find_config_file()
        logger.debug(f"Loading config from {path}")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ConfigFileError(str(e)) from e

        return Config.from_dict(data)


def get_server_config(server: str | None = None) -> ServerConfig:
    """Resolve the profile for `server`, falling back to `default_server`."""
    config = ConfigManager.load_config()
    profile = config.get_server(server)
    logger.debug(f"Using server at {profile.server_url}")
    return profile
