"""Access token retrieval from the `pass` password store."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Callable

from .config import ServerConfig
from .errors import AccessTokenError, ConfigFileError

logger = logging.getLogger(__name__)

DEFAULT_PASS_COMMAND = "pass"

TokenFetcher = Callable[[ServerConfig], str]


def fetch_pass_token(server_config: ServerConfig, command: str | None = None) -> str:
    """
    Run `pass <pass_access_token>` and return its trimmed output.

    The program can be replaced through MATRIXAPI_PASS_COMMAND, e.g. for
    `gopass`.
    """
    if command is None:
        command = os.getenv("MATRIXAPI_PASS_COMMAND", DEFAULT_PASS_COMMAND)

    logger.debug(f"Fetching access token {server_config.pass_access_token} with {command}")
    try:
        result = subprocess.run(
            [command, server_config.pass_access_token],
            capture_output=True,
        )
    except OSError as e:
        raise ConfigFileError(str(e)) from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        msg = f"{command} exited with status {result.returncode}"
        if stderr:
            msg = f"{msg}: {stderr}"
        raise AccessTokenError(msg)

    return decode_token(result.stdout)


def decode_token(output: bytes) -> str:
    """Decode captured secret store output into a bearer token."""
    try:
        token = output.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise AccessTokenError(str(e)) from e

    if not token:
        msg = "the secret store returned an empty token"
        raise AccessTokenError(msg)
    return token
