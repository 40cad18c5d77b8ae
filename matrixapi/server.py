"""
Server information commands.
"""

from rich.console import Console

from .core import SERVER_VERSION_ENDPOINT, MatrixClient
from .models import ServerVersion
from .ui import print_json, print_table, render_server_version


class ServerManager:
    """Query general information about the homeserver."""

    def __init__(self, client: MatrixClient, console: Console):
        self.client = client
        self.console = console

    def get_server_version(self) -> ServerVersion:
        return self.client.get_model(SERVER_VERSION_ENDPOINT, ServerVersion)

    def show_server_version(self, json_output: bool = False):
        """Print the Synapse and Python versions of the server."""
        version = self.get_server_version()
        if json_output:
            print_json(self.console, version.to_dict())
        else:
            print_table(self.console, render_server_version(version))
