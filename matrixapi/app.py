"""Command-line entry point that dispatches subcommands to the managers."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from . import __version__
from .access_token import TokenFetcher, fetch_pass_token
from .config import get_server_config
from .core import MatrixClient
from .errors import MatrixAPIError
from .server import ServerManager
from .users import UserManager
from .utils import setup_logging

logger = logging.getLogger(__name__)

# sysexits.h
EX_OK = 0
EX_USAGE = 64


def build_arg_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-s", "--server", metavar="SERVER", default=None,
        help="The server to be used (default: default_server from the config)",
    )
    common.add_argument(
        "-j", "--json", action="store_true",
        help="Return data as json instead of a table",
    )

    parser = argparse.ArgumentParser(
        prog="matrixapi",
        description="Query the admin API of Matrix Synapse servers",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-d", "--debug", action="store_true", help="Print debug output")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    commands.add_parser(
        "version", parents=[common],
        help="Get the current version of the synapse server",
    )

    user = commands.add_parser("user", help="Interact with the users of a given synapse server")
    user_commands = user.add_subparsers(dest="user_command", metavar="COMMAND")
    user_commands.add_parser(
        "list", parents=[common],
        help="Get a list of all users on a given synapse server",
    )
    detail = user_commands.add_parser(
        "detail", parents=[common],
        help="Get the details of a single user on a given synapse server",
    )
    detail.add_argument(
        "user_name", metavar="USER_NAME",
        help="Name of a specific user, either @user:server or the bare localpart",
    )

    return parser


class MatrixAdminApp:
    """Resolve the server profile, run one command and report errors."""

    def __init__(
        self,
        console: Console | None = None,
        token_fetcher: TokenFetcher = fetch_pass_token,
    ) -> None:
        self.console = console or Console()
        self.token_fetcher = token_fetcher
        self.parser = build_arg_parser()

    def show_server_version(self, args: argparse.Namespace) -> None:
        server_config = get_server_config(args.server)
        client = MatrixClient(server_config.server_url)
        ServerManager(client, self.console).show_server_version(args.json)

    def _user_manager(self, args: argparse.Namespace) -> UserManager:
        server_config = get_server_config(args.server)
        access_token = self.token_fetcher(server_config)
        client = MatrixClient(server_config.server_url, access_token)
        return UserManager(client, self.console, server_config.server_name)

    def list_users(self, args: argparse.Namespace) -> None:
        self._user_manager(args).list_users(args.json)

    def show_user(self, args: argparse.Namespace) -> None:
        self._user_manager(args).show_user(args.user_name, args.json)

    def dispatch(self, args: argparse.Namespace) -> bool:
        """Run the selected command. Returns False if none was selected."""
        if args.command == "version":
            self.show_server_version(args)
        elif args.command == "user" and args.user_command == "list":
            self.list_users(args)
        elif args.command == "user" and args.user_command == "detail":
            self.show_user(args)
        else:
            return False
        return True

    def run(self, argv: list[str] | None = None) -> int:
        """Parse `argv`, run the command and return the process exit code."""
        args = self.parser.parse_args(argv)
        setup_logging(args.debug)
        logger.debug(f"Parsed arguments: {args}")

        try:
            if not self.dispatch(args):
                self.parser.print_help(sys.stderr)
                return EX_USAGE
        except MatrixAPIError as e:
            print(f"Something went wrong: {e}", file=sys.stderr)
            return EX_USAGE

        return EX_OK


def main(argv: list[str] | None = None) -> int:
    return MatrixAdminApp().run(argv)
