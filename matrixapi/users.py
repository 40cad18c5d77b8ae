"""
Read-only user queries against the Synapse admin API.
"""

import logging

from rich.console import Console

from .core import USER_DETAIL_ENDPOINT, USER_LIST_ENDPOINT, MatrixClient
from .models import User, UserList
from .ui import print_json, print_table, render_user_detail, render_user_list

logger = logging.getLogger(__name__)


class UserManager:
    """Read Matrix users through the admin API."""

    def __init__(self, client: MatrixClient, console: Console, server_name: str = ""):
        self.client = client
        self.console = console
        self.server_name = server_name

    def qualify_user_id(self, user_name: str) -> str:
        """Turn a bare localpart into a full `@localpart:server_name` ID."""
        if user_name.startswith("@") or not self.server_name:
            return user_name
        return f"@{user_name}:{self.server_name}"

    def get_user_list(self) -> UserList:
        user_list = self.client.get_model(USER_LIST_ENDPOINT, UserList)
        if user_list.next_token is not None:
            logger.warning(
                f"Showing {len(user_list.users)} of {user_list.total} users; "
                "further pages are not fetched"
            )
        return user_list

    def get_user(self, user_name: str) -> User:
        user_id = self.qualify_user_id(user_name)
        endpoint = USER_DETAIL_ENDPOINT.format(user_id=self.client.quote_user_id(user_id))
        return self.client.get_model(endpoint, User)

    def list_users(self, json_output: bool = False):
        """Print the first page of users on the server."""
        user_list = self.get_user_list()
        if json_output:
            print_json(self.console, user_list.to_dict())
        else:
            print_table(self.console, render_user_list(user_list))

    def show_user(self, user_name: str, json_output: bool = False):
        """Print the account details of a single user."""
        user = self.get_user(user_name)
        if json_output:
            print_json(self.console, user.to_dict())
        else:
            print_table(self.console, render_user_detail(user))
