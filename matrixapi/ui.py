"""
Terminal output for admin API responses: rich tables or one-line JSON.
"""

import json
from typing import Any

from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.table import Table

from .models import ServerVersion, User, UserList
from .utils import DataFormatter

# Upper bound when measuring a table for piped output
MAX_TABLE_WIDTH = 10000


def print_json(console: Console, data: Any) -> None:
    """Write `data` as compact JSON, without highlighting or wrapping."""
    console.out(json.dumps(data, ensure_ascii=False, separators=(",", ":")), highlight=False)


def print_table(console: Console, table: Table) -> None:
    """Print `table`, widening a non-terminal console so no cell is cut."""
    if not console.is_terminal:
        options = console.options.update_width(MAX_TABLE_WIDTH)
        needed = Measurement.get(console, options, table).maximum
        if needed > console.width:
            console.width = needed
    console.print(table)


def render_server_version(version: ServerVersion) -> Table:
    table = Table(box=box.SQUARE, show_header=False)
    table.add_column("Field")
    table.add_column("Value", overflow="fold")
    table.add_row("Python", DataFormatter.format_optional(version.python_version))
    table.add_row("Server", DataFormatter.format_optional(version.server_version))
    return table


def render_user_list(user_list: UserList) -> Table:
    """One row per user, flags centred."""
    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Name", overflow="fold")
    table.add_column("Displayname", overflow="fold")
    table.add_column("Admin", justify="center", no_wrap=True)
    table.add_column("Guest", justify="center", no_wrap=True)
    table.add_column("Deactivated", justify="center", no_wrap=True)
    table.add_column("User Type", overflow="fold")
    table.add_column("Avatar", overflow="fold")

    for user in user_list.users:
        table.add_row(
            DataFormatter.format_text(user.name),
            DataFormatter.format_optional(user.displayname),
            DataFormatter.format_admin_flag(user.admin),
            DataFormatter.format_flag(user.is_guest),
            DataFormatter.format_flag(user.deactivated),
            DataFormatter.format_optional(user.user_type),
            DataFormatter.format_optional(user.avatar_url),
        )
    return table


def render_user_detail(user: User) -> Table:
    table = Table(box=box.SQUARE, show_header=False)
    table.add_column("Field", no_wrap=True)
    table.add_column("Value", overflow="fold")
    table.add_row("Name", DataFormatter.format_text(user.name))
    table.add_row("Displayname", DataFormatter.format_optional(user.displayname))
    table.add_row("Admin", DataFormatter.format_admin_flag(user.admin))
    table.add_row("Guest", DataFormatter.format_flag(user.is_guest))
    table.add_row("Deactivated", DataFormatter.format_flag(user.deactivated))
    table.add_row("User Type", DataFormatter.format_optional(user.user_type))
    table.add_row("Avatar", DataFormatter.format_optional(user.avatar_url))
    return table
