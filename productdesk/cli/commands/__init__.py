"""
CLI Commands.

Organized by resource. Handler functions here are shared by the
interactive menu and the one-shot command groups.
"""

from productdesk.cli.commands.products import app as products_app
from productdesk.cli.commands.system import app as system_app
from productdesk.cli.commands.users import app as users_app

__all__ = [
    "products_app",
    "system_app",
    "users_app",
]
