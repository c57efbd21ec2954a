"""
productdesk.

- core/: configuration, logging, exceptions
- cli/: console client (Typer + Rich) for the users and products API
"""

__version__ = "0.1.0"
