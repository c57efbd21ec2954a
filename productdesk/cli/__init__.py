"""
CLI Client Module.

Console client built with Typer and Rich for the users and products
backend API.

Architecture:
- CLI is a thin presentation layer
- All business logic lives in the backend
- CLI calls backend via HTTP (httpx), one request per action
- Session state travels in an explicit CLIContext

Usage:
    productdesk                  # Interactive menu
    productdesk --help
    productdesk products list -e jane@example.com
"""
