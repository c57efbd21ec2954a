"""
Product Commands.

Handlers for the product endpoints, used by the interactive menu and by
the `products` command group. Every product request carries the session
email in the user-email header; an unauthenticated session sends it
empty and leaves rejection to the backend.
"""

from urllib.parse import quote

import typer

from productdesk.cli.commands.base import run_handler
from productdesk.cli.console import read_float
from productdesk.cli.context import CLIContext, send, show_list
from productdesk.cli.schemas import ProductCreate, ProductUpdate

READ_ALL_PRODUCTS_PATH = "/products/readAllProducts"
READ_PRODUCT_BY_ID_PATH = "/products/readProductById/{id}"
CREATE_PRODUCT_PATH = "/products/create"
UPDATE_PRODUCT_PATH = "/products/updateProduct"
DELETE_PRODUCT_PATH = "/products/deleteProduct/{id}"
MOST_EXPENSIVE_PATH = "/products/most-expensive-products"

DATE_PROMPT = "Enter Expiration Date (yyyy-MM-dd): "

app = typer.Typer(help="Product management commands")


def product_path_segment(product_id: str) -> str:
    """Percent-encode an id so it stays a single path segment."""
    segment = quote(product_id, safe="")
    if segment in {".", ".."}:
        return segment.replace(".", "%2E")
    return segment


# =============================================================================
# Handlers
# =============================================================================


async def display_products(ctx: CLIContext) -> bool:
    response = await send(
        ctx,
        "fetching products",
        "Failed to fetch products.",
        "GET",
        READ_ALL_PRODUCTS_PATH,
        headers=ctx.identity_headers(),
    )
    if response is None:
        return False
    return show_list(ctx, "fetching products", "Products", response)


async def fetch_product_by_id(ctx: CLIContext, product_id: str) -> bool:
    response = await send(
        ctx,
        "fetching product",
        "Failed to fetch product.",
        "GET",
        READ_PRODUCT_BY_ID_PATH.format(id=product_path_segment(product_id)),
        headers=ctx.identity_headers(),
    )
    if response is None:
        return False
    ctx.io.write(f"Product: {response.text}")
    return True


async def add_product(ctx: CLIContext, name: str, price: float, expiration_date: str) -> bool:
    """Create a product; the backend assigns its id. A rejection prints the body as-is."""
    payload = ProductCreate(name=name, price=price, expiration_date=expiration_date)
    response = await send(
        ctx,
        "adding product",
        None,
        "POST",
        CREATE_PRODUCT_PATH,
        headers=ctx.identity_headers(),
        json=payload.to_payload(),
    )
    if response is None:
        return False
    ctx.io.write("Product added successfully!", style="green")
    return True


async def update_product(
    ctx: CLIContext, product_id: str, name: str, price: float, expiration_date: str
) -> bool:
    payload = ProductUpdate(
        id=product_id, name=name, price=price, expiration_date=expiration_date
    )
    response = await send(
        ctx,
        "updating product",
        "Failed to update product.",
        "PUT",
        UPDATE_PRODUCT_PATH,
        headers=ctx.identity_headers(),
        json=payload.to_payload(),
    )
    if response is None:
        return False
    ctx.io.write("Product updated successfully!", style="green")
    return True


async def delete_product(ctx: CLIContext, product_id: str) -> bool:
    response = await send(
        ctx,
        "deleting product",
        "Failed to delete product.",
        "DELETE",
        DELETE_PRODUCT_PATH.format(id=product_path_segment(product_id)),
        headers=ctx.identity_headers(),
    )
    if response is None:
        return False
    ctx.io.write("Product deleted successfully!", style="green")
    return True


async def view_top_expensive_products(ctx: CLIContext) -> bool:
    """The backend decides how many products qualify; the menu labels it as three."""
    response = await send(
        ctx,
        "fetching top expensive products",
        "Failed to fetch top expensive products.",
        "GET",
        MOST_EXPENSIVE_PATH,
        headers=ctx.identity_headers(),
    )
    if response is None:
        return False
    return show_list(
        ctx, "fetching top expensive products", "Top 3 Expensive Products", response
    )


# =============================================================================
# Prompting wrappers (interactive menu)
# =============================================================================


async def prompt_fetch_product_by_id(ctx: CLIContext) -> bool:
    product_id = ctx.io.read("Enter Product ID: ")
    return await fetch_product_by_id(ctx, product_id)


async def prompt_add_product(ctx: CLIContext) -> bool:
    name = ctx.io.read("Enter Product Name: ")
    price = read_float(ctx.io, "Enter Product Price: ")
    expiration_date = ctx.io.read(DATE_PROMPT)
    return await add_product(ctx, name, price, expiration_date)


async def prompt_update_product(ctx: CLIContext) -> bool:
    product_id = ctx.io.read("Enter Product ID: ")
    name = ctx.io.read("Enter Product Name: ")
    price = read_float(ctx.io, "Enter Product Price: ")
    expiration_date = ctx.io.read(DATE_PROMPT)
    return await update_product(ctx, product_id, name, price, expiration_date)


async def prompt_delete_product(ctx: CLIContext) -> bool:
    product_id = ctx.io.read("Enter Product ID: ")
    return await delete_product(ctx, product_id)


# =============================================================================
# One-shot commands
# =============================================================================

EMAIL_OPTION = typer.Option(..., "--email", "-e", help="Login email, sent as user-email")
PASSWORD_OPTION = typer.Option(
    ..., "--password", "-p", prompt=True, hide_input=True, help="Login password"
)


@app.command("list")
def list_products(
    typer_ctx: typer.Context,
    email: str = EMAIL_OPTION,
    password: str = PASSWORD_OPTION,
) -> None:
    """
    Display all products.
    """
    run_handler(typer_ctx, display_products, credentials=(email, password))


@app.command("get")
def get_product(
    typer_ctx: typer.Context,
    product_id: str = typer.Argument(..., help="Product id"),
    email: str = EMAIL_OPTION,
    password: str = PASSWORD_OPTION,
) -> None:
    """
    Fetch one product by id.
    """
    run_handler(typer_ctx, fetch_product_by_id, product_id, credentials=(email, password))


@app.command("add")
def add(
    typer_ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Product name"),
    price: float = typer.Option(..., "--price", help="Unit price"),
    expiration_date: str = typer.Option(..., "--expires", help="Expiration date (yyyy-MM-dd)"),
    email: str = EMAIL_OPTION,
    password: str = PASSWORD_OPTION,
) -> None:
    """
    Add a product.

    Examples:
        productdesk products add -n Milk --price 2.5 --expires 2025-01-01 -e jane@example.com
    """
    run_handler(
        typer_ctx, add_product, name, price, expiration_date, credentials=(email, password)
    )


@app.command("update")
def update(
    typer_ctx: typer.Context,
    product_id: str = typer.Argument(..., help="Product id"),
    name: str = typer.Option(..., "--name", "-n", help="Product name"),
    price: float = typer.Option(..., "--price", help="Unit price"),
    expiration_date: str = typer.Option(..., "--expires", help="Expiration date (yyyy-MM-dd)"),
    email: str = EMAIL_OPTION,
    password: str = PASSWORD_OPTION,
) -> None:
    """
    Replace a product's name, price and expiration date.
    """
    run_handler(
        typer_ctx,
        update_product,
        product_id,
        name,
        price,
        expiration_date,
        credentials=(email, password),
    )


@app.command("delete")
def delete(
    typer_ctx: typer.Context,
    product_id: str = typer.Argument(..., help="Product id"),
    email: str = EMAIL_OPTION,
    password: str = PASSWORD_OPTION,
) -> None:
    """
    Delete a product by id.
    """
    run_handler(typer_ctx, delete_product, product_id, credentials=(email, password))


@app.command("top")
def top(
    typer_ctx: typer.Context,
    email: str = EMAIL_OPTION,
    password: str = PASSWORD_OPTION,
) -> None:
    """
    View the most expensive products.
    """
    run_handler(typer_ctx, view_top_expensive_products, credentials=(email, password))
