"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shop.domain.exceptions import DomainException
from shop.infrastructure.cli.context import open_services


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--description", required=True, help="Product description.")
@click.pass_context
def product_add(ctx: click.Context, name: str, price: str, stock: int, description: str) -> None:
    """Add a new product to the catalog."""
    with open_services(ctx) as services:
        try:
            product = services.add_product().handle(
                name=name, price=price, stock=stock, description=description
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at ${product.price:.2f} ({product.stock} in stock)")


@click.command("list")
@click.option("--search", default="", help="Case-insensitive name filter.")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=10, type=int, show_default=True)
@click.pass_context
def product_list(ctx: click.Context, search: str, page: int, limit: int) -> None:
    """List products, newest first."""
    with open_services(ctx) as services:
        try:
            result = services.list_products().handle(page=page, limit=limit, search=search)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    if not result.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<32} {'Name':<20} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 71)
    for p in result.products:
        click.echo(f"{p.id:<32} {p.name:<20} {'$' + format(p.price, '.2f'):>10} {p.stock:>6}")
    pagination = result.pagination
    click.echo(
        f"Page {pagination.page}/{max(pagination.total_pages, 1)} "
        f"({pagination.total_items} product(s))"
    )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--description", default=None, help="New description.")
@click.pass_context
def product_update(
    ctx: click.Context,
    product_id: str,
    name: str | None,
    price: str | None,
    stock: int | None,
    description: str | None,
) -> None:
    """Update some fields of a product."""
    if all(v is None for v in (name, price, stock, description)):
        raise click.UsageError("Nothing to update: pass at least one field option.")

    with open_services(ctx) as services:
        try:
            product = services.update_product().handle(
                product_id, name=name, price=price, stock=stock, description=description
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated: '{product.name}' ${product.price:.2f}, {product.stock} in stock")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_context
def product_delete(ctx: click.Context, product_id: str) -> None:
    """Remove a product from the catalog."""
    with open_services(ctx) as services:
        try:
            services.delete_product().handle(product_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
