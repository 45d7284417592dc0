import click

from shop.config import ConfigurationError, Settings
from shop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from shop.infrastructure.cli.report_commands import report_summary
from shop.infrastructure.cli.token_commands import token_issue
from shop.infrastructure.cli.user_commands import user_add
from shop.logging_setup import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override SHOP_LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """shop: catalog, cart and order service"""
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    configure_logging(log_level.upper() if log_level else settings.log_level)
    ctx.obj = {"settings": settings}


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def report() -> None:
    """Sales reports."""


@cli.group()
def token() -> None:
    """Bearer tokens."""


@cli.group()
def user() -> None:
    """Manage user accounts."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default SHOP_HOST).")
@click.option("--port", default=None, type=int, help="Port (default SHOP_PORT).")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from shop.infrastructure.api.app import create_app

    settings: Settings = ctx.obj["settings"]
    try:
        app = create_app(settings)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))

    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
        workers=1,  # stock locks are per process
    )


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
report.add_command(report_summary)
token.add_command(token_issue)
user.add_command(user_add)
