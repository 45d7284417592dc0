"""CLI command for minting bearer tokens."""

from __future__ import annotations

import click

from shop.application.access import Identity, Role
from shop.config import ConfigurationError
from shop.infrastructure.bootstrap import token_codec
from shop.infrastructure.cli.context import settings_from


@click.command("issue")
@click.option("--user-id", required=True, help="Identity the token speaks for.")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role]),
    default=Role.USER.value,
    show_default=True,
)
@click.pass_context
def token_issue(ctx: click.Context, user_id: str, role: str) -> None:
    """Print a signed bearer token."""
    try:
        codec = token_codec(settings_from(ctx))
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    click.echo(codec.issue(Identity(user_id=user_id, role=Role(role))))
