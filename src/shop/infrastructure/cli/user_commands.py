"""CLI commands for user accounts."""

from __future__ import annotations

import click

from shop.domain.exceptions import DomainException
from shop.domain.model.user import ROLE_USER, ROLES
from shop.infrastructure.cli.context import open_services


@click.command("add")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Login email.")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Login password (prompted when omitted).",
)
@click.option("--role", type=click.Choice(ROLES), default=ROLE_USER, show_default=True)
@click.pass_context
def user_add(ctx: click.Context, name: str, email: str, password: str, role: str) -> None:
    """Create an account, e.g. the first admin."""
    with open_services(ctx) as services:
        try:
            user = services.register_user().handle(
                name=name, email=email, password=password, role=role
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"User {user.id} <{user.email}> created with role {user.role}")
