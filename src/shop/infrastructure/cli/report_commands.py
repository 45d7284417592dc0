"""CLI commands for sales reporting."""

from __future__ import annotations

import click

from shop.infrastructure.cli.context import open_services


@click.command("summary")
@click.pass_context
def report_summary(ctx: click.Context) -> None:
    """Show order count, revenue and best sellers."""
    with open_services(ctx) as services:
        summary = services.report_summary().handle()

    click.echo(f"Orders:  {summary.total_orders}")
    click.echo(f"Revenue: ${summary.total_revenue:.2f}")
    if not summary.top_products:
        return
    click.echo()
    click.echo(f"  {'Top products':<30} {'Sold':>6}")
    click.echo(f"  {'-'*37}")
    for top in summary.top_products:
        click.echo(f"  {top.name:<30} {top.total_sold:>6}")
