"""Per-invocation state shared by the CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from shop.config import Settings
from shop.infrastructure.bootstrap import Services


def settings_from(ctx: click.Context) -> Settings:
    return ctx.find_root().obj["settings"]


@contextmanager
def open_services(ctx: click.Context) -> Iterator[Services]:
    with Services.open(settings_from(ctx)) as services:
        yield services
