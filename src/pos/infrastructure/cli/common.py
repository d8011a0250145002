"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from pos.application.session import PosSession
from pos.infrastructure.bootstrap import open_session
from pos.infrastructure.config import Settings


def session_for(settings: Settings) -> PosSession:
    """Open a session, warning on stderr about any unreadable stored data."""
    session = open_session(settings)
    for error in session.load_errors:
        click.echo(f"Warning: {error}. Using default data instead.", err=True)
    return session


pass_settings = click.make_pass_decorator(Settings)
