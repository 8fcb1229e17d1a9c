"""CLI commands for the competency catalog and local session tokens.

Usage:
    flask competencies seed           # Insert the default catalog (idempotent)
    flask competencies list
    flask issue-token me@example.com  # Bearer token for local API calls
"""

from __future__ import annotations

import click
from flask.cli import AppGroup, with_appcontext

competencies_cli = AppGroup("competencies", help="Manage the competency catalog.")


@competencies_cli.command("seed")
def seed_command():
    """Insert any missing competencies from the default catalog."""
    from daily_journal.domains.competencies.services.competency_service import seed_competencies

    added = seed_competencies()
    click.echo(f"Seeded {added} competencies")


@competencies_cli.command("list")
def list_command():
    """Print the competency catalog."""
    from daily_journal.domains.competencies.services.competency_service import list_competencies

    items = list_competencies()
    if not items:
        click.echo("No competencies. Run `flask competencies seed`.")
        return
    for comp in items:
        click.echo(f"{comp.id:>3}  {comp.skill}")


@click.command("issue-token")
@click.argument("email")
@with_appcontext
def issue_token_command(email: str):
    """Print an access token whose identity is EMAIL."""
    from daily_journal.core.auth.session import issue_access_token

    click.echo(issue_access_token(email))


def register_commands(app) -> None:
    """Register CLI commands with the Flask app."""
    app.cli.add_command(competencies_cli)
    app.cli.add_command(issue_token_command)
