"""Terminal rendition of the Thoughts page.

Usage:
    python -m daily_journal.client --base-url http://localhost:8000 --token $TOKEN
    python -m daily_journal.client --token $TOKEN delete 12
    python -m daily_journal.client --token $TOKEN edit 12 --text "New text" -c 1 -c 3
"""

from __future__ import annotations

import click

from daily_journal.client.api_client import JournalApiClient
from daily_journal.client.thoughts_view import ThoughtsView


@click.group(invoke_without_command=True)
@click.option("--base-url", envvar="JOURNAL_BASE_URL", default="http://localhost:8000", show_default=True)
@click.option("--token", envvar="JOURNAL_TOKEN", help="Bearer token (see `flask issue-token`).")
@click.pass_context
def cli(ctx: click.Context, base_url: str, token: str | None):
    """Show all my thoughts."""
    view = ThoughtsView(JournalApiClient(base_url, access_token=token), alert=lambda msg: click.echo(msg, err=True))
    view.load()
    ctx.obj = view
    if ctx.invoked_subcommand is None:
        click.echo(view.render_text())


@cli.command("delete")
@click.argument("thought_id", type=int)
@click.pass_obj
def delete_command(view: ThoughtsView, thought_id: int):
    if view.delete(thought_id):
        click.echo(view.render_text())


@cli.command("edit")
@click.argument("thought_id", type=int)
@click.option("--text", help="Replacement text; defaults to the current text.")
@click.option("--toggle", "-c", "toggles", multiple=True, type=int, help="Competency id to toggle.")
@click.pass_obj
def edit_command(view: ThoughtsView, thought_id: int, text: str | None, toggles: tuple[int, ...]):
    thought = next((t for t in view.thoughts if t.id == thought_id), None)
    if thought is None:
        raise click.ClickException(f"No thought with id {thought_id}")
    view.start_edit(thought)
    if text is not None:
        view.new_text = text
    for comp_id in toggles:
        view.toggle_competency(comp_id)
    for comp_id, checked in view.edit_choices().items():
        click.echo(f"[{'x' if checked else ' '}] {view.competency_label(comp_id)}")
    if view.save_edit():
        click.echo(view.render_text())


if __name__ == "__main__":
    cli()
