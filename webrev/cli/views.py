"""Commands rendering the views of a comparison."""

import logging
from pathlib import Path
import sys

import click
from rich.console import Console

from ..errors import WebrevError
from ..views import VIEW_NAMES, ReviewSession
from . import main, open_source, require_config, source_options


logger = logging.getLogger(__name__)


def _open_session(
    ctx: click.Context,
    webrev_dir: Path | None,
    repo_path: Path | None,
    base: str | None,
    head: str | None,
) -> ReviewSession:
    config = require_config(ctx)
    source = open_source(config, webrev_dir, repo_path, base, head)
    try:
        return ReviewSession(source, config.views)
    except WebrevError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _resolve_file(session: ReviewSession, name: str) -> int:
    try:
        return session.comparison.find_file(name)
    except KeyError as e:
        click.echo(f"Error: {e.args[0]}", err=True)
        sys.exit(1)


@main.command("index")
@source_options
@click.pass_context
def index_cmd(
    ctx: click.Context,
    webrev_dir: Path | None,
    repo_path: Path | None,
    base: str | None,
    head: str | None,
) -> None:
    """Show the comparison summary and the files it touches."""
    session = _open_session(ctx, webrev_dir, repo_path, base, head)
    Console(highlight=False).print(session.render_index())


@main.command("show")
@click.argument("view", type=click.Choice(VIEW_NAMES))
@click.argument("file")
@click.option("--context", "-n", type=click.IntRange(min=0), help="Context lines (overrides config)")
@source_options
@click.pass_context
def show_cmd(
    ctx: click.Context,
    view: str,
    file: str,
    context: int | None,
    webrev_dir: Path | None,
    repo_path: Path | None,
    base: str | None,
    head: str | None,
) -> None:
    """Render one VIEW of FILE (an index from 'webrev index' or a path).

    Views: cdiff, udiff, sdiff, frames, old, new, patch.
    """
    session = _open_session(ctx, webrev_dir, repo_path, base, head)
    index = _resolve_file(session, file)

    try:
        renderable = session.render(view, index, context)
    except WebrevError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if view == "patch":
        # Plain text so the output can be fed back to patch tools
        click.echo(renderable.plain, nl=False)
        return

    console = Console(highlight=False)
    if view not in ("sdiff", "frames"):
        console.rule(session.file(index).filename)
    console.print(renderable, soft_wrap=view not in ("sdiff", "frames"))

    nav = []
    for label, step in (("prev", -1), ("next", 1)):
        other = session.comparison.neighbor(index, step)
        if other is not None:
            nav.append(f"{label}: {other} {session.file(other).filename}")
    if nav:
        console.print("  ".join(nav), style="dim", soft_wrap=True)


@main.command("frames")
@click.argument("file")
@source_options
@click.pass_context
def frames_cmd(
    ctx: click.Context,
    file: str,
    webrev_dir: Path | None,
    repo_path: Path | None,
    base: str | None,
    head: str | None,
) -> None:
    """Browse FILE in the interactive dual-pane viewer.

    Use 'j' and 'k' for next and previous diffs, 'b' and 'e' for the
    beginning and end of the file, 'q' to quit.
    """
    from ..ui import FramesApp

    session = _open_session(ctx, webrev_dir, repo_path, base, head)
    index = _resolve_file(session, file)

    try:
        frames = session.frames(index)
    except WebrevError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    changed = session.file(index)
    FramesApp(frames, changed.base_filename, changed.filename).run()
