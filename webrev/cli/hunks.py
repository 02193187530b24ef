"""Inspect the hunks of a standalone patch file."""

from dataclasses import asdict
import json
from pathlib import Path
import sys

import click

from ..errors import MalformedPatchError
from ..hunks import Hunk, classify, expand_context, is_pure_addition, is_pure_deletion, parse_patch, split_lines
from ..views import unified_lines
from . import main, require_config


def _is_added_file(hunks: tuple[Hunk, ...]) -> bool:
    """Whether the old side is empty, so no base content is needed for context."""
    return all(is_pure_addition(hunk) and hunk.source_start == 1 for hunk in hunks)


def _is_deleted_file(hunks: tuple[Hunk, ...]) -> bool:
    """Whether the new side is empty, so no head content is needed for context."""
    return all(is_pure_deletion(hunk) and hunk.dest_start == 1 for hunk in hunks)


@main.command("hunks")
@click.argument("patch_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--context", "-n", type=click.IntRange(min=0), default=0, show_default=True, help="Context lines")
@click.option(
    "--base",
    "base_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Old file content (required for context, omit for an added file)",
)
@click.option(
    "--head",
    "head_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="New file content (required for context, omit for a deleted file)",
)
@click.option("--json", "as_json", is_flag=True, help="Output hunks as JSON")
@click.pass_context
def hunks_cmd(
    ctx: click.Context,
    patch_file: Path,
    context: int,
    base_file: Path | None,
    head_file: Path | None,
    as_json: bool,
) -> None:
    """Parse PATCH_FILE into minimal hunks, optionally re-adding context.

    Example:

        webrev hunks change.patch --context 3 --base old.c --head new.c
    """
    require_config(ctx)

    try:
        hunks = parse_patch(patch_file.read_text())
    except MalformedPatchError as e:
        click.echo(f"Error: {patch_file}: {e}", err=True)
        sys.exit(1)

    if context > 0:
        if base_file is None and not _is_added_file(hunks):
            raise click.UsageError("--context needs --base file contents unless the patch adds the file")
        if head_file is None and not _is_deleted_file(hunks):
            raise click.UsageError("--context needs --head file contents unless the patch deletes the file")
        base_lines = split_lines(base_file.read_text()) if base_file else []
        head_lines = split_lines(head_file.read_text()) if head_file else []
        hunks = expand_context(hunks, context, base_lines, head_lines)

    if as_json:
        data = [{**asdict(hunk), "kind": classify(hunk).value} for hunk in hunks]
        click.echo(json.dumps(data, indent=2))
        return

    for hunk in hunks:
        click.echo(f"{hunk.header()} {classify(hunk).value}")
        for line in unified_lines(hunk):
            click.echo(line)
