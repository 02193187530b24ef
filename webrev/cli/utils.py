"""Utility commands for webrev CLI."""

from pathlib import Path

import click

from . import main


DEFAULT_CONFIG = """\
# webrev configuration
views:
  patch_context: 3
  udiff_context: 5
  cdiff_context: 5
  sdiff_context: 20
  frames_context: 0

source:
  # Either a local repository and revisions...
  # repo_path: "~/src/project"
  # base: "origin/main"
  # head: "HEAD"
  # ...or a webrev directory
  # webrev_dir: "${WEBREV_DIR}"

logging:
  level: "WARNING"
  # file: "~/.webrev/webrev.log"
"""


@main.command()
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(force: bool) -> None:
    """Write a default webrev.yaml in the current directory."""
    config_path = Path.cwd() / "webrev.yaml"

    if config_path.exists() and not force:
        click.echo(f"Config file already exists: {config_path}")
        if not click.confirm("Overwrite?"):
            return

    config_path.write_text(DEFAULT_CONFIG)
    click.echo(f"Created config file: {config_path}")
