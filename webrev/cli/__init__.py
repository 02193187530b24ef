"""Command-line interface for webrev."""

import logging
from pathlib import Path
import sys

import click

from .. import __version__
from ..comparison import ComparisonSource, GitSource, WebrevDirSource
from ..config import Config, load_config


logger = logging.getLogger(__name__)


def setup_logging(level: str, log_file: Path | None = None) -> None:
    """Configure logging for the application."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to config file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context, config: Path | None, verbose: bool) -> None:
    """webrev - review a change as unified, context, side-by-side or frames diffs."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = None


def get_config(ctx: click.Context) -> Config:
    """Load and return config, caching it in context."""
    if ctx.obj.get("config") is not None:
        return ctx.obj["config"]

    cfg = load_config(ctx.obj.get("config_path"))

    log_level = "DEBUG" if ctx.obj.get("verbose", False) else cfg.logging.level
    setup_logging(log_level, cfg.logging.resolved_file)

    ctx.obj["config"] = cfg
    return cfg


def require_config(ctx: click.Context) -> Config:
    """get_config that reports an unusable config file and exits."""
    try:
        return get_config(ctx)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: Invalid config: {e}", err=True)
        sys.exit(1)


def source_options(f):
    """Options selecting where the comparison comes from."""
    f = click.option("--head", help="Head revision (with --repo, default HEAD)")(f)
    f = click.option("--base", help="Base revision (with --repo)")(f)
    f = click.option(
        "--repo",
        "repo_path",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        help="Local git repository to compare revisions of",
    )(f)
    f = click.option(
        "--dir",
        "webrev_dir",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        help="Webrev directory with metadata.json and comparison.json",
    )(f)
    return f


def open_source(
    config: Config,
    webrev_dir: Path | None,
    repo_path: Path | None,
    base: str | None,
    head: str | None,
) -> ComparisonSource:
    """Pick the comparison source from CLI options, falling back to config.

    Raises:
        click.UsageError: If no source is configured.
    """
    if webrev_dir is None and repo_path is None:
        if config.source.webrev_dir:
            webrev_dir = Path(config.source.webrev_dir)
        elif config.source.repo_path:
            repo_path = Path(config.source.repo_path)

    if webrev_dir is not None:
        logger.debug(f"Using webrev directory {webrev_dir}")
        return WebrevDirSource(webrev_dir)

    if repo_path is not None:
        base = base or config.source.base
        if not base:
            raise click.UsageError("--base is required with --repo")
        return GitSource(repo_path, base, head or config.source.head)

    raise click.UsageError("Specify a comparison with --dir or --repo/--base")


# Import and register subcommands
from . import (
    hunks,  # noqa: E402, F401
    utils,  # noqa: E402, F401
    views,  # noqa: E402, F401
)
