"""cssbuild CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
from dataclasses import replace

import click

from cssbuild import __version__
from cssbuild.config import CssBuildConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@click.group()
@click.version_option(version=__version__, prog_name="cssbuild")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: $CSSBUILD_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """cssbuild - build CSS selectors part by part."""
    try:
        config = CssBuildConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    if log_level:
        config = replace(config, log_level=log_level.upper())
    if config.log_level not in LOG_LEVELS:
        raise click.UsageError(f"Unknown log level: {config.log_level}")

    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from cssbuild.cli.build import build  # noqa: E402
from cssbuild.cli.kinds import kinds  # noqa: E402

cli.add_command(build)
cli.add_command(kinds)
