# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from spelltimer.errors import SpellTimerError
from spelltimer.host import MemoryHost
from spelltimer.logging import LOG_LEVELS, configure_logging
from spelltimer.lookup import parse_lookup
from spelltimer.parsing import parse_spell_line
from spelltimer.plugin import SpellTimerPlugin, render_listing
from spelltimer.replay import replay_transcript
from spelltimer.settings import Settings


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default=None,
    help="Override SPELLTIMER_LOG_LEVEL.",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Override SPELLTIMER_LOG_FORMAT.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_format: str | None) -> None:
    """spelltimer command line interface."""
    try:
        settings = Settings()
    except ValidationError as e:
        raise click.ClickException(f"invalid SPELLTIMER_* environment: {e}") from e
    if log_level:
        settings.log_level = log_level.upper()
    if log_format:
        settings.log_format = log_format
    configure_logging(settings)
    ctx.obj = settings


@cli.command("parse")
@click.argument("lines", nargs=-1, required=True)
def parse(lines: tuple[str, ...]) -> None:
    """Show how status LINES are parsed."""
    for line in lines:
        match = parse_spell_line(line)
        if match is None:
            click.echo(f"{line!r}: no match")
        else:
            click.echo(f"{line!r}: name={match.name!r} duration={match.duration} rule={match.rule}")


@cli.command("lookup")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def lookup(path: Path) -> None:
    """Validate a spell lookup file and print its entries."""
    table = parse_lookup(path.read_text(encoding="utf-8"))
    for entry in table.entries():
        click.echo(f"{entry.id}\t{entry.alias}\t{entry.category}")
    click.echo(f"{len(table)} entries")


@cli.command("replay")
@click.argument("transcript", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--data-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the lookup file (default: settings data_root).",
)
@click.option(
    "--lookup",
    "lookup_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Explicit lookup file, overriding the data root.",
)
@click.option("--list/--no-list", "show_list", default=True, show_default=True)
@click.option("--variables/--no-variables", "show_variables", default=True, show_default=True)
@click.pass_obj
def replay(
    settings: Settings,
    transcript: Path,
    data_root: Path | None,
    lookup_path: Path | None,
    show_list: bool,
    show_variables: bool,
) -> None:
    """Replay a JSONL client TRANSCRIPT and report the resulting spells."""
    host = MemoryHost(data_root=data_root or settings.data_root)
    if lookup_path is not None:
        host.files[settings.lookup_filename] = lookup_path.read_text(encoding="utf-8")

    plugin = SpellTimerPlugin.from_settings(settings)
    plugin.initialize(host)
    try:
        count = replay_transcript(plugin, transcript)
    except SpellTimerError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Replayed {count} events")
    for line in host.echoed():
        click.echo(line)
    if show_list:
        for line in render_listing(plugin.registry):
            click.echo(line)
    if show_variables:
        for name, value in host.variables.items():
            click.echo(f"{name}={value}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
