# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``polysecret FILE...``."""

from __future__ import annotations

import logging

import click

from polysecret import settings as _config
from polysecret.codec import MAX_BASE, MIN_BASE, encode
from polysecret.errors import ReconstructionError
from polysecret.loader import LoaderError, load_share_sets
from polysecret.reconstruction import try_find_secret
from polysecret.settings import DivisionMode


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--division",
    type=click.Choice([m.value for m in DivisionMode]),
    default=None,
    help="Per-term division strategy (default from POLYSECRET_DIVISION).",
)
@click.option(
    "--output-base",
    type=click.IntRange(MIN_BASE, MAX_BASE),
    default=10,
    show_default=True,
    help="Base used to print recovered secrets.",
)
@click.option("--keep-going", is_flag=True, help="Report failed share sets and continue.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(files: tuple[str, ...], division: str | None, output_base: int, keep_going: bool, verbose: bool) -> None:
    """Recover the secret of every share set stored in FILES."""

    level = "DEBUG" if verbose else _config.settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    mode = DivisionMode(division) if division else None

    failed = 0
    for path in files:
        try:
            share_sets = load_share_sets(path)
        except (LoaderError, ReconstructionError) as exc:
            if not keep_going:
                raise click.ClickException(str(exc)) from exc
            click.echo(f"{path}: error: {exc}", err=True)
            failed += 1
            continue

        for share_set in share_sets:
            outcome = try_find_secret(share_set, mode=mode)
            if outcome.ok:
                click.echo(f"{outcome.name}: {encode(outcome.secret, output_base)}")
                continue
            if not keep_going:
                raise click.ClickException(f"{outcome.name}: {outcome.error}")
            click.echo(f"{outcome.name}: error [{outcome.kind.value}]: {outcome.error}", err=True)
            failed += 1

    if failed:
        raise SystemExit(1)


def main() -> None:
    cli(prog_name="polysecret")


if __name__ == "__main__":
    main()
