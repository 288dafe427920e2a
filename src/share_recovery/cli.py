# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Command line interface: recover the secret of each dataset file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from . import policy as policy_module
from .policy import SELECTION_MODES
from .recovery import recover_files

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--selection",
    type=click.Choice(SELECTION_MODES),
    default=None,
    help="Use shares 1..k ('first') or the lowest k decodable shares ('any').",
)
@click.option(
    "--verify/--no-verify",
    default=None,
    help="Check the shares beyond k against the recovered polynomial.",
)
@click.option("--no-reduce", is_flag=True, help="Skip gcd reduction while summing terms.")
@click.option("--log-level", type=click.Choice(_LEVELS, case_sensitive=False), default=None)
@click.pass_context
def main(
    ctx: click.Context,
    files: Tuple[Path, ...],
    selection: Optional[str],
    verify: Optional[bool],
    no_reduce: bool,
    log_level: Optional[str],
) -> None:
    """Reconstruct the secret stored in each dataset FILE."""
    active = policy_module.policy.with_overrides(
        selection=selection,
        verify_surplus=verify,
        reduce_fractions=False if no_reduce else None,
        log_level=log_level.upper() if log_level else None,
    )
    logging.basicConfig(level=active.log_level, format="%(levelname)s %(name)s: %(message)s")
    if hasattr(sys, "set_int_max_str_digits"):
        # Secrets may exceed the default 4300-digit int/str conversion limit.
        sys.set_int_max_str_digits(0)

    failed = 0
    for outcome in recover_files(files, policy=active):
        if outcome.ok:
            click.echo(f"The secret for {outcome.label} is: {outcome.secret}")
        else:
            failed += 1
            click.echo(f"{outcome.label}: {outcome.kind}: {outcome.error}", err=True)
    if failed:
        ctx.exit(1)


if __name__ == "__main__":
    main()
