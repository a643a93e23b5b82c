# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""
bitz CLI - show command
"""

from typing import Optional

import typer

from bitz.commands.common import load_config, make_bitset, pick


def show(
    bits: str = typer.Option("", "--bits", "-b", help="Bits to set, e.g. '1,5,10-12'"),
    capacity: Optional[int] = typer.Option(None, min=0, help="Initial capacity in bits"),
    fill: Optional[bool] = typer.Option(None, "--fill/--no-fill", help="Start with every bit set"),
    width: Optional[int] = typer.Option(None, min=0, help="Bits per rendered row"),
    start: Optional[int] = typer.Option(None, min=0, help="First bit to render"),
    compact: bool = typer.Option(False, "--compact", help="Print a plain 0/1 string instead of a table"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="TOML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
):
    """
    Render a bitset as an ASCII table.
    """
    config_obj = load_config(config, verbose)
    bitset = make_bitset(
        bits, pick(capacity, config_obj.capacity), pick(fill, config_obj.fill)
    )
    if compact:
        typer.echo(str(bitset))
    else:
        typer.echo(
            bitset.to_ascii(
                width=pick(width, config_obj.width),
                start=pick(start, config_obj.start),
            ),
            nl=False,
        )
