# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""
bitz CLI - combine and complement commands
"""

from enum import Enum
from typing import Optional

import typer

from bitz.commands.common import fail, load_config, make_bitset, pick
from bitz.errors import CapacityMismatchError


class Operation(str, Enum):
    union = "union"
    intersection = "intersection"


def combine(
    operation: Operation = typer.Argument(..., help="union or intersection"),
    left: str = typer.Option("", "--left", "-l", help="Bits set in the left operand"),
    right: str = typer.Option("", "--right", "-r", help="Bits set in the right operand"),
    capacity: Optional[int] = typer.Option(None, min=0, help="Capacity of the left operand"),
    fill: Optional[bool] = typer.Option(
        None, "--fill/--no-fill", help="Start the left operand with every bit set"
    ),
    right_capacity: Optional[int] = typer.Option(
        None, min=0, help="Capacity of the right operand (defaults to --capacity)"
    ),
    right_fill: Optional[bool] = typer.Option(
        None,
        "--right-fill/--right-no-fill",
        help="Start the right operand with every bit set (defaults to --fill)",
    ),
    width: Optional[int] = typer.Option(None, min=0, help="Bits per rendered row"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="TOML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
):
    """
    Combine two bitsets and render the result.

    Both operands must have the same capacity.
    """
    config_obj = load_config(config, verbose)
    left_capacity = pick(capacity, config_obj.capacity)
    left_fill = pick(fill, config_obj.fill)
    left_set = make_bitset(left, left_capacity, left_fill)
    right_set = make_bitset(
        right, pick(right_capacity, left_capacity), pick(right_fill, left_fill)
    )

    try:
        if operation == Operation.union:
            result = left_set.union(right_set)
        else:
            result = left_set.intersection(right_set)
    except CapacityMismatchError as e:
        fail(e)

    typer.echo(result.to_ascii(width=pick(width, config_obj.width)), nl=False)


def complement(
    bits: str = typer.Option("", "--bits", "-b", help="Bits to set, e.g. '1,5,10-12'"),
    capacity: Optional[int] = typer.Option(None, min=0, help="Initial capacity in bits"),
    fill: Optional[bool] = typer.Option(None, "--fill/--no-fill", help="Start with every bit set"),
    width: Optional[int] = typer.Option(None, min=0, help="Bits per rendered row"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="TOML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
):
    """
    Render the complement of a bitset.
    """
    config_obj = load_config(config, verbose)
    bitset = make_bitset(
        bits, pick(capacity, config_obj.capacity), pick(fill, config_obj.fill)
    )
    typer.echo(bitset.complement().to_ascii(width=pick(width, config_obj.width)), nl=False)
