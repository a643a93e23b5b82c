# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""
Helpers shared by the bitz CLI commands.
"""

import logging
from typing import Optional

import typer

from bitz.bitset import BitSet
from bitz.configs import BitzConfig
from bitz.errors import BitzError
from bitz.utils.bit_utils import build_bitset, parse_bits
from bitz.utils.logging import build_logger


def load_config(config_path: Optional[str], verbose: bool = False) -> BitzConfig:
    """
    Loads the TOML config and configures the package logger from it.

    Args:
        config_path: Path of a TOML file, or None for defaults.
        verbose: Force DEBUG level logging to the console.

    Returns:
        BitzConfig: The loaded configuration.
    """
    try:
        config = BitzConfig.from_toml(config_path)
    except BitzError as e:
        fail(e)

    level = logging.DEBUG if verbose else config.logging.level
    build_logger(
        "bitz",
        config.logging.file,
        config.logging.log_dir,
        level=level,
        console=verbose,
    )
    return config


def make_bitset(bits: str, capacity: int, fill: bool) -> BitSet:
    """Parses ``bits`` and builds the bitset, exiting the CLI on bad input."""
    try:
        return build_bitset(parse_bits(bits), capacity=capacity, fill=fill)
    except ValueError as e:
        fail(e)


def pick(value, default):
    """Returns the command line value when one was given, else the config value."""
    return default if value is None else value


def fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)
