# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""
bitz CLI - inspect and combine bitsets from the command line

- show: render a bitset as an ASCII table
- count: print the number of set bits
- combine: union or intersection of two bitsets
- complement: flip every bit of a bitset
"""

import typer

from bitz.commands.combine import combine, complement
from bitz.commands.count import count
from bitz.commands.show import show

app = typer.Typer(
    name="bitz",
    help="Growable bitset toolkit",
    no_args_is_help=True,
)

app.command()(show)
app.command()(count)
app.command()(combine)
app.command()(complement)


def main():
    app()


if __name__ == "__main__":
    app()
