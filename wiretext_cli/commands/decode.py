"""Decode command for wiretext CLI."""

from __future__ import annotations

import click

from wiretext_cli.output import print_decoded


@click.command()
@click.argument("value")
@click.pass_context
def decode(ctx: click.Context, value: str) -> None:
    """Percent-decode a value the way URL credentials are decoded.

    VALUE: Text containing %HH escapes

    Non-printable bytes in the result are shown as \\xHH.

    Examples:

        wiretext decode 'p%40ssw%3Ard'
    """
    from wiretext.url import urldecode

    as_json = ctx.obj.get("json", False)
    print_decoded(value, urldecode(value), as_json=as_json)
