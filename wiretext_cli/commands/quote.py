"""Quote command for wiretext CLI."""

from __future__ import annotations

import sys
from typing import BinaryIO

import click

from wiretext_cli.output import print_error, print_json


@click.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "--full", is_flag=True,
    help="Quote the whole input instead of truncating long output"
)
@click.pass_context
def quote(ctx: click.Context, source: BinaryIO, full: bool) -> None:
    """Render binary data as printable text.

    SOURCE: File to read (default: stdin)

    Printable ASCII is kept; every other byte is shown as \\xHH. Without
    --full the output is limited to the configured render buffer and ends
    with "... (truncated)" when cut short. JSON output always holds the
    whole input.

    Examples:

        wiretext quote frame.bin

        printf 'AMQP\\x00\\x00\\x09\\x01' | wiretext quote --full
    """
    from wiretext.exceptions import WiretextError
    from wiretext.quote import fprint_data, quote_bytes

    as_json = ctx.obj.get("json", False)
    config = ctx.obj["config"]
    tracer = ctx.obj.get("tracer")

    data = source.read()
    if tracer:
        tracer.record("input bytes", len(data))

    if not full and not as_json:
        fprint_data(sys.stdout, data, buffer_size=config.render_buffer_size)
        sys.stdout.write("\n")
        return

    try:
        text = quote_bytes(data, max_capacity=config.max_capacity, tracer=tracer)
    except WiretextError as e:
        print_error(str(e))
        ctx.exit(1)

    if as_json:
        print_json({"size": len(data), "quoted": text})
    else:
        click.echo(text)
