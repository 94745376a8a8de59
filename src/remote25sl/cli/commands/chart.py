"""Chart command implementation."""

import click

from remote25sl.mapping import DEVICE_CHANNEL, FAMILY_CONTROL_CHANGE, chart as mapping_chart
from remote25sl.ports import InputPort

from .decode import PORT_CHOICE


@click.command(name="chart")
@click.option(
    "--port",
    "-p",
    type=PORT_CHOICE,
    default=InputPort.CONTROLS.value,
    help="Port whose mapping to print (default: controls)",
)
def chart(port: str):
    """Print the controller and note numbers the 25SL sends on a port."""
    input_port = InputPort(port.lower())

    click.echo(f"{input_port.port_name} (MIDI channel {DEVICE_CHANNEL + 1})\n")

    rows = list(mapping_chart(input_port))
    for family, number, control in rows:
        prefix = "CC" if family == FAMILY_CONTROL_CHANGE else "Note"
        click.echo(f"  {prefix:<4} {number:>3}  {control.label}")

    if input_port is InputPort.KEYBOARD:
        click.echo(f"  {'Note':<4} any  Keyboard keys")
        click.echo(f"  {'PB':<4} any  Pitch bend")
    elif not rows:
        click.echo("  No events are decoded from this port.")
