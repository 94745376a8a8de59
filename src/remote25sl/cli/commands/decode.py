"""Decode command implementation."""

import json
import logging
import sys
from typing import Union

import click

from remote25sl.decoder import Rejection, decode_detailed
from remote25sl.events import Event
from remote25sl.exceptions import ErrorContext, Remote25SLError, format_error_for_display
from remote25sl.ports import InputPort
from remote25sl.utils import format_bytes, parse_hex_message

logger = logging.getLogger(__name__)

PORT_CHOICE = click.Choice([port.value for port in InputPort], case_sensitive=False)


def result_to_json(raw: list[int], result: Union[Event, Rejection]) -> dict:
    """Build a JSON-serializable description of a decode result."""
    payload: dict = {"bytes": format_bytes(raw)}

    if isinstance(result, Rejection):
        payload["rejection"] = result.value
        return payload

    payload["event"] = type(result).__name__
    payload.update(result.model_dump(mode="json"))
    control = getattr(result, "control", None)
    if control is not None:
        payload["control"] = {
            "type": type(control).__name__,
            "label": control.label,
            **control.model_dump(mode="json"),
        }
    payload["text"] = str(result)
    return payload


def render_result(raw: list[int], result: Union[Event, Rejection], as_json: bool) -> str:
    if as_json:
        return json.dumps(result_to_json(raw, result))
    if isinstance(result, Rejection):
        return f"{format_bytes(raw)}  ->  no event ({result.value})"
    return f"{format_bytes(raw)}  ->  {result}"


@click.command(name="decode")
@click.argument("hex_bytes", nargs=-1)
@click.option(
    "--port",
    "-p",
    type=PORT_CHOICE,
    default=InputPort.CONTROLS.value,
    help="Input port the messages came from (default: controls)",
)
@click.option(
    "--explain",
    is_flag=True,
    help="When reading stdin, also show lines that produced no event, with the reason",
)
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per message")
def decode_command(hex_bytes: tuple[str, ...], port: str, explain: bool, as_json: bool):
    """
    Decode ReMOTE 25SL MIDI messages written as hex bytes.

    Give one message as arguments (e.g. B0 0A 40), or pipe messages in on
    stdin, one per line. Blank lines and lines starting with '#' are skipped.
    """
    input_port = InputPort(port.lower())

    if hex_bytes:
        try:
            raw = parse_hex_message(" ".join(hex_bytes))
        except Remote25SLError as e:
            logger.error(e.technical_message)
            click.echo(f"ERROR: {e.get_full_message()}", err=True)
            sys.exit(1)

        result = decode_detailed(raw, input_port)
        click.echo(render_result(raw, result, as_json))
        return

    failures = 0
    for line_number, line in enumerate(sys.stdin, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue

        with ErrorContext(f"decode line {line_number}", logger_instance=logger, re_raise=False) as ctx:
            raw = parse_hex_message(text)
            result = decode_detailed(raw, input_port)
            if explain or not isinstance(result, Rejection):
                click.echo(render_result(raw, result, as_json))

        if ctx.error:
            failures += 1
            user_message, _ = format_error_for_display(ctx.error)
            click.echo(f"line {line_number}: {user_message}", err=True)
            if not getattr(ctx.error, "recoverable", False):
                # Not a problem with this line, so the rest would fail too
                sys.exit(1)

    if failures:
        logger.warning(f"{failures} line(s) could not be parsed")
        sys.exit(1)
