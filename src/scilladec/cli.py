import json
import logging
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from scilladec.core.errors import DecodeError
from scilladec.core.models import AdtValue, BigInt
from scilladec.decoding.logs import simplify_logs
from scilladec.decoding.types import format_type, parse_type
from scilladec.decoding.widths import bit_width, width_class

console = Console()


def to_jsonable(value: Any) -> Any:
    """JSON-safe view of decoded output; BigInt becomes a decimal string."""
    if isinstance(value, BigInt):
        return str(value)
    if isinstance(value, AdtValue):
        return {"constructor": value.constructor, "arguments": [to_jsonable(a) for a in value.arguments]}
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def _extract_event_logs(data: Any) -> list[dict[str, Any]]:
    """Accept a bare event list, a receipt, or a transaction holding `receipt`."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        receipt = data.get("receipt", data)
        if isinstance(receipt, dict) and isinstance(receipt.get("event_logs"), list):
            return receipt["event_logs"]
    raise click.UsageError("input must be a list of events or an object with 'event_logs'")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """scilladec — decode Scilla event logs and contract values into native Python."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command("simplify-logs")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--event", "events", multiple=True, help="Keep only this _eventname; repeat to OR")
@click.option("--compact/--pretty", default=False, show_default=True, help="Single-line JSON output")
def simplify_logs_cmd(path: Path, events: tuple[str, ...], compact: bool) -> None:
    """Decode every param value of the event logs stored in PATH (JSON)."""
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path}: invalid JSON: {e}") from e

    logs = _extract_event_logs(data)
    if events:
        logs = [ev for ev in logs if isinstance(ev, dict) and ev.get("_eventname") in events]

    try:
        simplified = simplify_logs(logs)
    except DecodeError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e

    text = json.dumps(to_jsonable(simplified), separators=(",", ":") if compact else None)
    if compact:
        click.echo(text)
    else:
        console.print_json(text)


@cli.command("parse-type")
@click.argument("type_strings", nargs=-1, required=True)
def parse_type_cmd(type_strings: tuple[str, ...]) -> None:
    """Show the canonical form and integer width class of each TYPE."""
    table = Table("type", "canonical", "width")
    for ts in type_strings:
        try:
            expr = parse_type(ts)
        except DecodeError as e:
            raise click.ClickException(f"{type(e).__name__}: {e}") from e
        bits = bit_width(expr)
        width = width_class(expr).value if bits is None else f"{width_class(expr).value} ({bits} bits)"
        table.add_row(ts, format_type(expr), width)
    console.print(table)
