from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from recordwire.config import options_from_config
from recordwire.dto import schema_to_dto
from recordwire.exceptions import ParseError, SchemaDerivationError, ValidationError
from recordwire.json_io import dump_json_pretty, load_json_path, parse_json_text
from recordwire.record import Record
from recordwire.registry import get_schema

app = typer.Typer(add_completion=False)

_STDIN_ALIAS = "-"
_EXIT_INVALID = 2


def _resolve_record_type(target: str) -> type[Record]:
    module_name, _, qualname = target.partition(":")
    if not module_name or not qualname:
        raise typer.BadParameter("expected MODULE:Type", param_hint="TARGET")
    try:
        resolved: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"cannot import {module_name}: {exc}", param_hint="TARGET")
    for part in qualname.split("."):
        resolved = getattr(resolved, part, None)
        if resolved is None:
            raise typer.BadParameter(f"{target} not found", param_hint="TARGET")
    if not (isinstance(resolved, type) and issubclass(resolved, Record)):
        raise typer.BadParameter(f"{target} is not a Record type", param_hint="TARGET")
    return resolved


def _read_payload(source: str) -> object:
    if source == _STDIN_ALIAS:
        return parse_json_text(sys.stdin.read(), source="<stdin>")
    return load_json_path(Path(source))


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=_EXIT_INVALID)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Python logging level."),
) -> None:
    """Inspect record schemas and normalize JSON payloads."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("schema")
def schema_command(
    target: str = typer.Argument(..., help="Record type as MODULE:Type."),
) -> None:
    """Print the derived schema of a record type as JSON."""
    record_type = _resolve_record_type(target)
    try:
        schema = get_schema(record_type)
    except SchemaDerivationError as exc:
        _fail(str(exc))
    typer.echo(dump_json_pretty(schema_to_dto(schema).model_dump()))


@app.command("convert")
def convert_command(
    target: str = typer.Argument(..., help="Record type as MODULE:Type."),
    source: str = typer.Argument(_STDIN_ALIAS, help="JSON file, or - for stdin."),
    config: Optional[Path] = typer.Option(None, "--config"),
    wire_case: Optional[str] = typer.Option(
        None, "--wire-case", help="camel, snake or identity."
    ),
    lenient_enums: bool = typer.Option(
        False,
        "--lenient-enums/--strict-enums",
        help="Log unknown enum values instead of failing.",
    ),
    sort_keys: bool = typer.Option(False, "--sort-keys"),
) -> None:
    """Deserialize a payload into TARGET and print its serialized form."""
    record_type = _resolve_record_type(target)
    overrides: dict[str, object] = {"wire_case": wire_case}
    if lenient_enums:
        overrides["strict_enums"] = False
    options = options_from_config(config_path=config, overrides=overrides)
    try:
        record = record_type.deserialize(_read_payload(source), options=options)
    except (ParseError, ValidationError, SchemaDerivationError) as exc:
        _fail(f"{type(exc).__name__}: {exc}")
    payload = None if record is None else record.serialize(options)
    typer.echo(dump_json_pretty(payload, sort_keys=sort_keys))
