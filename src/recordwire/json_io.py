from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from recordwire.exceptions import ParseError


def parse_json_text(text: str | bytes | bytearray, *, source: str = "<input>") -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"malformed JSON in {source}: {exc.msg} at line {exc.lineno}") from exc
    except (TypeError, UnicodeDecodeError) as exc:
        raise ParseError(f"unreadable JSON in {source}: {exc}") from exc


def load_json_path(path: Path, *, encoding: str = "utf-8") -> object:
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeError) as exc:
        raise ParseError(f"cannot read {path}: {exc}") from exc
    return parse_json_text(text, source=str(path))


def canonicalize_json(value: object) -> object:
    """Copy a plain-data tree with mapping keys in lexical order."""
    if isinstance(value, Mapping):
        return {
            str(key): canonicalize_json(value[key])
            for key in sorted(value, key=str)
        }
    if isinstance(value, (list, tuple)):
        return [canonicalize_json(item) for item in value]
    return value


def dump_json_pretty(payload: object, *, sort_keys: bool = False) -> str:
    ordered = canonicalize_json(payload) if sort_keys else payload
    return json.dumps(ordered, indent=2, sort_keys=False)
