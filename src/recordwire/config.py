from __future__ import annotations

import logging
import os
from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

import pydantic

from recordwire.casing import case_transform_for
from recordwire.dto import MarshalConfigDTO
from recordwire.invariants import StrictnessConfig
from recordwire.options import MarshalOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "recordwire.toml"
STRICT_ENUMS_ENV = "RECORDWIRE_STRICT_ENUMS"
WIRE_CASE_ENV = "RECORDWIRE_WIRE_CASE"

_TRUE_VALUES = {"1", "true", "yes", "on", "strict"}
_FALSE_VALUES = {"0", "false", "no", "off", "lenient"}

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("cannot read %s: %s", path, exc)
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        logger.warning("ignoring malformed %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def marshal_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("marshal", {})
    return section if isinstance(section, dict) else {}


def _env_optional_flag(name: str) -> bool | None:
    value = os.getenv(name)
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return None


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged


def resolve_marshal_config(
    root: Path | None = None,
    config_path: Path | None = None,
    overrides: TomlTable | None = None,
) -> MarshalConfigDTO:
    """Layer file settings, then environment, then explicit overrides."""
    section = marshal_defaults(root=root, config_path=config_path)
    env_payload: TomlTable = {
        "strict_enums": _env_optional_flag(STRICT_ENUMS_ENV),
        "wire_case": (os.getenv(WIRE_CASE_ENV) or "").strip().lower() or None,
    }
    merged = merge_payload(env_payload, section)
    merged = merge_payload(overrides or {}, merged)
    try:
        return MarshalConfigDTO.model_validate(merged)
    except pydantic.ValidationError as exc:
        logger.warning("invalid [marshal] configuration, using defaults: %s", exc)
        return MarshalConfigDTO()


def options_from_config(
    root: Path | None = None,
    config_path: Path | None = None,
    overrides: TomlTable | None = None,
) -> MarshalOptions:
    config = resolve_marshal_config(root=root, config_path=config_path, overrides=overrides)
    return MarshalOptions(
        case=case_transform_for(config.wire_case),
        strict_enums=config.strict_enums,
    )


def strictness_from_config(
    root: Path | None = None, config_path: Path | None = None
) -> StrictnessConfig:
    config = resolve_marshal_config(root=root, config_path=config_path)
    return StrictnessConfig(strict_enums=config.strict_enums)
