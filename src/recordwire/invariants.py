"""Invariant markers and the ambient enum strictness scope."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import NoReturn

from recordwire.exceptions import NeverThrown

_STRICT_ENUMS_OVERRIDE: ContextVar[bool | None] = ContextVar(
    "recordwire_strict_enums_override",
    default=None,
)


@dataclass(frozen=True)
class StrictnessConfig:
    strict_enums: bool = True


_STRICTNESS_CONFIG: ContextVar[StrictnessConfig] = ContextVar(
    "recordwire_strictness_config",
    default=StrictnessConfig(),
)


def never(reason: str = "", **env: object) -> NoReturn:
    """Mark a code path as unreachable.

    The keyword payload is attached to the raised ``NeverThrown`` so callers
    can see which value slipped through a closed dispatch.
    """
    raise NeverThrown(reason or "never() marker reached", env=env)


def strict_enums() -> bool:
    override = _STRICT_ENUMS_OVERRIDE.get()
    if override is not None:
        return bool(override)
    return bool(_STRICTNESS_CONFIG.get().strict_enums)


def set_strictness_config(config: StrictnessConfig) -> Token[StrictnessConfig]:
    return _STRICTNESS_CONFIG.set(config)


def reset_strictness_config(token: Token[StrictnessConfig]) -> None:
    _STRICTNESS_CONFIG.reset(token)


@contextmanager
def strictness_config_scope(config: StrictnessConfig):
    token = set_strictness_config(config)
    try:
        yield
    finally:
        reset_strictness_config(token)


@contextmanager
def strict_enums_scope(enabled: bool):
    token = _STRICT_ENUMS_OVERRIDE.set(bool(enabled))
    try:
        yield
    finally:
        _STRICT_ENUMS_OVERRIDE.reset(token)
