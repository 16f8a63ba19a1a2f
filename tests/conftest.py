from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import pytest

from recordwire import CollectingDiagnosticSink, IdentityCase, MarshalOptions, SchemaRegistry
from tests.env_helpers import env_scope

_CONFIG_ENV = ("RECORDWIRE_STRICT_ENUMS", "RECORDWIRE_WIRE_CASE")


@pytest.fixture(autouse=True)
def _clean_config_env():
    with env_scope({name: None for name in _CONFIG_ENV}):
        yield


@pytest.fixture
def registry() -> SchemaRegistry:
    return SchemaRegistry()


@pytest.fixture
def sink() -> CollectingDiagnosticSink:
    return CollectingDiagnosticSink()


@pytest.fixture
def identity_options(sink: CollectingDiagnosticSink) -> MarshalOptions:
    return MarshalOptions(case=IdentityCase(), diagnostics=sink)
