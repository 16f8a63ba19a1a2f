from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from recordwire import cli


def test_schema_command_prints_fields() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.app, ["schema", "tests.record_fixtures:Customer"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["record_type"] == "tests.record_fixtures:Customer"
    assert [field["key"] for field in payload["fields"]] == ["name", "address", "other_addresses"]
    address = payload["fields"][1]
    assert address["kind"] == "fragment"
    assert address["nested_type"] == "Address"
    assert address["strategy"] == "record"


def test_schema_command_lists_enum_values() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.app, ["schema", "tests.record_fixtures:Reading"])
    country = json.loads(result.output)["fields"][-1]
    assert country["enum_type"] == "Country"
    assert country["enum_values"] == ["Australia", "UnitedKingdom"]


def test_convert_normalizes_payload_file(tmp_path: Path) -> None:
    source = tmp_path / "customer.json"
    source.write_text(json.dumps({"address": {"country": "Australia"}}), encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        cli.app,
        ["convert", "tests.record_fixtures:Customer", str(source), "--wire-case", "identity"],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["address"]["street_address"] == ""
    assert payload["other_addresses"] == []


def test_convert_reads_stdin() -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.app,
        ["convert", "tests.record_fixtures:Address", "-", "--sort-keys"],
        input='{"streetAddress": "1 Main St"}',
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert list(payload) == sorted(payload)
    assert payload["streetAddress"] == "1 Main St"


def test_convert_reports_validation_errors() -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.app,
        ["convert", "tests.record_fixtures:Reading", "-"],
        input='{"country": "Mars"}',
    )
    assert result.exit_code == 2
    assert "ValidationError" in result.output


def test_convert_lenient_enums() -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.app,
        ["convert", "tests.record_fixtures:Reading", "-", "--lenient-enums"],
        input='{"country": "Mars"}',
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["country"] == "Mars"


def test_convert_reports_parse_errors() -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.app, ["convert", "tests.record_fixtures:Address", "-"], input="{broken"
    )
    assert result.exit_code == 2
    assert "ParseError" in result.output


def test_unknown_target_is_a_usage_error() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.app, ["schema", "tests.record_fixtures:Nope"])
    assert result.exit_code == 2
    result = runner.invoke(cli.app, ["schema", "no_colon"])
    assert result.exit_code == 2
