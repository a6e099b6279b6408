"""
Step definitions for DNS Maintenance Mode integration tests.
"""

from pathlib import Path
from unittest.mock import patch

import yaml
from behave import given, then, when
from rich.console import Console

from dns_maintenance_mode.cli.main import main
from dns_maintenance_mode.providers.base_provider import DNSProviderError
from dns_maintenance_mode.providers.mock_provider import MockDNSProvider


def write_config(context) -> Path:
    """Write the scenario configuration to a YAML file."""
    config_file = context.test_data_dir / "config.yaml"
    with open(config_file, "w") as f:
        yaml.dump(context.config_data, f)
    return config_file


def _mock_records(context):
    return context.config_data["dns_providers"]["mock"]["records"]


@given('the "{profile}" environment has weighted alias records')
def step_impl(context, profile):
    """Load the alias records of the environment into the mock provider."""
    targets = {
        "service": context.test_service_target,
        "maintenance": "maintenance"
        + context.config_data["environments"][profile]["domain"],
        "legacy": context.test_legacy_target,
    }
    for row in context.table:
        _mock_records(context).append(
            {
                "Name": row["name"],
                "Type": "A",
                "SetIdentifier": row["set_identifier"],
                "Weight": int(row["weight"]),
                "AliasTarget": {
                    "HostedZoneId": "Z3AADJGX6KTTL2",
                    "DNSName": targets[row["target"]],
                    "EvaluateTargetHealth": False,
                },
            }
        )


@given("the provider returns {count:d} records per page")
def step_impl(context, count):
    context.config_data["dns_providers"]["mock"]["page_size"] = count


@given("maintenance mode is currently on")
def step_impl(context):
    """Swap the weights so the maintenance targets carry the traffic."""
    for record in _mock_records(context):
        if record["SetIdentifier"] == "maintenance":
            record["Weight"] = 100
        else:
            record["Weight"] = 0


@given('I answer "{answer}" to the confirmation prompt')
def step_impl(context, answer):
    context.answer = answer


@given('the provider rejects change batches with "{code}"')
def step_impl(context, code):
    context.rejection_code = code


def _run(context, mode, profile, extra_args=()):
    config_file = write_config(context)
    providers = []
    original_init = MockDNSProvider.__init__

    def tracking_init(provider, config=None):
        original_init(provider, config)
        providers.append(provider)

    argv = ["--mode", mode, "--profile", profile, "--config", str(config_file)]
    argv.extend(extra_args)

    with patch.object(MockDNSProvider, "__init__", tracking_init), patch.object(
        Console, "input", return_value=context.answer
    ):
        if getattr(context, "rejection_code", None):
            rejection = DNSProviderError(context.rejection_code, "Rejected by test")
            with patch.object(MockDNSProvider, "change_records", side_effect=rejection):
                context.exit_code = _exit_code(argv)
        else:
            context.exit_code = _exit_code(argv)

    context.provider = providers[0] if providers else None


def _exit_code(argv):
    try:
        main(argv)
    except SystemExit as e:
        return e.code
    return 0


@when('I run the toggle with mode "{mode}" for profile "{profile}"')
def step_impl(context, mode, profile):
    _run(context, mode, profile)


@when('I run the toggle with mode "{mode}" for profile "{profile}" as a dry run')
def step_impl(context, mode, profile):
    _run(context, mode, profile, ["--dry-run"])


@then("the toggle exits with status {status:d}")
def step_impl(context, status):
    assert context.exit_code == status, f"Expected {status}, got {context.exit_code}"


@then("one change batch with {count:d} changes is submitted")
def step_impl(context, count):
    batches = context.provider.change_batches
    assert len(batches) == 1, f"Expected one batch, got {len(batches)}"
    assert len(batches[0]["Changes"]) == count


@then("no changes are submitted")
def step_impl(context):
    if context.provider is not None:
        assert context.provider.change_batches == []


@then('"{name}" via "{set_identifier}" has weight {weight:d}')
def step_impl(context, name, set_identifier, weight):
    record = next(
        r
        for r in context.provider.records
        if r["Name"] == name and r.get("SetIdentifier") == set_identifier
    )
    assert record["Weight"] == weight, f"{name} ({set_identifier}) has {record['Weight']}"
