"""Shared test fixtures for sftypes.

Provides reusable fixtures for loading describe fixtures, creating isolated
config environments, managing output state, and running CLI commands.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from sftypes.models import ObjectDescription, Profile, RequestConfig
from sftypes.output import OutputFormat, OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"
DESCRIBE_DIR = FIXTURES_DIR / "describe"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time; CliRunner swaps those streams per invocation.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Describe fixtures
# ---------------------------------------------------------------------------


def load_describe_raw(name: str) -> dict[str, Any]:
    with open(DESCRIBE_DIR / f"{name}.json") as f:
        return json.load(f)


@pytest.fixture
def describe_dir() -> Path:
    """Directory holding Account, Contact and Opportunity describes."""
    return DESCRIBE_DIR


@pytest.fixture
def account_raw() -> dict[str, Any]:
    return load_describe_raw("Account")


@pytest.fixture
def account(account_raw: dict[str, Any]) -> ObjectDescription:
    return ObjectDescription.model_validate(account_raw)


@pytest.fixture
def describes() -> dict[str, ObjectDescription]:
    """All fixture describes, keyed by object name."""
    return {
        name: ObjectDescription.model_validate(load_describe_raw(name))
        for name in ("Account", "Contact", "Opportunity")
    }


# ---------------------------------------------------------------------------
# Profile / config isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_profile() -> Profile:
    """A profile pointing at a fake org with a token from the environment."""
    return Profile(
        name="test-org",
        instance_url="https://test.my.salesforce.com",
        api_version="59.0",
        token_source="env:SFTYPES_TEST_TOKEN",
        request=RequestConfig(timeout=5, max_retries=0),
    )


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points the XDG directories at subdirectories of tmp_path, clears the
    SFTYPES_* environment variables and changes into tmp_path.
    """
    monkeypatch.setattr("sftypes.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in ["SFTYPES_PROFILE", "SFTYPES_INSTANCE_URL"]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output / CLI
# ---------------------------------------------------------------------------


@pytest.fixture
def verbose_output() -> OutputManager:
    """Plain, uncoloured, verbose output so debug lines reach stderr."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True, verbose=True)
    set_output(output)
    return output


@pytest.fixture
def cli_runner():
    from typer.testing import CliRunner

    return CliRunner()
