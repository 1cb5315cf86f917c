"""End-to-end tests for the sftypes CLI.

Run the real Typer app against the describe fixtures with
``--describe-dir`` and check the files written to the output directory.
"""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from sftypes.app import app
from sftypes.client import AsyncClient
from sftypes.config import list_profiles, load_profile, load_project_config
from sftypes.generator.artifacts import BASE_SOBJECT_MODULE, GENERATED_HEADER, SOBJECT_TYPES_MODULE


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def batch_file(isolated_config: Path) -> Path:
    path = isolated_config / "sobjects.json"
    path.write_text(json.dumps({"sobjects": ["Account", "Contact", "Opportunity"]}))
    return path


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


class TestCreateSingle:
    def test_writes_three_files(
        self, runner: CliRunner, isolated_config: Path, describe_dir: Path
    ) -> None:
        out = isolated_config / "types"
        result = runner.invoke(
            app,
            ["create", "-s", "Account", "-o", str(out), "--describe-dir", str(describe_dir)],
        )
        assert result.exit_code == 0, result.output

        assert sorted(p.name for p in out.iterdir()) == [
            "account.ts",
            "sobject.ts",
            "sobjectTypes.ts",
        ]
        assert (out / "sobject.ts").read_text() == BASE_SOBJECT_MODULE
        assert (out / "sobjectTypes.ts").read_text() == SOBJECT_TYPES_MODULE

        module = (out / "account.ts").read_text()
        assert module.startswith(GENERATED_HEADER)
        assert "import { ID, DateString, PhoneString } from './sobjectTypes';" in module
        assert "export interface Account extends SObject {" in module
        assert "  Contacts?: Array<Contact>;" in module
        assert "Parent?:" not in module
        assert "= any;" not in module

    def test_custom_object_file_name(
        self, runner: CliRunner, isolated_config: Path
    ) -> None:
        describes = isolated_config / "describes"
        describes.mkdir()
        (describes / "My_Widget__c.json").write_text(
            json.dumps({"name": "My_Widget__c", "fields": [], "childRelationships": []})
        )
        result = runner.invoke(
            app, ["create", "-s", "My_Widget__c", "--describe-dir", str(describes)]
        )
        assert result.exit_code == 0, result.output
        assert (isolated_config / "src" / "types" / "mywidget.ts").is_file()

    def test_default_output_dir(
        self, runner: CliRunner, isolated_config: Path, describe_dir: Path
    ) -> None:
        result = runner.invoke(
            app, ["create", "--sobject", "Contact", "--describe-dir", str(describe_dir)]
        )
        assert result.exit_code == 0, result.output
        assert (isolated_config / "src" / "types" / "contact.ts").is_file()

    def test_sobject_wins_over_config(
        self, runner: CliRunner, isolated_config: Path, describe_dir: Path, batch_file: Path
    ) -> None:
        out = isolated_config / "types"
        result = runner.invoke(
            app,
            [
                "create", "-s", "Contact", "-c", str(batch_file),
                "-o", str(out), "--describe-dir", str(describe_dir),
            ],
        )
        assert result.exit_code == 0, result.output
        assert (out / "contact.ts").is_file()
        assert not (out / "sobjects.ts").exists()


class TestCreateBatch:
    def test_writes_batch_module(
        self, runner: CliRunner, isolated_config: Path, describe_dir: Path, batch_file: Path
    ) -> None:
        out = isolated_config / "types"
        result = runner.invoke(
            app,
            ["create", "--config", str(batch_file), "-o", str(out), "--describe-dir", str(describe_dir)],
        )
        assert result.exit_code == 0, result.output

        module = (out / "sobjects.ts").read_text()
        positions = [
            module.index(f"export interface {name} extends SObject")
            for name in ("Account", "Contact", "Opportunity")
        ]
        assert positions == sorted(positions)
        assert "  Account?: Account;" in module
        assert module.endswith(
            "// unmapped types:\ntype Case = any;\ntype OpportunityContactRole = any;\n"
        )

    def test_yaml_batch_file(
        self, runner: CliRunner, isolated_config: Path, describe_dir: Path
    ) -> None:
        batch = isolated_config / "sobjects.yaml"
        batch.write_text("sobjects:\n  - Contact\n  - Account\n")
        out = isolated_config / "types"
        result = runner.invoke(
            app, ["create", "-c", str(batch), "-o", str(out), "--describe-dir", str(describe_dir)]
        )
        assert result.exit_code == 0, result.output
        module = (out / "sobjects.ts").read_text()
        assert module.index("interface Contact") < module.index("interface Account")

    def test_failed_describe_writes_nothing(
        self, runner: CliRunner, isolated_config: Path, describe_dir: Path
    ) -> None:
        batch = isolated_config / "sobjects.json"
        batch.write_text(json.dumps({"sobjects": ["Account", "Lead"]}))
        out = isolated_config / "types"
        result = runner.invoke(
            app, ["create", "-c", str(batch), "-o", str(out), "--describe-dir", str(describe_dir)]
        )
        assert result.exit_code == 4
        assert "Lead" in result.output
        assert not out.exists()


class TestCreateErrors:
    def test_missing_selection(self, runner: CliRunner, isolated_config: Path) -> None:
        result = runner.invoke(app, ["create", "-o", str(isolated_config / "types")])
        assert result.exit_code == 2
        assert "Please provide --sobject or --config." in result.output
        assert not (isolated_config / "types").exists()

    def test_missing_batch_file(self, runner: CliRunner, isolated_config: Path) -> None:
        result = runner.invoke(app, ["create", "-c", "nope.json"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_no_profile(self, runner: CliRunner, isolated_config: Path) -> None:
        result = runner.invoke(app, ["create", "-s", "Account"])
        assert result.exit_code == 1
        assert "No active profile" in result.output


class TestCreateOutputModes:
    def test_json_lists_written_files(
        self, runner: CliRunner, isolated_config: Path, describe_dir: Path
    ) -> None:
        out = isolated_config / "types"
        result = runner.invoke(
            app,
            ["--json", "-q", "create", "-s", "Account", "-o", str(out), "--describe-dir", str(describe_dir)],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "files": [
                str(out / "sobject.ts"),
                str(out / "sobjectTypes.ts"),
                str(out / "account.ts"),
            ]
        }

    def test_dry_run_prints_module_only(
        self, runner: CliRunner, isolated_config: Path, describe_dir: Path
    ) -> None:
        out = isolated_config / "types"
        result = runner.invoke(
            app,
            ["-q", "create", "-s", "Account", "-o", str(out), "--describe-dir", str(describe_dir), "--dry-run"],
        )
        assert result.exit_code == 0, result.output
        assert result.output.startswith(GENERATED_HEADER)
        assert "export interface Account extends SObject {" in result.output
        assert not out.exists()

    def test_plain_table(
        self, runner: CliRunner, isolated_config: Path, describe_dir: Path
    ) -> None:
        out = isolated_config / "types"
        result = runner.invoke(
            app,
            ["--plain", "-q", "create", "-s", "Account", "-o", str(out), "--describe-dir", str(describe_dir)],
        )
        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[0] == "Output file path"
        assert str(out / "account.ts") in result.output


class TestCreateFromOrg:
    def test_profile_and_http(
        self,
        runner: CliRunner,
        isolated_config: Path,
        monkeypatch: pytest.MonkeyPatch,
        account_raw: dict,
    ) -> None:
        monkeypatch.setenv("SF_ACCESS_TOKEN", "tok")
        result = runner.invoke(app, ["init", "-u", "https://acme.my.salesforce.com"])
        assert result.exit_code == 0, result.output

        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            return httpx.Response(200, json=account_raw)

        original_init = AsyncClient.__init__

        def _init(self, profile, cache=None, transport=None):
            original_init(self, profile, cache, httpx.MockTransport(handler))

        monkeypatch.setattr(AsyncClient, "__init__", _init)

        out = isolated_config / "types"
        result = runner.invoke(app, ["create", "-s", "Account", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert requested == ["/services/data/v59.0/sobjects/Account/describe/"]
        assert (out / "account.ts").is_file()

        # Second run is served from the describe cache.
        result = runner.invoke(app, ["create", "-s", "Account", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert len(requested) == 1

        result = runner.invoke(app, ["create", "-s", "Account", "-o", str(out), "--no-cache"])
        assert result.exit_code == 0, result.output
        assert len(requested) == 2


# ---------------------------------------------------------------------------
# init / inspect
# ---------------------------------------------------------------------------


class TestInit:
    def test_creates_profile_and_project_config(
        self, runner: CliRunner, isolated_config: Path
    ) -> None:
        result = runner.invoke(
            app,
            [
                "init", "-u", "https://acme--dev.sandbox.my.salesforce.com/",
                "--api-version", "60.0", "--token-source", "file:~/.sf/token",
            ],
        )
        assert result.exit_code == 0, result.output
        assert list_profiles() == ["acme-dev"]
        profile = load_profile("acme-dev")
        assert profile.instance_url == "https://acme--dev.sandbox.my.salesforce.com"
        assert profile.api_version == "60.0"
        assert profile.token_source == "file:~/.sf/token"
        assert load_project_config() == {"default_profile": "acme-dev"}

    def test_explicit_name(self, runner: CliRunner, isolated_config: Path) -> None:
        result = runner.invoke(app, ["init", "-u", "https://acme.my.salesforce.com", "-n", "prod"])
        assert result.exit_code == 0, result.output
        assert list_profiles() == ["prod"]

    def test_overwrite_is_reported(self, runner: CliRunner, isolated_config: Path) -> None:
        runner.invoke(app, ["init", "-u", "https://acme.my.salesforce.com"])
        result = runner.invoke(app, ["init", "-u", "https://acme.my.salesforce.com"])
        assert result.exit_code == 0
        assert "already exists" in result.output


class TestInspect:
    def test_fields(self, runner: CliRunner, isolated_config: Path, describe_dir: Path) -> None:
        result = runner.invoke(
            app, ["--plain", "inspect", "fields", "Account", "--describe-dir", str(describe_dir)]
        )
        assert result.exit_code == 0, result.output
        assert "Phone\tphone\tPhoneString\t\t" in result.output
        assert "OwnerId\treference\tID\tUser\tOwner" in result.output

    def test_children_json(self, runner: CliRunner, isolated_config: Path, describe_dir: Path) -> None:
        result = runner.invoke(
            app, ["--json", "inspect", "children", "Contact", "--describe-dir", str(describe_dir)]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [
            {"Relationship": "Cases", "Child sObject": "Case", "Junction references": ""},
            {
                "Relationship": "-",
                "Child sObject": "OpportunityContactRole",
                "Junction references": "Opportunity",
            },
        ]

    def test_unknown_object(self, runner: CliRunner, isolated_config: Path, describe_dir: Path) -> None:
        result = runner.invoke(
            app, ["inspect", "fields", "Lead", "--describe-dir", str(describe_dir)]
        )
        assert result.exit_code == 4


class TestVersion:
    def test_version(self, runner: CliRunner) -> None:
        from sftypes import __version__

        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
