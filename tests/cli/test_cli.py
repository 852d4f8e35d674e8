"""Tests for the tgimport CLI."""

import json
import subprocess
from unittest.mock import patch
import pytest
from click.testing import CliRunner
from tgimport.cli.main import cli


@pytest.fixture
def workspace(tmp_path, single_module_plan_data, single_module_manifest_data):
    """Plan, manifest and module directory in a temporary directory."""
    plan_path = tmp_path / "out.json"
    plan_path.write_text(json.dumps(single_module_plan_data))
    modules_path = tmp_path / "modules.json"
    modules_path.write_text(json.dumps(single_module_manifest_data))
    (tmp_path / "modules" / "a").mkdir(parents=True)
    return tmp_path


def _args(workspace, *extra):
    return [
        "--plan", str(workspace / "out.json"),
        "--modules", str(workspace / "modules.json"),
        "--module-root", str(workspace),
        "--working-directory", str(workspace),
        *extra,
    ]


class TestImportRun:
    """Test the default import action."""
    
    def test_dry_run(self, workspace):
        """Test a dry run prints the command and the dry-run summary."""
        runner = CliRunner()
        with patch("tgimport.execution.executor.subprocess.run") as mock_run:
            result = runner.invoke(cli, _args(workspace, "--dry-run", "--skip-schema"))
        
        assert result.exit_code == 0, result.output
        mock_run.assert_not_called()
        expected = (
            f"terragrunt import -config-dir={workspace / 'modules' / 'a'} "
            "module.a.google_storage_bucket.b my-bucket"
        )
        assert expected in result.output
        assert "Would import: 1" in result.output
    
    def test_live_run_with_report(self, workspace):
        """Test a live run imports and writes the report."""
        report_path = workspace / "report.json"
        runner = CliRunner()
        with patch("tgimport.execution.executor.subprocess.run",
                   return_value=subprocess.CompletedProcess([], 0, "Import successful!", "")) as mock_run:
            result = runner.invoke(cli, _args(workspace, "--skip-schema", "--output", str(report_path)))
        
        assert result.exit_code == 0, result.output
        assert mock_run.call_args[0][0] == [
            "terragrunt", "import", "module.a.google_storage_bucket.b", "my-bucket",
        ]
        assert "Imported:         1" in result.output
        report = json.loads(report_path.read_text())
        assert report["summary"]["imported"] == 1
    
    def test_failed_import_still_exits_zero(self, workspace):
        """Test a completed run with failures exits 0."""
        runner = CliRunner()
        with patch("tgimport.execution.executor.subprocess.run",
                   return_value=subprocess.CompletedProcess([], 1, "", "Error: Cannot import")):
            result = runner.invoke(cli, _args(workspace, "--skip-schema"))
        
        assert result.exit_code == 0
        assert "Failed:           1" in result.output
    
    def test_uses_cached_schema(self, workspace):
        """Test the schema file in the working directory drives inference."""
        (workspace / ".terragrunt-provider-schema.json").write_text(json.dumps({"provider_schemas": {
            "registry.terraform.io/hashicorp/google": {"resource_schemas": {"google_storage_bucket": {"block": {
                "attributes": {"name": {"type": "string", "required": True}},
            }}}},
        }}))
        runner = CliRunner()
        with patch("tgimport.execution.executor.subprocess.run") as mock_run:
            result = runner.invoke(cli, _args(workspace, "--dry-run"))
        
        assert result.exit_code == 0, result.output
        mock_run.assert_not_called()
        assert "my-bucket" in result.output
    
    def test_missing_plan_file(self, workspace):
        """Test a missing plan exits 1."""
        runner = CliRunner()
        result = runner.invoke(cli, [
            "--plan", str(workspace / "nope.json"),
            "--modules", str(workspace / "modules.json"),
        ])
        assert result.exit_code == 1
        assert "File not found" in result.output
    
    def test_malformed_plan(self, workspace):
        """Test a plan that is not JSON exits 1."""
        (workspace / "out.json").write_text("not json")
        runner = CliRunner()
        result = runner.invoke(cli, _args(workspace, "--skip-schema", "--dry-run"))
        assert result.exit_code == 1
        assert "Failed to parse plan JSON" in result.output
    
    def test_malformed_module_tree(self, workspace):
        """Test a badly shaped module tree is a parse error, not a crash."""
        (workspace / "out.json").write_text(json.dumps({
            "format_version": "1.2",
            "terraform_version": "1.6.6",
            "planned_values": {"root_module": {"child_modules": ["oops"]}},
        }))
        runner = CliRunner()
        result = runner.invoke(cli, _args(workspace, "--skip-schema", "--dry-run"))
        assert result.exit_code == 1
        assert "Failed to parse plan JSON" in result.output
    
    def test_dry_run_banner_ascii(self, workspace, monkeypatch):
        """Test TGIMPORT_ASCII applies to the dry-run notice."""
        monkeypatch.setenv("TGIMPORT_ASCII", "1")
        runner = CliRunner()
        result = runner.invoke(cli, _args(workspace, "--dry-run", "--skip-schema"))
        
        assert result.exit_code == 0, result.output
        assert "[DRY] Dry run: no import will be executed" in result.output
        assert "\U0001f33f" not in result.output
    
    def test_unmatched_module(self, workspace, single_module_plan_data):
        """Test a module missing from the manifest exits 1 and names it."""
        single_module_plan_data["planned_values"]["root_module"]["child_modules"][0]["address"] = "module.zzz"
        (workspace / "out.json").write_text(json.dumps(single_module_plan_data))
        runner = CliRunner()
        result = runner.invoke(cli, _args(workspace, "--skip-schema", "--dry-run"))
        
        assert result.exit_code == 1
        assert "module.zzz" in result.output
    
    def test_invalid_config(self, workspace):
        """Test a bad config file exits 1."""
        config_path = workspace / "config.yaml"
        config_path.write_text("tool:\n  timeout_seconds: -5\n")
        runner = CliRunner()
        result = runner.invoke(cli, _args(workspace, "--skip-schema", "--config", str(config_path)))
        assert result.exit_code == 1
        assert "timeout_seconds" in result.output
    
    def test_fixture_defaults(self, fixtures_dir, monkeypatch):
        """Test the default paths point at the sample fixtures."""
        monkeypatch.chdir(fixtures_dir.parent.parent)
        runner = CliRunner()
        result = runner.invoke(cli, ["--dry-run", "--skip-schema"])
        
        assert result.exit_code == 0, result.output
        assert "Would import: 2" in result.output
        assert "Would skip:   2" in result.output


class TestSubcommands:
    """Test auxiliary subcommands."""
    
    def test_version(self):
        """Test version command and option."""
        runner = CliRunner()
        assert "tgimport version 0.1.0" in runner.invoke(cli, ["version"]).output
        assert "0.1.0" in runner.invoke(cli, ["--version"]).output
    
    def test_candidates_json(self, tmp_path):
        """Test ranking candidates from a schema file."""
        schema_path = tmp_path / "schema.json"
        schema_path.write_text(json.dumps({"provider_schemas": {"google": {"resource_schemas": {
            "google_artifact_registry_repository": {"block": {"attributes": {
                "name": {"type": "string", "required": True},
                "repository_id": {"type": "string", "required": True},
                "labels": {"type": ["map", "string"], "optional": True},
            }}},
        }}}}))
        runner = CliRunner()
        result = runner.invoke(cli, [
            "candidates", str(schema_path), "--resource-type", "google_artifact_registry_repository", "--json",
        ])
        
        assert result.exit_code == 0, result.output
        ranking = json.loads(result.stdout)
        entries = ranking["google_artifact_registry_repository"]
        assert entries[0]["attribute"] == "repository_id"
        assert entries[0]["potential_id"] is True
        assert entries[-1]["attribute"] == "labels"
    
    def test_candidates_text(self, tmp_path):
        """Test the text listing for all resource types."""
        schema_path = tmp_path / "schema.json"
        schema_path.write_text(json.dumps({"provider_schemas": {"azurerm": {"resource_schemas": {
            "azurerm_resource_group": {"block": {"attributes": {"name": {"type": "string", "required": True}}}},
        }}}}))
        runner = CliRunner()
        result = runner.invoke(cli, ["candidates", str(schema_path), "--limit", "1"])
        
        assert result.exit_code == 0, result.output
        assert "azurerm_resource_group (Microsoft Azure)" in result.output
        assert "name" in result.output
    
    def test_candidates_unknown_type(self, tmp_path):
        """Test an unknown resource type exits 1."""
        schema_path = tmp_path / "schema.json"
        schema_path.write_text(json.dumps({"provider_schemas": {}}))
        runner = CliRunner()
        result = runner.invoke(cli, ["candidates", str(schema_path), "-t", "google_nothing"])
        assert result.exit_code == 1
    
    def test_validate_modules(self, workspace):
        """Test directory validation passes and fails."""
        runner = CliRunner()
        ok = runner.invoke(cli, [
            "validate-modules", "--modules", str(workspace / "modules.json"), "--module-root", str(workspace),
        ])
        assert ok.exit_code == 0
        assert "All 1 module directories exist" in ok.output
        
        missing = runner.invoke(cli, [
            "validate-modules", "--modules", str(workspace / "modules.json"), "--module-root", str(workspace / "elsewhere"),
        ])
        assert missing.exit_code == 1
        assert "Missing or invalid directory" in missing.output
