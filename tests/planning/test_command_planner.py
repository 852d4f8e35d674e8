"""Tests for import command planning."""

from pathlib import Path
from unittest.mock import MagicMock
import pytest
from tgimport.ingest.models import ModulesFile, PlanFile
from tgimport.mapping.module_mapper import map_resources_to_modules
from tgimport.planning.command_planner import plan_imports, build_command_string, generate_import_commands
from tgimport.planning.models import ImportCommand, SkipReason
from tgimport.schema.store import SchemaStore
from tgimport.utils.errors import SchemaIOError, UnmatchedModuleError


@pytest.fixture
def manifest(single_module_manifest_data):
    return ModulesFile.model_validate(single_module_manifest_data)


def _prepare(plan_data, manifest):
    plan = PlanFile.model_validate(plan_data)
    return plan, map_resources_to_modules(manifest, plan)


class TestPlanImports:
    """Test the mapping x identifier planning step."""
    
    def test_single_bucket(self, single_module_plan_data, manifest, tmp_path):
        """Test a mapped bucket with a name becomes one command."""
        plan, mapping = _prepare(single_module_plan_data, manifest)
        
        import_plan = plan_imports(plan, mapping, tmp_path)
        
        assert import_plan.skipped == []
        assert len(import_plan.commands) == 1
        command = import_plan.commands[0]
        assert command.working_directory == tmp_path / "modules/a"
        assert command.resource_address == "module.a.google_storage_bucket.b"
        assert command.resource_id == "my-bucket"
        assert command.module_key == "a"
        assert command.resource_type == "google_storage_bucket"
    
    def test_no_id_inferred(self, single_module_plan_data, manifest, tmp_path):
        """Test a mapped resource without values is skipped, not failed."""
        resource = single_module_plan_data["planned_values"]["root_module"]["child_modules"][0]["resources"][0]
        resource["values"] = {}
        plan, mapping = _prepare(single_module_plan_data, manifest)
        
        import_plan = plan_imports(plan, mapping, tmp_path)
        
        assert import_plan.commands == []
        assert len(import_plan.skipped) == 1
        assert import_plan.skipped[0].address == "module.a.google_storage_bucket.b"
        assert import_plan.skipped[0].reason == SkipReason.NO_ID_INFERRED
        assert import_plan.skipped[0].reason.value == "no id inferred"
    
    def test_unmatched_module_aborts(self, single_module_plan_data, manifest):
        """Test planning never starts when a module is not in the manifest."""
        single_module_plan_data["planned_values"]["root_module"]["child_modules"][0]["address"] = "module.zzz"
        with pytest.raises(UnmatchedModuleError, match="module.zzz"):
            _prepare(single_module_plan_data, manifest)
    
    def test_root_resources_skipped(self, single_module_plan_data, manifest, tmp_path):
        """Test unmapped root resources are skipped with the mapping reason."""
        single_module_plan_data["planned_values"]["root_module"]["resources"] = [{
            "address": "google_project_service.svc",
            "mode": "managed",
            "type": "google_project_service",
            "name": "svc",
            "values": {"service": "compute.googleapis.com"},
        }]
        plan, mapping = _prepare(single_module_plan_data, manifest)
        
        import_plan = plan_imports(plan, mapping, tmp_path)
        
        assert [e.address for e in import_plan.entries] == [
            "google_project_service.svc",
            "module.a.google_storage_bucket.b",
        ]
        assert import_plan.entries[0].skipped.reason == SkipReason.NO_MODULE_MAPPING
        assert import_plan.entries[1].command.resource_id == "my-bucket"
    
    def test_uses_schema_store(self, single_module_plan_data, manifest, tmp_path):
        """Test schema lookups use each resource's provider."""
        resource = single_module_plan_data["planned_values"]["root_module"]["child_modules"][0]["resources"][0]
        resource["provider_name"] = "registry.terraform.io/hashicorp/google"
        resource["values"] = {"name": "my-bucket", "self_link": "https://storage/my-bucket"}
        plan, mapping = _prepare(single_module_plan_data, manifest)
        store = SchemaStore.from_document({"provider_schemas": {
            "registry.terraform.io/hashicorp/random": {"resource_schemas": {}},
            "registry.terraform.io/hashicorp/google": {"resource_schemas": {"google_storage_bucket": {"block": {
                "attributes": {
                    "self_link": {"type": "string", "computed": True},
                    "name": {"type": "string", "optional": True},
                },
            }}}},
        }})
        
        import_plan = plan_imports(plan, mapping, tmp_path, schema_store=store)
        
        # self_link: 75 + 10 + 5 = 90; name: 65 + 5 + 15 = 85
        assert import_plan.commands[0].resource_id == "https://storage/my-bucket"
    
    def test_explicit_provider(self, single_module_plan_data, manifest, tmp_path):
        """Test an explicit provider overrides the resource's provider."""
        plan, mapping = _prepare(single_module_plan_data, manifest)
        store = MagicMock(spec=SchemaStore)
        store.get_resource_schema.return_value = {}
        
        plan_imports(plan, mapping, tmp_path, schema_store=store, provider="google")
        
        store.get_resource_schema.assert_called_once_with("google_storage_bucket", "google")
    
    def test_schema_failure_falls_back(self, single_module_plan_data, manifest, tmp_path):
        """Test a failing store degrades to the values path and is asked only once."""
        plan_data = single_module_plan_data
        module = plan_data["planned_values"]["root_module"]["child_modules"][0]
        module["resources"].append({
            "address": "module.a.google_pubsub_topic.t",
            "mode": "managed",
            "type": "google_pubsub_topic",
            "name": "t",
            "values": {"name": "events"},
        })
        plan, mapping = _prepare(plan_data, manifest)
        store = MagicMock(spec=SchemaStore)
        store.load_or_generate.side_effect = SchemaIOError("cannot spawn terragrunt")
        
        import_plan = plan_imports(plan, mapping, tmp_path, schema_store=store)
        
        assert [c.resource_id for c in import_plan.commands] == ["my-bucket", "events"]
        store.load_or_generate.assert_called_once()
        store.get_resource_schema.assert_not_called()


class TestCommandStrings:
    """Test command rendering."""
    
    def test_build_command_string(self):
        """Test the display form of an import command."""
        command = ImportCommand(
            working_directory=Path("/work/modules/a"),
            resource_address="module.a.google_storage_bucket.b",
            resource_id="my-bucket",
            resource_type="google_storage_bucket",
            module_key="a",
        )
        assert build_command_string(command) == (
            "terragrunt import -config-dir=/work/modules/a module.a.google_storage_bucket.b my-bucket"
        )
        assert build_command_string(command, "terraform").startswith("terraform import")
    
    def test_generate_import_commands(self, fixtures_dir):
        """Test command strings for the sample plan."""
        manifest = ModulesFile.model_validate_json((fixtures_dir / "modules.json").read_text())
        plan = PlanFile.model_validate_json((fixtures_dir / "out.json").read_text())
        mapping = map_resources_to_modules(manifest, plan)
        
        commands = generate_import_commands(plan, mapping, "/infra")
        
        assert commands == [
            "terragrunt import -config-dir=/infra/modules/storage "
            "module.storage.google_storage_bucket.assets demo-assets",
            "terragrunt import -config-dir=/infra/modules/registry "
            "module.registry.google_artifact_registry_repository.images images",
        ]
