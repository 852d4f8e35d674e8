"""Turn mapped resources and inferred identifiers into import commands."""

from pathlib import Path
from typing import Dict, List, Optional, Union
from .models import ImportCommand, ImportPlan, SkippedResource, SkipReason
from ..analysis.id_inference import infer_resource_id
from ..ingest.models import ModuleDescriptor, PlanFile, Resource
from ..mapping.walker import walk_resources
from ..schema.metadata import AttributeMetadata
from ..schema.store import SchemaStore
from ..scoring.strategies import ScoringConfig
from ..utils.errors import SchemaError
from ..utils.logging import get_logger

logger = get_logger("planning.command_planner")

DEFAULT_TOOL = "terragrunt"


class _SchemaLookup:
    """Resource schema lookups that stop consulting the store after it fails once."""

    def __init__(self, store: Optional[SchemaStore], provider: Optional[str]):
        self.store = store
        self.provider = provider

    def get(self, resource: Resource) -> Dict[str, AttributeMetadata]:
        if self.store is None:
            return {}
        try:
            self.store.load_or_generate()
        except SchemaError as e:
            logger.warning(f"Provider schema unavailable, falling back to planned values: {e}")
            self.store = None
            return {}
        return self.store.get_resource_schema(resource.type, self.provider or resource.provider_name)


def plan_imports(
    plan: PlanFile,
    mapping: Dict[str, ModuleDescriptor],
    module_root: Union[str, Path],
    schema_store: Optional[SchemaStore] = None,
    provider: Optional[str] = None,
    config: Optional[ScoringConfig] = None,
) -> ImportPlan:
    """
    Build the import plan for every resource in the plan tree.
    
    Unmapped resources are skipped with NO_MODULE_MAPPING, mapped resources
    without a usable identifier with NO_ID_INFERRED. Everything else becomes
    an ImportCommand whose working directory is module_root / descriptor.dir.
    
    Args:
        plan: Decoded plan
        mapping: Resource address -> module descriptor
        module_root: Directory the descriptors' Dir values are relative to
        schema_store: Optional provider schema source; failures degrade to no schema
        provider: Provider key to look schemas up under (default: each resource's provider)
        config: Optional scoring configuration
        
    Returns:
        ImportPlan with commands and skips in walk order
    """
    import_plan = ImportPlan()
    lookup = _SchemaLookup(schema_store, provider)
    
    for walked in walk_resources(plan.root_module):
        resource = walked.resource
        descriptor = mapping.get(resource.address)
        if descriptor is None:
            import_plan.add_skip(SkippedResource(
                address=resource.address,
                resource_type=resource.type,
                reason=SkipReason.NO_MODULE_MAPPING,
            ))
            continue
        
        resource_id = infer_resource_id(resource, lookup.get(resource), config)
        if resource_id is None:
            import_plan.add_skip(SkippedResource(
                address=resource.address,
                resource_type=resource.type,
                reason=SkipReason.NO_ID_INFERRED,
            ))
            continue
        
        import_plan.add_command(ImportCommand(
            working_directory=Path(module_root) / descriptor.dir,
            resource_address=resource.address,
            resource_id=resource_id,
            resource_type=resource.type,
            module_key=descriptor.key,
        ))
    
    logger.info(
        f"Planned {len(import_plan.commands)} imports, skipped {len(import_plan.skipped)} resources"
    )
    return import_plan


def build_command_string(command: ImportCommand, tool: str = DEFAULT_TOOL) -> str:
    """Display form of an import command."""
    return (
        f"{tool} import -config-dir={command.working_directory} "
        f"{command.resource_address} {command.resource_id}"
    )


def generate_import_commands(
    plan: PlanFile,
    mapping: Dict[str, ModuleDescriptor],
    module_root: Union[str, Path],
    schema_store: Optional[SchemaStore] = None,
    provider: Optional[str] = None,
    config: Optional[ScoringConfig] = None,
    tool: str = DEFAULT_TOOL,
) -> List[str]:
    """Plan imports and return their command strings."""
    import_plan = plan_imports(plan, mapping, module_root, schema_store, provider, config)
    return [build_command_string(command, tool) for command in import_plan.commands]
