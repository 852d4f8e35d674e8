"""Pydantic models for the Terraform plan and the Terragrunt module manifest."""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field


class Resource(BaseModel):
    """A single planned resource."""
    address: str = Field(..., description="Fully qualified resource address, unique plan-wide")
    mode: str = Field(..., description="managed or data")
    type: str = Field(..., description="Resource type, e.g. google_storage_bucket")
    name: str = Field(..., description="Resource name within its module")
    provider_name: Optional[str] = Field(None, description="Provider that manages this resource")
    schema_version: Optional[int] = Field(None, description="Schema version for this resource type")
    values: Optional[Dict[str, Any]] = Field(None, description="Planned attribute values")
    sensitive_values: Optional[Any] = Field(None, description="Sensitive value markers (not consulted)")
    depends_on: Optional[List[str]] = Field(None, description="Explicit dependencies (not consulted)")


class PlannedModule(BaseModel):
    """A node of the planned module tree; the root has no address."""
    address: Optional[str] = Field(None, description="Module address, e.g. module.vpc")
    resources: Optional[List[Resource]] = Field(None, description="Resources declared in this module")
    child_modules: Optional[List["PlannedModule"]] = Field(None, description="Nested modules")


PlannedModule.model_rebuild()


class PlannedValues(BaseModel):
    """planned_values section of a plan."""
    root_module: PlannedModule


class ProviderSchema(BaseModel):
    """Schema definitions of one provider as embedded in a plan."""
    resource_schemas: Optional[Dict[str, Any]] = None


class ProviderSchemas(BaseModel):
    """Provider schemas keyed by provider name."""
    provider_schemas: Dict[str, ProviderSchema] = Field(default_factory=dict)


class PlanFile(BaseModel):
    """Top-level Terraform plan document (only the fields the importer consumes)."""
    format_version: str
    terraform_version: str
    variables: Optional[Dict[str, Any]] = None
    planned_values: Optional[PlannedValues] = None
    provider_schemas: Optional[ProviderSchemas] = None

    @property
    def root_module(self) -> Optional[PlannedModule]:
        """Root of the module tree, or None for a plan without planned values."""
        if self.planned_values is None:
            return None
        return self.planned_values.root_module


class ModuleDescriptor(BaseModel):
    """One module entry from modules.json."""
    key: str = Field(..., alias="Key", description="Stable module key; empty string is the root module")
    source: str = Field(..., alias="Source", description="Module source (recorded, not interpreted)")
    dir: str = Field(..., alias="Dir", description="Directory relative to the module root")

    class Config:
        """Pydantic config."""
        populate_by_name = True


class ModulesFile(BaseModel):
    """Top-level modules.json document."""
    modules: List[ModuleDescriptor] = Field(..., alias="Modules")

    class Config:
        """Pydantic config."""
        populate_by_name = True
