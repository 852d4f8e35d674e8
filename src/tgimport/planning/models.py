"""Import command and plan records."""

from enum import Enum
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field


class SkipReason(str, Enum):
    """Why a planned resource produced no import command."""
    NO_MODULE_MAPPING = "no matching module mapping"
    NO_ID_INFERRED = "no id inferred"


class ImportCommand(BaseModel):
    """One resource to import, and where to run the import."""
    working_directory: Path = Field(..., description="Module root joined with the module's Dir")
    resource_address: str
    resource_id: str
    resource_type: str
    module_key: str

    class Config:
        """Pydantic config."""
        frozen = True


class SkippedResource(BaseModel):
    """A planned resource that will not be imported."""
    address: str
    resource_type: Optional[str] = None
    reason: SkipReason


class PlanEntry(BaseModel):
    """Outcome of planning one resource: exactly one of command or skipped is set."""
    address: str
    command: Optional[ImportCommand] = None
    skipped: Optional[SkippedResource] = None


class ImportPlan(BaseModel):
    """Commands and skips for a whole plan, in walk order."""
    commands: List[ImportCommand] = Field(default_factory=list)
    skipped: List[SkippedResource] = Field(default_factory=list)
    entries: List[PlanEntry] = Field(default_factory=list)

    def add_command(self, command: ImportCommand) -> None:
        self.commands.append(command)
        self.entries.append(PlanEntry(address=command.resource_address, command=command))

    def add_skip(self, skipped: SkippedResource) -> None:
        self.skipped.append(skipped)
        self.entries.append(PlanEntry(address=skipped.address, skipped=skipped))
