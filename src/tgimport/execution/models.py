"""Outcome records for executed import commands."""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from ..planning.models import ImportCommand


class ImportStatus(str, Enum):
    """Outcome of a single import command."""
    SUCCESS = "success"
    FAILED = "failed"
    DRY_RUN = "dry_run"


class ImportResult(BaseModel):
    """Result of running, or dry-running, one import command."""
    command: ImportCommand
    status: ImportStatus
    command_string: str
    exit_code: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    duration_ms: int = Field(0, ge=0)
    error_message: Optional[str] = None

    @property
    def resource_address(self) -> str:
        return self.command.resource_address


class BatchResult(BaseModel):
    """Aggregate of a sequential batch of imports."""
    successful: List[ImportResult] = Field(default_factory=list)
    failed: List[ImportResult] = Field(default_factory=list)
    total_executed: int = 0
    total_duration_ms: int = 0

    @property
    def results(self) -> List[ImportResult]:
        return self.successful + self.failed
