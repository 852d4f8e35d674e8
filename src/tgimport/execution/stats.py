"""Run statistics."""

from typing import List
from pydantic import BaseModel, Field
from .models import ImportResult, ImportStatus
from ..planning.models import SkippedResource


class ImportStats(BaseModel):
    """Counters and per-resource outcomes accumulated during a run."""
    imported: int = 0
    # Never incremented: state is not inspected before importing
    already_in_state: int = 0
    skipped: int = 0
    failed: int = 0
    dry_run: int = 0
    imported_resources: List[str] = Field(default_factory=list)
    dry_run_resources: List[str] = Field(default_factory=list)
    failed_resources: List[str] = Field(default_factory=list)
    skipped_resources: List[SkippedResource] = Field(default_factory=list)
    results: List[ImportResult] = Field(default_factory=list)

    def record_result(self, result: ImportResult) -> None:
        """Count one command outcome."""
        self.results.append(result)
        if result.status == ImportStatus.SUCCESS:
            self.imported += 1
            self.imported_resources.append(result.resource_address)
        elif result.status == ImportStatus.DRY_RUN:
            self.dry_run += 1
            self.dry_run_resources.append(result.resource_address)
        else:
            self.failed += 1
            self.failed_resources.append(result.resource_address)

    def record_skip(self, skipped: SkippedResource) -> None:
        self.skipped += 1
        self.skipped_resources.append(skipped)

    def total_processed(self) -> int:
        return self.imported + self.already_in_state + self.skipped + self.failed + self.dry_run
