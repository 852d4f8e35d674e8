"""Sequential execution of import commands."""

import subprocess
import time
from typing import List, Optional
from .models import BatchResult, ImportResult, ImportStatus
from .stats import ImportStats
from ..planning.command_planner import build_command_string
from ..planning.models import ImportCommand, ImportPlan
from ..presentation.progress import ProgressOperation, print_import_progress
from ..utils.errors import DirectoryNotFoundError
from ..utils.logging import get_logger

logger = get_logger("execution.executor")

DEFAULT_TOOL = "terragrunt"


def _failure_message(command: ImportCommand, exit_code: int, stdout: str, stderr: str) -> str:
    output = stderr.strip() or stdout.strip() or "No error output captured"
    return f"Failed to import {command.resource_address} (exit code: {exit_code}): {output}"


class ImportExecutor:
    """Runs `<tool> import <address> <id>` for each command, one at a time."""

    def __init__(self, tool: str = DEFAULT_TOOL, timeout: Optional[float] = None):
        self.tool = tool
        self.timeout = timeout

    def dry_run_command(self, command: ImportCommand) -> ImportResult:
        """Describe a command without running anything."""
        return ImportResult(
            command=command,
            status=ImportStatus.DRY_RUN,
            command_string=build_command_string(command, self.tool),
        )

    def execute_command(self, command: ImportCommand) -> ImportResult:
        """
        Run one import command in its working directory.
        
        A non-zero exit, a spawn failure or a timeout produce a FAILED result
        rather than an exception.
        
        Raises:
            DirectoryNotFoundError: If the working directory does not exist
        """
        working_directory = command.working_directory
        if not working_directory.is_dir():
            raise DirectoryNotFoundError(str(working_directory))
        
        command_string = build_command_string(command, self.tool)
        args = [self.tool, "import", command.resource_address, command.resource_id]
        logger.debug(f"Running {' '.join(args)} in {working_directory}")
        
        start = time.monotonic()
        try:
            completed = subprocess.run(
                args,
                cwd=working_directory,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            duration_ms = int((time.monotonic() - start) * 1000)
            logger.debug(f"Could not run import for {command.resource_address}: {e}")
            return ImportResult(
                command=command,
                status=ImportStatus.FAILED,
                command_string=command_string,
                exit_code=-1,
                stderr=str(e),
                duration_ms=duration_ms,
                error_message=_failure_message(command, -1, "", str(e)),
            )
        duration_ms = int((time.monotonic() - start) * 1000)
        
        stdout = completed.stdout or ""
        stderr = completed.stderr or ""
        if completed.returncode == 0:
            return ImportResult(
                command=command,
                status=ImportStatus.SUCCESS,
                command_string=command_string,
                exit_code=0,
                stdout=stdout,
                stderr=stderr,
                duration_ms=duration_ms,
            )
        
        return ImportResult(
            command=command,
            status=ImportStatus.FAILED,
            command_string=command_string,
            exit_code=completed.returncode,
            stdout=stdout,
            stderr=stderr,
            duration_ms=duration_ms,
            error_message=_failure_message(command, completed.returncode, stdout, stderr),
        )

    def _execute_or_fail(self, command: ImportCommand) -> ImportResult:
        try:
            return self.execute_command(command)
        except DirectoryNotFoundError as e:
            return ImportResult(
                command=command,
                status=ImportStatus.FAILED,
                command_string=build_command_string(command, self.tool),
                error_message=str(e),
            )

    def execute_batch(self, commands: List[ImportCommand]) -> BatchResult:
        """Run every command in order; missing directories count as failures."""
        batch = BatchResult()
        start = time.monotonic()
        for command in commands:
            result = self._execute_or_fail(command)
            batch.total_executed += 1
            if result.status == ImportStatus.SUCCESS:
                batch.successful.append(result)
            else:
                batch.failed.append(result)
        batch.total_duration_ms = int((time.monotonic() - start) * 1000)
        logger.info(
            f"Executed {batch.total_executed} imports: "
            f"{len(batch.successful)} succeeded, {len(batch.failed)} failed"
        )
        return batch

    def dry_run_batch(self, commands: List[ImportCommand]) -> List[ImportResult]:
        return [self.dry_run_command(command) for command in commands]

    def run(self, import_plan: ImportPlan, dry_run: bool = False, verbose: bool = False) -> ImportStats:
        """
        Process a whole import plan in walk order, printing progress.
        
        Args:
            import_plan: Planned commands and skips
            dry_run: Print commands instead of running them
            verbose: Also print captured tool output
            
        Returns:
            ImportStats for the run
        """
        stats = ImportStats()
        
        for entry in import_plan.entries:
            print_import_progress(entry.address, ProgressOperation.CHECKING)
            
            if entry.skipped is not None:
                stats.record_skip(entry.skipped)
                print_import_progress(entry.address, ProgressOperation.SKIPPED, entry.skipped.reason.value)
                continue
            
            command = entry.command
            if dry_run:
                result = self.dry_run_command(command)
                stats.record_result(result)
                print_import_progress(entry.address, ProgressOperation.DRY_RUN, result.command_string)
                continue
            
            print_import_progress(entry.address, ProgressOperation.IMPORTING, command.resource_id)
            result = self._execute_or_fail(command)
            stats.record_result(result)
            
            if verbose and result.stdout.strip():
                print_import_progress(entry.address, ProgressOperation.OUTPUT, result.stdout.strip())
            
            if result.status == ImportStatus.SUCCESS:
                print_import_progress(entry.address, ProgressOperation.SUCCESS)
            else:
                print_import_progress(entry.address, ProgressOperation.FAILED, result.error_message)
        
        return stats
