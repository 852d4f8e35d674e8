"""Import run - the default action of the tgimport command."""

import logging
import sys
from typing import Optional
import click
from ... import run_import
from ...presentation.progress import format_dry_run_banner, format_dry_run_summary, format_import_summary
from ...report.artifact import write_run_report
from ...utils.errors import TgImportError, InputError, MappingError
from ...utils.logging import get_logger, set_level
from ..utils import format_error, echo_safe, resolve_file_path

logger = get_logger("cli.run")

DEFAULT_PLAN_PATH = "tests/fixtures/out.json"
DEFAULT_MODULES_PATH = "tests/fixtures/modules.json"


def run_import_command(
    plan_path: str,
    modules_path: str,
    module_root: str,
    working_directory: str,
    provider: Optional[str],
    dry_run: bool,
    verbose: bool,
    skip_schema: bool,
    output: Optional[str],
    config_path: Optional[str],
) -> None:
    """Plan and run the imports, print the summary and optionally write a report."""
    try:
        if verbose:
            set_level(logging.DEBUG)
        
        try:
            plan_file = resolve_file_path(plan_path)
            modules_file = resolve_file_path(modules_path)
        except FileNotFoundError as e:
            click.echo(format_error(str(e), "Pass --plan and --modules with existing files."), err=True)
            sys.exit(1)
        
        if dry_run:
            click.echo(format_dry_run_banner(), err=True)
        
        result = run_import(
            str(plan_file),
            str(modules_file),
            module_root=module_root,
            working_directory=working_directory,
            provider=provider,
            dry_run=dry_run,
            verbose=verbose,
            skip_schema=skip_schema,
            config_path=config_path,
        )
        
        summary = format_dry_run_summary(result.stats) if dry_run else format_import_summary(result.stats)
        echo_safe(summary)
        
        if output:
            report_path = write_run_report(result.stats, result.plan, output, dry_run=dry_run)
            click.echo(f"Report saved to: {report_path}", err=True)
    
    except InputError as e:
        click.echo(format_error(str(e), "Generate the plan with: terragrunt show -json tf.plan > out.json"), err=True)
        sys.exit(1)
    except MappingError as e:
        click.echo(format_error(str(e), "Every module in the plan needs an entry in modules.json."), err=True)
        sys.exit(1)
    except TgImportError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Import failed: {e}"), err=True)
        sys.exit(1)
