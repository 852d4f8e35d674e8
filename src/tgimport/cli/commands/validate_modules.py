"""Validate-modules command - check module directories exist."""

import sys
import click
from ...ingest.modules_loader import load_modules
from ...mapping.module_mapper import validate_module_dirs
from ...utils.errors import TgImportError
from ...utils.logging import get_logger
from ..utils import format_error
from .run import DEFAULT_MODULES_PATH

logger = get_logger("cli.validate_modules")


@click.command(name="validate-modules")
@click.option('--modules', 'modules_path', default=DEFAULT_MODULES_PATH, show_default=True,
              type=click.Path(), help='Terragrunt modules.json')
@click.option('--module-root', default=".", show_default=True, type=click.Path(),
              help='Directory the module Dir entries are relative to')
def validate_modules(modules_path, module_root):
    """Report modules whose directory is missing. Exits 1 if any is."""
    try:
        modules = load_modules(modules_path)
        problems = validate_module_dirs(modules, module_root)
        
        if problems:
            for problem in problems:
                click.echo(f"❌ {problem}", err=True)
            sys.exit(1)
        
        click.echo(f"✅ All {len(modules.modules)} module directories exist")
    
    except TgImportError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Module validation failed: {e}"), err=True)
        sys.exit(1)
