"""Main CLI entry point for tgimport."""

import click
from .commands.run import run_import_command, DEFAULT_PLAN_PATH, DEFAULT_MODULES_PATH
from .commands.candidates import candidates
from .commands.validate_modules import validate_modules
from .commands.version import version as version_command
from .. import __version__
from ..utils.logging import get_logger

logger = get_logger("cli.main")


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tgimport", message="%(prog)s version %(version)s")
@click.option('--plan', 'plan_path', default=DEFAULT_PLAN_PATH, show_default=True, type=click.Path(),
              help='Terraform plan JSON (terragrunt show -json)')
@click.option('--modules', 'modules_path', default=DEFAULT_MODULES_PATH, show_default=True, type=click.Path(),
              help='Terragrunt modules.json')
@click.option('--module-root', default=".", show_default=True, type=click.Path(),
              help='Directory the module Dir entries are relative to')
@click.option('--working-directory', default=".", show_default=True, type=click.Path(),
              help='Directory to load or generate the provider schema in')
@click.option('--provider', help='Provider key to read schemas from (default: each resource\'s provider)')
@click.option('--dry-run', is_flag=True, help='Print import commands without running them')
@click.option('--verbose', is_flag=True, help='Debug logging and tool output')
@click.option('--skip-schema', is_flag=True, help='Infer ids from planned values only')
@click.option('--output', '-o', type=click.Path(), help='Write a JSON run report to this file')
@click.option('--config', 'config_path', type=click.Path(), help='Settings YAML file')
@click.pass_context
def cli(ctx, plan_path, modules_path, module_root, working_directory, provider,
        dry_run, verbose, skip_schema, output, config_path):
    """tgimport - Import planned resources into their Terragrunt module state."""
    if ctx.invoked_subcommand is not None:
        return
    run_import_command(
        plan_path=plan_path,
        modules_path=modules_path,
        module_root=module_root,
        working_directory=working_directory,
        provider=provider,
        dry_run=dry_run,
        verbose=verbose,
        skip_schema=skip_schema,
        output=output,
        config_path=config_path,
    )


cli.add_command(candidates)
cli.add_command(validate_modules)
cli.add_command(version_command)
