"""tgimport - Import planned Terraform resources into their Terragrunt module state."""

from pathlib import Path
from typing import NamedTuple, Optional
from .config import Settings, load_settings
from .ingest.modules_loader import load_input_files
from .ingest.models import PlanFile
from .mapping.module_mapper import map_resources_to_modules, validate_module_dirs
from .planning.command_planner import plan_imports
from .planning.models import ImportPlan
from .execution.executor import ImportExecutor
from .execution.stats import ImportStats
from .schema.generator import run_init
from .schema.store import SchemaStore
from .scoring.strategies import ScoringConfig
from .utils.logging import setup_logging, get_logger
from .utils.errors import TgImportError, SchemaError

__version__ = "0.1.0"

__all__ = ["ImportRun", "prepare_import", "run_import"]

setup_logging()
logger = get_logger("tgimport")


def _schema_store(plan: PlanFile, working_directory: str, settings: Settings) -> Optional[SchemaStore]:
    """Provider schema from the working directory, else the plan's embedded schemas, else none."""
    if settings.run_init:
        run_init(working_directory, settings.tool, settings.timeout_seconds)
    
    store = SchemaStore(
        working_directory,
        tool=settings.tool,
        schema_filename=settings.schema_filename,
        timeout=settings.timeout_seconds,
    )
    try:
        store.load_or_generate()
        return store
    except SchemaError as e:
        logger.warning(f"Could not load provider schema from {working_directory}: {e}")
    
    if plan.provider_schemas is not None and plan.provider_schemas.provider_schemas:
        logger.info("Using provider schemas embedded in the plan")
        return SchemaStore.from_document(plan.provider_schemas.model_dump(), working_directory)
    
    logger.warning("No provider schema available, inferring ids from planned values")
    return None


def prepare_import(
    plan_path: str,
    modules_path: str,
    module_root: str = ".",
    working_directory: str = ".",
    provider: Optional[str] = None,
    skip_schema: bool = False,
    settings: Optional[Settings] = None,
) -> ImportPlan:
    """
    Load inputs, map resources to modules and plan the import commands.
    
    Raises:
        InputError: If the plan or modules file cannot be loaded
        MappingError: If a planned module has no descriptor
    """
    settings = settings or load_settings()
    logger.info(f"Preparing import of plan {plan_path} with modules {modules_path}")
    
    modules, plan = load_input_files(modules_path, plan_path)
    
    for problem in validate_module_dirs(modules, Path(module_root)):
        logger.warning(problem)
    
    mapping = map_resources_to_modules(modules, plan)
    store = None if skip_schema else _schema_store(plan, working_directory, settings)
    
    return plan_imports(
        plan,
        mapping,
        module_root,
        schema_store=store,
        provider=provider,
        config=ScoringConfig.from_settings(settings),
    )


class ImportRun(NamedTuple):
    """Outcome of run_import: the planned commands and the per-run counters."""
    plan: ImportPlan
    stats: ImportStats


def run_import(
    plan_path: str,
    modules_path: str,
    module_root: str = ".",
    working_directory: str = ".",
    provider: Optional[str] = None,
    dry_run: bool = False,
    verbose: bool = False,
    skip_schema: bool = False,
    config_path: Optional[str] = None,
) -> ImportRun:
    """
    Plan and execute (or dry-run) the imports for a plan.
    
    Raises:
        TgImportError: On any failure; unexpected errors are wrapped
    """
    try:
        settings = load_settings(config_path)
        import_plan = prepare_import(
            plan_path,
            modules_path,
            module_root=module_root,
            working_directory=working_directory,
            provider=provider,
            skip_schema=skip_schema,
            settings=settings,
        )
        executor = ImportExecutor(settings.tool, settings.timeout_seconds)
        stats = executor.run(import_plan, dry_run=dry_run, verbose=verbose)
        logger.info(f"Import run complete: {stats.total_processed()} resources processed")
        return ImportRun(import_plan, stats)
    
    except TgImportError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during import: {e}", exc_info=True)
        raise TgImportError(f"Import failed: {e}") from e
