"""Custom exception classes for tgimport."""

from typing import Optional


class TgImportError(Exception):
    """Base exception for all tgimport errors."""
    pass


class InputError(TgImportError):
    """Raised when the plan or modules input cannot be used."""
    pass


class InputIOError(InputError):
    """Raised when an input file is missing or unreadable."""
    pass


class InputParseError(InputError):
    """Raised when an input file is not valid JSON or has the wrong shape."""
    pass


class MappingError(TgImportError):
    """Raised when resources cannot be mapped to modules."""
    pass


class UnmatchedModuleError(MappingError):
    """Raised when a planned module address has no entry in the module manifest."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(
            f"Unmatched module address '{address}': no module in the manifest has key "
            f"'{address[len('module.'):] if address.startswith('module.') else address}'"
        )


class DuplicateResourceError(MappingError):
    """Raised when the same resource address appears twice in a plan."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Resource address '{address}' appears more than once in the plan")


class SchemaError(TgImportError):
    """Base class for provider schema acquisition failures."""
    pass


class SchemaIOError(SchemaError):
    """Raised when the schema file cannot be read/written or the tool cannot be spawned."""
    pass


class SchemaParseError(SchemaError):
    """Raised when the provider schema is not valid JSON."""
    pass


class SchemaToolFailedError(SchemaError):
    """Raised when the schema generating command exits with a non-zero status."""

    def __init__(self, status: int, stdout: str = "", stderr: str = ""):
        self.status = status
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"Schema command failed with status {status}: stdout={stdout.strip()}, stderr={stderr.strip()}"
        )


class ExecutionError(TgImportError):
    """Raised when an import command cannot be executed."""
    pass


class DirectoryNotFoundError(ExecutionError):
    """Raised when the working directory of an import command does not exist."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Working directory does not exist: {path}")


class ConfigError(TgImportError):
    """Raised when configuration is invalid or missing."""
    pass


class ReportError(TgImportError):
    """Raised when the run report cannot be written."""
    pass
