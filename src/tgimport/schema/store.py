"""Load-or-generate provider schema cache with per-resource lookups."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union
from .generator import write_provider_schema, DEFAULT_TOOL, SCHEMA_FILENAME
from .metadata import AttributeMetadata, parse_attributes
from ..utils.errors import SchemaIOError, SchemaParseError
from ..utils.logging import get_logger

logger = get_logger("schema.store")


def provider_matches(wanted: str, key: str) -> bool:
    """
    True if a provider selector names the given schema key.
    
    "google" matches "registry.terraform.io/hashicorp/google" and the other
    way round; otherwise names must be equal.
    """
    if wanted == key:
        return True
    return wanted.rsplit("/", 1)[-1] == key.rsplit("/", 1)[-1]


class SchemaStore:
    """
    Provider schema for one working directory.
    
    The document is loaded lazily on the first call to load_or_generate()
    and cached until clear_cache().
    """

    def __init__(
        self,
        working_dir: Union[str, Path] = ".",
        tool: str = DEFAULT_TOOL,
        schema_filename: str = SCHEMA_FILENAME,
        timeout: Optional[float] = None,
    ):
        self.working_dir = Path(working_dir)
        self.tool = tool
        self.schema_filename = schema_filename
        self.timeout = timeout
        self._document: Optional[Dict[str, Any]] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any], working_dir: Union[str, Path] = ".") -> "SchemaStore":
        """Build a store around an already parsed schema document."""
        store = cls(working_dir)
        store._document = document
        return store

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SchemaStore":
        """Build a store from a schema JSON file, never invoking the tool."""
        path = Path(path)
        return cls.from_document(_read_schema_file(path), path.parent)

    @property
    def schema_path(self) -> Path:
        return self.working_dir / self.schema_filename

    def load_or_generate(self) -> Dict[str, Any]:
        """
        Return the schema document, reading or generating it on first use.
        
        Raises:
            SchemaIOError: If the file cannot be read or written, or the tool cannot start
            SchemaParseError: If the schema is not valid JSON
            SchemaToolFailedError: If the tool exits non-zero
        """
        if self._document is not None:
            return self._document
        
        if self.schema_path.exists():
            logger.debug(f"Using cached provider schema {self.schema_path}")
        else:
            write_provider_schema(self.working_dir, self.tool, self.schema_filename, self.timeout)
        
        self._document = _read_schema_file(self.schema_path)
        return self._document

    def has_cached_schema(self) -> bool:
        return self._document is not None

    def clear_cache(self) -> None:
        self._document = None

    def _provider_schemas(self) -> Dict[str, Any]:
        if self._document is None:
            return {}
        provider_schemas = self._document.get("provider_schemas")
        return provider_schemas if isinstance(provider_schemas, dict) else {}

    def list_providers(self) -> List[str]:
        """Provider keys in document order."""
        return list(self._provider_schemas().keys())

    def _resolve_provider(self, provider: Optional[str]) -> Optional[str]:
        providers = self.list_providers()
        if not providers:
            return None
        if provider is None:
            return providers[0]
        for key in providers:
            if key == provider:
                return key
        for key in providers:
            if provider_matches(provider, key):
                return key
        return None

    def _resource_schemas(self, provider: Optional[str]) -> Dict[str, Any]:
        key = self._resolve_provider(provider)
        if key is None:
            return {}
        provider_schema = self._provider_schemas().get(key)
        if not isinstance(provider_schema, dict):
            return {}
        resource_schemas = provider_schema.get("resource_schemas")
        return resource_schemas if isinstance(resource_schemas, dict) else {}

    def get_resource_schema(self, resource_type: str, provider: Optional[str] = None) -> Dict[str, AttributeMetadata]:
        """
        Attribute metadata for a resource type.
        
        Navigates provider_schemas.<provider>.resource_schemas.<type>.block.attributes.
        Any missing step yields an empty dict. With provider=None the first
        provider in the document is used.
        
        Args:
            resource_type: e.g. google_storage_bucket
            provider: Provider key, fully qualified or short
            
        Returns:
            Attribute name -> AttributeMetadata, in schema order
        """
        resource_schema = self._resource_schemas(provider).get(resource_type)
        if not isinstance(resource_schema, dict):
            return {}
        block = resource_schema.get("block")
        if not isinstance(block, dict):
            return {}
        return parse_attributes(block.get("attributes"))

    def list_resource_types(self) -> List[str]:
        """Sorted resource types across all providers."""
        types = set()
        for key in self.list_providers():
            types.update(self._resource_schemas(key).keys())
        return sorted(types)

    def extract_id_candidates(self, resource_type: str, provider: Optional[str] = None) -> Set[str]:
        """Attribute names declared for a resource type."""
        return set(self.get_resource_schema(resource_type, provider).keys())


def _read_schema_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaParseError(f"Failed to parse schema JSON in file {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaIOError(f"Failed to read schema file {path}: {e}")
    
    if not isinstance(document, dict):
        raise SchemaParseError(f"Schema file {path} must contain a JSON object")
    return document
