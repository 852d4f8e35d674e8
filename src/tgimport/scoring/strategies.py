"""Provider-aware scoring of attributes as import identifier candidates."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple
from ..schema.metadata import AttributeMetadata
from ..utils.logging import get_logger

logger = get_logger("scoring.strategies")

MIN_SCORE = 0.0
MAX_SCORE = 100.0

DEFAULT_PRIORITY_FIELDS = ["id", "name", "bucket", "self_link", "project"]


class ProviderType(str, Enum):
    """Cloud provider families with their own scoring tables."""
    GOOGLE_CLOUD = "google_cloud"
    AZURE = "azure"
    AWS = "aws"
    GENERIC = "generic"


@dataclass(frozen=True)
class NamePatterns:
    """Name-based base scores. Exact names win over suffixes, suffixes over substrings."""
    exact: Dict[str, float]
    suffixes: Tuple[Tuple[str, float], ...]
    contains: Tuple[Tuple[str, float], ...]
    default: float

    def score(self, name: str) -> float:
        if name in self.exact:
            return self.exact[name]
        for suffix, value in self.suffixes:
            if name.endswith(suffix):
                return value
        for fragment, value in self.contains:
            if fragment in name:
                return value
        return self.default


GOOGLE_PATTERNS = NamePatterns(
    exact={
        "self_link": 75.0,
        "id": 70.0,
        "name": 65.0,
        "repository_id": 65.0,
        "instance_id": 55.0,
        "cluster_name": 52.0,
        "project": 50.0,
        "bucket": 50.0,
        "location": 45.0,
        "region": 45.0,
        "zone": 45.0,
    },
    suffixes=(("_id", 60.0), ("_name", 55.0)),
    contains=(("identifier", 58.0), ("url", 40.0), ("link", 40.0)),
    default=30.0,
)

AZURE_PATTERNS = NamePatterns(
    exact={
        "resource_id": 95.0,
        "id": 90.0,
        "name": 85.0,
        "fqdn": 78.0,
        "resource_group_name": 70.0,
        "location": 65.0,
        "subscription_id": 60.0,
    },
    suffixes=(("_id", 80.0), ("_name", 75.0)),
    contains=(),
    default=50.0,
)

GENERIC_PATTERNS = NamePatterns(
    exact={"id": 90.0, "name": 85.0},
    suffixes=(("_id", 80.0), ("_name", 75.0)),
    contains=(
        ("identifier", 78.0),
        ("self", 70.0),
        ("link", 70.0),
        ("url", 70.0),
        ("region", 60.0),
        ("location", 60.0),
        ("zone", 60.0),
    ),
    default=50.0,
)

GOOGLE_OVERRIDES: Dict[str, Dict[str, float]] = {
    "google_artifact_registry_repository": {"repository_id": 20.0, "name": -10.0},
    "google_storage_bucket": {"name": 15.0, "bucket": 10.0},
    "google_compute_instance": {"instance_id": 20.0, "name": -5.0},
    "google_bigquery_dataset": {"dataset_id": 18.0},
    "google_bigquery_table": {"table_id": 18.0},
    "google_cloudfunctions_function": {"name": 12.0},
    "google_cloudfunctions2_function": {"name": 12.0},
    "google_pubsub_topic": {"name": 15.0},
    "google_pubsub_subscription": {"name": 15.0},
    "google_sql_database_instance": {"name": 15.0},
    "google_sql_database": {"name": 10.0},
    "google_container_cluster": {"name": 15.0},
    "google_container_node_pool": {"name": 10.0},
}

AZURE_OVERRIDES: Dict[str, Dict[str, float]] = {
    "azurerm_storage_account": {"name": 15.0},
    "azurerm_virtual_machine": {"name": 15.0},
    "azurerm_resource_group": {"name": 18.0},
    "azurerm_key_vault": {"name": 15.0},
    "azurerm_sql_database": {"name": 12.0},
    "azurerm_virtual_network": {"name": 12.0},
}


@dataclass(frozen=True)
class Strategy:
    """Scoring tables for one provider family."""
    name: str
    patterns: NamePatterns
    overrides: Dict[str, Dict[str, float]] = field(default_factory=dict)


GOOGLE_STRATEGY = Strategy("Google Cloud Platform", GOOGLE_PATTERNS, GOOGLE_OVERRIDES)
AZURE_STRATEGY = Strategy("Microsoft Azure", AZURE_PATTERNS, AZURE_OVERRIDES)
GENERIC_STRATEGY = Strategy("Generic", GENERIC_PATTERNS)

STRATEGIES = {
    ProviderType.GOOGLE_CLOUD: GOOGLE_STRATEGY,
    ProviderType.AZURE: AZURE_STRATEGY,
    ProviderType.AWS: GENERIC_STRATEGY,
    ProviderType.GENERIC: GENERIC_STRATEGY,
}


@dataclass
class ScoringConfig:
    """Tunables for identifier scoring (from config or defaults)."""
    priority_fields: List[str] = field(default_factory=lambda: list(DEFAULT_PRIORITY_FIELDS))
    overrides: Dict[str, Dict[str, float]] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings) -> "ScoringConfig":
        """Build from a tgimport.config.Settings instance."""
        return cls(priority_fields=list(settings.priority_fields), overrides=dict(settings.overrides))


def detect_provider_type(resource_type: str) -> ProviderType:
    """Pick the provider family from the resource type prefix."""
    if resource_type.startswith(("google_", "gcp_")):
        return ProviderType.GOOGLE_CLOUD
    if resource_type.startswith(("azurerm_", "azure_")):
        return ProviderType.AZURE
    if resource_type.startswith("aws_"):
        return ProviderType.AWS
    return ProviderType.GENERIC


def strategy_name(provider_type: ProviderType) -> str:
    """Human-readable name of the strategy used for a provider family."""
    return STRATEGIES[provider_type].name


def resource_override(
    resource_type: str,
    name: str,
    provider_type: ProviderType,
    config: Optional[ScoringConfig] = None,
) -> float:
    """Per-resource delta; configured deltas replace the built-in ones."""
    if config is not None:
        configured = config.overrides.get(resource_type, {})
        if name in configured:
            return configured[name]
    return STRATEGIES[provider_type].overrides.get(resource_type, {}).get(name, 0.0)


def score_attribute(
    name: str,
    metadata: Optional[AttributeMetadata],
    resource_type: str,
    provider_type: Optional[ProviderType] = None,
    config: Optional[ScoringConfig] = None,
) -> float:
    """
    Score one attribute as an identifier candidate.
    
    The score is the provider's name-pattern base, plus metadata bonuses
    (required, computed, string type, description keywords), plus any
    per-resource override, clamped to [0, 100]. Without metadata only the
    name pattern and overrides count.
    
    Args:
        name: Attribute name
        metadata: Schema metadata, or None in the schema-free path
        resource_type: Resource type, e.g. google_storage_bucket
        provider_type: Provider family; detected from resource_type if None
        config: Optional scoring configuration
        
    Returns:
        Score in [0, 100]
    """
    if provider_type is None:
        provider_type = detect_provider_type(resource_type)
    strategy = STRATEGIES[provider_type]
    
    score = strategy.patterns.score(name)
    if metadata is not None:
        score += metadata.metadata_bonus()
    score += resource_override(resource_type, name, provider_type, config)
    
    return max(MIN_SCORE, min(MAX_SCORE, score))


def score_all_attributes(
    attributes: Dict[str, Optional[AttributeMetadata]],
    resource_type: str,
    provider_type: Optional[ProviderType] = None,
    config: Optional[ScoringConfig] = None,
) -> List[Tuple[str, float]]:
    """
    Score every attribute and sort by descending score.
    
    The sort is stable, so equal scores keep the attributes' own order.
    """
    if provider_type is None:
        provider_type = detect_provider_type(resource_type)
    scored = [
        (name, score_attribute(name, metadata, resource_type, provider_type, config))
        for name, metadata in attributes.items()
    ]
    scored.sort(key=lambda item: item[1], reverse=True)
    return scored


def top_candidates(
    attributes: Dict[str, Optional[AttributeMetadata]],
    resource_type: str,
    limit: int = 5,
    provider_type: Optional[ProviderType] = None,
    config: Optional[ScoringConfig] = None,
) -> List[str]:
    """Names of the highest scoring attributes, best first."""
    ranked = score_all_attributes(attributes, resource_type, provider_type, config)
    return [name for name, _ in ranked[:limit]]
