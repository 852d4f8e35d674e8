"""Infer the import identifier of a planned resource."""

from typing import Any, Dict, List, Optional
from ..ingest.models import Resource
from ..schema.metadata import AttributeMetadata
from ..scoring.strategies import ScoringConfig, detect_provider_type, score_all_attributes
from ..utils.logging import get_logger

logger = get_logger("analysis.id_inference")


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def value_candidates(values: Dict[str, Any]) -> Dict[str, None]:
    """Keys of values whose value is a JSON scalar, in document order."""
    return {key: None for key, value in values.items() if _is_scalar(value)}


def rank_candidates(
    resource: Resource,
    schema: Optional[Dict[str, AttributeMetadata]] = None,
    config: Optional[ScoringConfig] = None,
) -> List[str]:
    """
    Candidate attribute names for a resource, best first.
    
    With a non-empty schema every declared attribute is ranked by score.
    Without one, the scalar keys of the planned values are ranked by name
    and the configured priority fields (id, name, bucket, self_link,
    project by default) are moved to the front in that order.
    """
    config = config or ScoringConfig()
    provider_type = detect_provider_type(resource.type)
    
    if schema:
        ranked = score_all_attributes(schema, resource.type, provider_type, config)
        return [name for name, _ in ranked]
    
    candidates = value_candidates(resource.values or {})
    ranked = [name for name, _ in score_all_attributes(candidates, resource.type, provider_type, config)]
    promoted = [name for name in config.priority_fields if name in candidates]
    return promoted + [name for name in ranked if name not in promoted]


def infer_resource_id(
    resource: Resource,
    schema: Optional[Dict[str, AttributeMetadata]] = None,
    config: Optional[ScoringConfig] = None,
) -> Optional[str]:
    """
    Pick the identifier to import a resource with.
    
    The first ranked candidate whose planned value is a non-empty string
    wins. Numbers and booleans are never used.
    
    Args:
        resource: Planned resource
        schema: Attribute metadata for the resource type (empty or None for none)
        config: Optional scoring configuration
        
    Returns:
        Identifier string, or None if no candidate has a usable value
    """
    values = resource.values or {}
    for name in rank_candidates(resource, schema, config):
        value = values.get(name)
        if isinstance(value, str) and value:
            logger.debug(f"Inferred id for {resource.address} from '{name}': {value}")
            return value
    
    logger.debug(f"No id could be inferred for {resource.address}")
    return None
