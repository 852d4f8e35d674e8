"""Identifier scoring strategies."""

from .strategies import (
    ProviderType,
    ScoringConfig,
    detect_provider_type,
    strategy_name,
    score_attribute,
    score_all_attributes,
    top_candidates,
)

__all__ = [
    "ProviderType",
    "ScoringConfig",
    "detect_provider_type",
    "strategy_name",
    "score_attribute",
    "score_all_attributes",
    "top_candidates",
]
