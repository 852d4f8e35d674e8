"""Identifier inference."""

from .id_inference import infer_resource_id, rank_candidates

__all__ = ["infer_resource_id", "rank_candidates"]
