"""
Monster persona assignment.

Deterministic pipeline that maps five quiz answers to one of fifteen
archetypes, explains the match and builds an image-generation prompt.
No network calls, no randomness, no shared mutable state.
"""

from matchmaker.features.personas.catalog import PersonaCatalog, default_catalog
from matchmaker.features.personas.correlator import correlate, rank_personas, score_persona
from matchmaker.features.personas.formatter import format_output
from matchmaker.features.personas.image_prompt import build_image_prompt
from matchmaker.features.personas.pipeline import process_pipeline
from matchmaker.features.personas.rationale import generate_rationale
from matchmaker.features.personas.scorer import score_traits
from matchmaker.features.personas.validator import validate

__all__ = [
    "PersonaCatalog",
    "default_catalog",
    "validate",
    "score_traits",
    "correlate",
    "rank_personas",
    "score_persona",
    "generate_rationale",
    "build_image_prompt",
    "format_output",
    "process_pipeline",
]
