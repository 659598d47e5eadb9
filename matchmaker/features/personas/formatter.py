"""Serialization of the final assignment payload."""

from matchmaker.models.persona import ArchetypePersona, AssignmentResult, OutputJSON


def build_output(persona: ArchetypePersona, rationale: str, image_prompt: str) -> OutputJSON:
    return OutputJSON(
        assignment_result=AssignmentResult(
            assigned_persona=persona.name,
            rationale=rationale,
            core_trait_summary=persona.trait_summary,
        ),
        image_generation_prompt=image_prompt,
    )


def format_output(persona: ArchetypePersona, rationale: str, image_prompt: str) -> str:
    """
    Compact JSON with exactly two top-level keys and three nested keys.

    Output has no whitespace between tokens and non-ASCII stays unescaped,
    matching json.dumps(..., separators=(",", ":"), ensure_ascii=False).
    """
    return build_output(persona, rationale, image_prompt).model_dump_json()
