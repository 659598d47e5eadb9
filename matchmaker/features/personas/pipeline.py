"""
Assignment Pipeline — Fail-Fast Stage Orchestration

Stages run in strict order, each consuming only the previous stage's output
plus the catalog:

    validate -> score -> correlate -> rationale -> prompt -> format

The first failure halts the run. This is the only place that converts
unexpected stage exceptions into a Failure; nothing escapes process_pipeline.
"""

from typing import Any, Callable, Optional

from matchmaker.core.errors import StageExecutionError
from matchmaker.core.logging import log_event, stage_timer
from matchmaker.features.personas.catalog import PersonaCatalog, default_catalog
from matchmaker.features.personas.correlator import correlate
from matchmaker.features.personas.formatter import format_output
from matchmaker.features.personas.image_prompt import build_image_prompt
from matchmaker.features.personas.rationale import DEFAULT_MAX_WORDS, generate_rationale
from matchmaker.features.personas.scorer import score_traits
from matchmaker.features.personas.validator import validate
from matchmaker.models.result import Failure, PipelineStage, Result, Success


def _run_stage(stage: PipelineStage, fn: Callable[..., Any], *args, **kwargs) -> Any:
    """Run one stage, re-raising any failure as a stage-qualified StageExecutionError."""
    try:
        with stage_timer(stage.value):
            return fn(*args, **kwargs)
    except Exception as e:
        message = f"{stage.failure_prefix}: {e}"
        log_event(
            "error",
            "pipeline.stage.failed",
            request_id=None,
            stage=stage.value,
            error_code=getattr(e, "code", type(e).__name__),
            extra={"error_message": message},
        )
        raise StageExecutionError(message, stage=stage.value) from e


def process_pipeline(
    raw_input: Any,
    catalog: Optional[PersonaCatalog] = None,
    *,
    max_words: int = DEFAULT_MAX_WORDS,
) -> Result[str]:
    """
    Assign a persona and serialize the full OutputJSON.

    Args:
        raw_input: untrusted attribute payload
        catalog: persona catalog (defaults to the process-wide instance)
        max_words: rationale word ceiling

    Returns:
        Success wrapping the compact JSON string, or a Failure whose error is
        prefixed with the failing stage ("Validation failed: ...", etc.)
    """
    try:
        validation = _run_stage(PipelineStage.VALIDATE, validate, raw_input)
    except StageExecutionError as e:
        return Failure(error=e.message, stage=PipelineStage.VALIDATE)

    if not validation.success:
        failure = Failure(
            error=f"{PipelineStage.VALIDATE.failure_prefix}: {validation.error}",
            stage=PipelineStage.VALIDATE,
        )
        log_event(
            "warning",
            "pipeline.validation.failed",
            request_id=None,
            stage=PipelineStage.VALIDATE.value,
            error_code="invalid_input",
            extra={"error_message": failure.error},
        )
        return failure
    user_input = validation.value

    try:
        weighted = _run_stage(PipelineStage.SCORE, score_traits, user_input)
        persona = _run_stage(
            PipelineStage.CORRELATE,
            correlate,
            weighted,
            catalog if catalog is not None else default_catalog(),
        )
        rationale = _run_stage(
            PipelineStage.RATIONALE, generate_rationale, user_input, persona, max_words
        )
        image_prompt = _run_stage(PipelineStage.PROMPT, build_image_prompt, persona)
        output = _run_stage(PipelineStage.FORMAT, format_output, persona, rationale, image_prompt)
    except StageExecutionError as e:
        return Failure(error=e.message, stage=PipelineStage(e.stage))

    log_event("info", "pipeline.assigned", request_id=None, persona=persona.name)
    return Success(output)
