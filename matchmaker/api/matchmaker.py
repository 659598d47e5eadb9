"""
Matchmaker API Routes

Endpoints:
1. POST /v1/matchmaker - Run the assignment pipeline on quiz answers

The body holds the five quiz attributes plus an optional imageData data URL.
imageData is removed before validation and only used after the pipeline has
produced its result.
"""

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request

from matchmaker.core.config import settings
from matchmaker.core.errors import InvalidInputShape, StageExecutionError
from matchmaker.features.integrations.provider import NullPhotoTransformer, PhotoTransformer
from matchmaker.features.integrations.share import build_share_message
from matchmaker.features.personas.pipeline import process_pipeline


logger = logging.getLogger("matchmaker")

router = APIRouter(prefix="/v1/matchmaker")


def get_photo_transformer(request: Request) -> PhotoTransformer:
    return getattr(request.app.state, "photo_transformer", None) or NullPhotoTransformer()


def _attach_transformed_image(
    data: dict,
    persona_name: str,
    image_data: Optional[str],
    transformer: PhotoTransformer,
) -> None:
    if not image_data:
        return
    try:
        transformed = transformer.transform(persona_name, image_data)
    except Exception as e:
        # The assignment is the primary result; ship it without the image.
        logger.warning(
            "photo.transform.failed",
            extra={"persona": persona_name, "error_message": str(e)},
        )
        return
    if transformed:
        data["transformed_image"] = transformed


@router.post("")
def assign_persona(
    payload: Any = Body(None),
    transformer: PhotoTransformer = Depends(get_photo_transformer),
) -> dict:
    """
    Assign a monster persona.

    Body:
        { timeOfDay, weather, conflictStyle, snackFlavor, ambition, imageData? }

    Response:
        { assignment_result: {...}, image_generation_prompt, share_message,
          transformed_image? }

    Validation failures map to 400, every other pipeline failure to 500.
    """
    raw_input = payload
    image_data = None
    if isinstance(payload, dict):
        raw_input = dict(payload)
        image_data = raw_input.pop("imageData", None)

    result = process_pipeline(raw_input, max_words=settings.RATIONALE_MAX_WORDS)
    if not result.success:
        if result.is_client_error:
            raise InvalidInputShape(result.error)
        raise StageExecutionError(result.error, stage=result.stage.value)

    data = json.loads(result.value)
    persona_name = data["assignment_result"]["assigned_persona"]
    data["share_message"] = build_share_message(persona_name, settings.SHARE_MESSAGE_MAX_CHARS)
    _attach_transformed_image(data, persona_name, image_data, transformer)
    return data
