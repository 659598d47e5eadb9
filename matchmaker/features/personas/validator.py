"""Shape validation for raw quiz submissions."""

from collections.abc import Mapping
from typing import Any

from matchmaker.models.persona import ATTRIBUTE_NAMES, UserInput
from matchmaker.models.result import Failure, PipelineStage, Result, Success


def _missing_attributes(raw: Mapping) -> list[str]:
    """Required attributes that are absent or None, in canonical order."""
    return [attr for attr in ATTRIBUTE_NAMES if raw.get(attr) is None]


def _unexpected_attributes(raw: Mapping) -> list[str]:
    return sorted(str(key) for key in raw.keys() if key not in ATTRIBUTE_NAMES)


def validate(raw_input: Any) -> Result[UserInput]:
    """Check that raw input holds exactly the five quiz attributes.

    Both the key count and the required key set must match: four valid keys
    plus two strangers is rejected even though it totals six, and so is five
    keys where one is a stranger. Empty strings are accepted; only absent or
    None values count as missing.

    Args:
        raw_input: Untrusted payload (usually a dict decoded from JSON)

    Returns:
        Success wrapping a frozen UserInput, or Failure describing the problem
    """
    if raw_input is None:
        return _fail("Input is null or undefined")

    if not isinstance(raw_input, Mapping):
        return _fail(f"Input must be an object, got {type(raw_input).__name__}")

    missing = _missing_attributes(raw_input)
    unexpected = _unexpected_attributes(raw_input)

    if len(raw_input) != len(ATTRIBUTE_NAMES):
        message = f"Expected exactly {len(ATTRIBUTE_NAMES)} attributes, but received {len(raw_input)}"
        if missing:
            message += f"; missing required attributes: {', '.join(missing)}"
        if unexpected:
            message += f"; unexpected attributes: {', '.join(unexpected)}"
        return _fail(message)

    if missing:
        return _fail(f"Missing required attributes: {', '.join(missing)}")

    if unexpected:
        return _fail(f"Unexpected attributes: {', '.join(unexpected)}")

    non_strings = [
        f"{attr} ({type(raw_input[attr]).__name__})"
        for attr in ATTRIBUTE_NAMES
        if not isinstance(raw_input[attr], str)
    ]
    if non_strings:
        return _fail(f"Attribute values must be strings: {', '.join(non_strings)}")

    unencodable = [attr for attr in ATTRIBUTE_NAMES if not _is_utf8_encodable(raw_input[attr])]
    if unencodable:
        return _fail(f"Attribute values must be valid UTF-8 text: {', '.join(unencodable)}")

    return Success(UserInput.model_validate({attr: raw_input[attr] for attr in ATTRIBUTE_NAMES}))


def _fail(message: str) -> Failure:
    return Failure(error=message, stage=PipelineStage.VALIDATE)


def _is_utf8_encodable(value: str) -> bool:
    """False for strings holding lone surrogates (e.g. decoded from "\\ud800")."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
