"""
Photo transformation provider protocol.

The assignment pipeline never calls a transformer. The HTTP layer may, after
the pipeline has produced its result, and attaches whatever comes back as an
extra response field.
"""
from typing import Optional, Protocol


class PhotoTransformerError(RuntimeError):
    """Raised by providers when a transformation attempt fails."""


class PhotoTransformer(Protocol):
    """
    Protocol for photo transformation providers.

    Implementations receive the assigned persona name and the caller's
    base64 data URL and return a data URL for the transformed image, or
    None when they produced nothing.
    """

    def transform(self, persona_name: str, image_data: str) -> Optional[str]:
        """
        Transform a source photo into the named persona.

        Args:
            persona_name: assigned persona (e.g. "Vampire")
            image_data: data URL, e.g. "data:image/png;base64,..."

        Returns:
            Data URL of the transformed image, or None

        Raises:
            PhotoTransformerError: If the provider fails
        """
        ...


class NullPhotoTransformer:
    """Default provider: no transformation service configured."""

    def transform(self, persona_name: str, image_data: str) -> Optional[str]:
        return None
