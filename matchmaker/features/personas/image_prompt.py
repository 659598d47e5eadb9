"""Image-generation prompt builder.

The style, lighting, background and quality phrases are fixed. Downstream
consumers match on their literal tokens (neon-gothic, horror, #8E48FF,
foggy city street, photorealistic, 8k, cinematic volumetric lighting), so
they must not be reworded.
"""

from dataclasses import dataclass, field

from matchmaker.models.persona import ArchetypePersona


SOURCE_INSTRUCTION = "Transform the source image into"
STYLE = "in a neon-gothic horror aesthetic style,"
LIGHTING = "with electric violet lighting (#8E48FF),"
BACKGROUND = "set against a foggy city street background."
QUALITY = ("Photorealistic,", "8k resolution,", "cinematic volumetric lighting.")


@dataclass(frozen=True)
class ImagePromptConfig:
    """Prompt pieces for one persona, in render order."""
    persona_name: str
    style: str = STYLE
    lighting: str = LIGHTING
    background: str = BACKGROUND
    quality: tuple[str, ...] = field(default=QUALITY)

    def render(self) -> str:
        elements = [
            SOURCE_INSTRUCTION,
            f"a {self.persona_name}",
            self.style,
            self.lighting,
            self.background,
            *self.quality,
        ]
        return " ".join(elements)


def describe_image_prompt(persona: ArchetypePersona) -> ImagePromptConfig:
    return ImagePromptConfig(persona_name=persona.name)


def build_image_prompt(persona: ArchetypePersona) -> str:
    """Single descriptive prompt for transforming a photo into the persona."""
    return describe_image_prompt(persona).render()
