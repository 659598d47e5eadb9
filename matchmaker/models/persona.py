"""
Persona Models

The five quiz attributes a user submits, the weighted form the correlator
consumes, the fixed archetype records and the final assignment payload.

Wire keys stay camelCase (timeOfDay, conflictStyle, ...) because that is what
the quiz front end submits; Python attributes are snake_case.
"""

from typing import Iterator
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


# Canonical attribute order (wire names). Every ordered walk over the
# attributes uses this tuple.
ATTRIBUTE_NAMES: tuple[str, ...] = (
    "timeOfDay",
    "weather",
    "conflictStyle",
    "snackFlavor",
    "ambition",
)

# Multipliers are fixed per attribute name, never per value.
ATTRIBUTE_WEIGHTS: dict[str, float] = {
    "timeOfDay": 1.0,
    "weather": 1.0,
    "conflictStyle": 2.0,
    "snackFlavor": 1.0,
    "ambition": 2.0,
}


class UserInput(BaseModel):
    """
    Validated quiz answers.

    Built only after the validator has accepted the raw payload.
    Empty strings are legal values.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    time_of_day: str = Field(..., alias="timeOfDay")
    weather: str = Field(..., alias="weather")
    conflict_style: str = Field(..., alias="conflictStyle")
    snack_flavor: str = Field(..., alias="snackFlavor")
    ambition: str = Field(..., alias="ambition")

    def to_wire(self) -> dict[str, str]:
        """Attributes keyed by their camelCase wire names."""
        return self.model_dump(by_alias=True)


class WeightedTrait(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    weight: float = Field(..., gt=0)


class WeightedTraits(BaseModel):
    """One WeightedTrait per attribute, produced fresh for every request."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    time_of_day: WeightedTrait = Field(..., alias="timeOfDay")
    weather: WeightedTrait = Field(..., alias="weather")
    conflict_style: WeightedTrait = Field(..., alias="conflictStyle")
    snack_flavor: WeightedTrait = Field(..., alias="snackFlavor")
    ambition: WeightedTrait = Field(..., alias="ambition")

    def items(self) -> Iterator[tuple[str, WeightedTrait]]:
        """Yield (wire name, trait) pairs in canonical attribute order."""
        by_alias = {
            "timeOfDay": self.time_of_day,
            "weather": self.weather,
            "conflictStyle": self.conflict_style,
            "snackFlavor": self.snack_flavor,
            "ambition": self.ambition,
        }
        for name in ATTRIBUTE_NAMES:
            yield name, by_alias[name]


class ArchetypePersona(BaseModel):
    """
    A fixed monster archetype.

    trait_summary is computed from traits on every read, so the two can
    never disagree no matter how a copy of the traits list is mutated.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    traits: list[str] = Field(..., min_length=5, max_length=5)

    @field_validator("traits")
    @classmethod
    def validate_traits(cls, v: list[str]) -> list[str]:
        for trait in v:
            if not trait or len(trait.split()) != 1:
                raise ValueError(f"traits must be single words, got {trait!r}")
        return v

    @computed_field
    @property
    def trait_summary(self) -> str:
        return ", ".join(self.traits)


class CorrelationScore(BaseModel):
    """Transient score for one persona; discarded once the winner is picked."""
    model_config = ConfigDict(frozen=True)

    persona: ArchetypePersona
    score: float = 0.0
    matches: list[str] = Field(
        default_factory=list,
        description="attribute:keyword~trait entries that contributed to score",
    )


class AssignmentResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    assigned_persona: str
    rationale: str
    core_trait_summary: str


class OutputJSON(BaseModel):
    """Terminal artifact of the pipeline. Strict schema: no extra keys."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    assignment_result: AssignmentResult
    image_generation_prompt: str
