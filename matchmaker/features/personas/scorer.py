"""Fixed per-attribute weighting."""

from matchmaker.models.persona import ATTRIBUTE_WEIGHTS, UserInput, WeightedTrait, WeightedTraits


def score_traits(user_input: UserInput) -> WeightedTraits:
    """
    Pair every attribute value with its fixed multiplier.

    Weights depend only on the attribute name: conflictStyle and ambition
    count double, the rest count once. Values pass through untouched.
    """
    wire = user_input.to_wire()
    return WeightedTraits.model_validate({
        name: WeightedTrait(value=wire[name], weight=ATTRIBUTE_WEIGHTS[name])
        for name in ATTRIBUTE_WEIGHTS
    })
