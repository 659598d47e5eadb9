"""
Rationale Generator — Templated, Word-Bounded Justification

Pure functions: same input and persona => same text. No external calls.

Every template names the persona, quotes both double-weighted answers
(conflictStyle and ambition) and cites at least two persona traits.
"""

from typing import Callable

from matchmaker.models.persona import ArchetypePersona, UserInput


DEFAULT_MAX_WORDS = 50

RationaleTemplate = Callable[[UserInput, ArchetypePersona], str]


def _destiny(user: UserInput, persona: ArchetypePersona) -> str:
    t = persona.traits
    return (
        f"Your {user.conflict_style} approach to conflict and {user.ambition} ambition scream {t[0]}. "
        f"Like the {persona.name}, you're {t[1]} and {t[2]} to your core. "
        f"Welcome to your monstrous destiny!"
    )


def _energy(user: UserInput, persona: ArchetypePersona) -> str:
    t = persona.traits
    return (
        f"That {user.conflict_style} conflict style paired with {user.ambition} ambition? Pure {persona.name} energy. "
        f"You've got that {t[0]} vibe with a dash of {t[3]}. "
        f"The transformation is inevitable."
    )


def _kindred(user: UserInput, persona: ArchetypePersona) -> str:
    t = persona.traits
    return (
        f"Your {user.ambition} ambition and {user.conflict_style} conflict resolution reveal your {t[0]} essence. "
        f"The {persona.name} recognizes a kindred spirit: {t[1]}, {t[2]}, and utterly {t[4]}."
    )


def _already(user: UserInput, persona: ArchetypePersona) -> str:
    t = persona.traits
    return (
        f"Between your {user.conflict_style} conflict style and {user.ambition} ambitions, "
        f"you're basically already a {persona.name}. "
        f"That {t[0]} and {t[1]} nature? Chef's kiss. "
        f"Embrace the {t[2]} within."
    )


def _stars(user: UserInput, persona: ArchetypePersona) -> str:
    t = persona.traits
    return (
        f"Your {user.ambition} ambition combined with {user.conflict_style} conflict handling "
        f"makes you undeniably {t[0]}. "
        f"The {persona.name} sees itself in your {t[1]} and {t[3]} tendencies. "
        f"This match was written in the stars."
    )


TEMPLATES: tuple[RationaleTemplate, ...] = (_destiny, _energy, _kindred, _already, _stars)


def template_index(persona: ArchetypePersona) -> int:
    """Stable template choice: name length modulo template count.

    Python's built-in hash() is salted per process, so it is not used here.
    """
    return len(persona.name) % len(TEMPLATES)


def truncate_words(text: str, max_words: int) -> str:
    """Keep the first max_words whitespace-delimited words (may cut mid-sentence)."""
    words = text.split()
    if len(words) <= max_words:
        return text
    return " ".join(words[:max_words])


def generate_rationale(
    user_input: UserInput,
    persona: ArchetypePersona,
    max_words: int = DEFAULT_MAX_WORDS,
) -> str:
    """
    Render the persona's template and enforce the word ceiling.

    Args:
        user_input: validated quiz answers
        persona: assigned persona
        max_words: hard ceiling on whitespace-delimited words

    Returns:
        2-3 sentences, or the first max_words words when longer

    Raises:
        ValueError: max_words < 1
    """
    if max_words < 1:
        raise ValueError(f"max_words must be at least 1, got {max_words}")

    template = TEMPLATES[template_index(persona)]
    return truncate_words(template(user_input, persona), max_words)
