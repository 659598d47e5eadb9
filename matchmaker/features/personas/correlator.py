"""
Archetype Correlator — Pure Deterministic Matching

Every persona in the catalog is scored; there is no early exit.

Scoring Rules:
1. Each attribute value is split into lowercase whitespace-delimited keywords
2. A keyword matches a persona trait when either string contains the other
   (case-insensitive). Short keywords such as "a" match liberally; that is
   the intended literal behavior.
3. Every matching (keyword, trait) pair adds the attribute's weight; no cap
4. Highest score wins; ties go to the alphabetically earlier name
"""

from typing import Iterable, Union

from matchmaker.core.errors import EmptyCatalogError
from matchmaker.features.personas.catalog import PersonaCatalog
from matchmaker.models.persona import ArchetypePersona, CorrelationScore, WeightedTraits


CatalogLike = Union[PersonaCatalog, Iterable[ArchetypePersona]]


def extract_keywords(value: str) -> list[str]:
    """Lowercase whitespace-delimited tokens; empty input yields no tokens."""
    return value.lower().split()


def keywords_match(keyword: str, trait: str) -> bool:
    keyword = keyword.lower()
    trait = trait.lower()
    return keyword in trait or trait in keyword


def score_persona(weighted: WeightedTraits, persona: ArchetypePersona) -> CorrelationScore:
    """
    Accumulate weighted keyword/trait matches for one persona.

    Returns:
        CorrelationScore with the total and the contributing matches
    """
    score = 0.0
    matches: list[str] = []

    for attribute, trait in weighted.items():
        for keyword in extract_keywords(trait.value):
            for persona_trait in persona.traits:
                if keywords_match(keyword, persona_trait):
                    score += trait.weight
                    matches.append(f"{attribute}:{keyword}~{persona_trait}")

    return CorrelationScore(persona=persona, score=score, matches=matches)


def _sort_key(entry: CorrelationScore) -> tuple:
    name = entry.persona.name
    return (-entry.score, name.casefold(), name)


def _personas(catalog: CatalogLike) -> list[ArchetypePersona]:
    if isinstance(catalog, PersonaCatalog):
        return catalog.get_all()
    return list(catalog)


def rank_personas(weighted: WeightedTraits, catalog: CatalogLike) -> list[CorrelationScore]:
    """
    Score every persona and order them best-first.

    Order: score descending, then name ascending. The order is total, so the
    same inputs always rank identically.

    Raises:
        EmptyCatalogError: catalog holds no personas
    """
    personas = _personas(catalog)
    if not personas:
        raise EmptyCatalogError("Catalog is empty")

    scores = [score_persona(weighted, persona) for persona in personas]
    return sorted(scores, key=_sort_key)


def correlate(weighted: WeightedTraits, catalog: CatalogLike) -> ArchetypePersona:
    """Return the best-matching persona (a copy when given a PersonaCatalog)."""
    return rank_personas(weighted, catalog)[0].persona
