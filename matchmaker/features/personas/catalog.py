"""
Persona Catalog — Fixed Archetype Table

Fifteen monster archetypes, each with exactly five single-word traits.
The table is built once and never mutated; every read hands out deep
copies so callers cannot reach shared state.
"""

from typing import Iterable, Optional
from matchmaker.models.persona import ArchetypePersona


MONSTER_TABLE: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Vampire", ("aristocratic", "immortal", "nocturnal", "sophisticated", "ancient")),
    ("Werewolf", ("primal", "chaotic", "transformative", "passionate", "wild")),
    ("Cthulhu", ("insanity-inducing", "ancient", "unknowable", "cosmic", "dread")),
    ("Frankenstein's Monster", ("misunderstood", "constructed", "lonely", "searching", "strong")),
    ("Mummy", ("cursed", "vengeful", "eternal", "wrapped", "entombed")),
    ("Zombie", ("mindless", "relentless", "contagious", "hungry", "shambling")),
    ("Banshee", ("sorrowful", "loud", "prophetic", "ethereal", "wailing")),
    ("Witch", ("cunning", "mystical", "powerful", "herbology", "secretive")),
    ("Headless Horseman", ("spectral", "seeking", "swift", "determined", "rider")),
    ("Cryptid", ("mysterious", "prophetic", "elusive", "folklore", "unseen")),
    ("Grim Reaper", ("inevitable", "neutral", "finality", "silent", "collector")),
    ("Poltergeist", ("invisible", "destructive", "mischievous", "noisy", "energetic")),
    ("Demogorgon", ("interdimensional", "primal", "terrifying", "predator", "gate-opener")),
    ("Alien Parasite", ("infiltrating", "subtle", "control", "hidden", "symbiotic")),
    ("Gorgon", ("stone", "transformative", "deadly", "beautiful", "serpentine")),
)


class PersonaCatalog:
    """Read-only registry of archetype personas, indexed by name."""

    def __init__(self, personas: Optional[Iterable[ArchetypePersona]] = None):
        if personas is None:
            personas = [
                ArchetypePersona(name=name, traits=list(traits))
                for name, traits in MONSTER_TABLE
            ]

        ordered: list[ArchetypePersona] = []
        index: dict[str, ArchetypePersona] = {}
        for persona in personas:
            if persona.name in index:
                raise ValueError(f"Duplicate persona name: {persona.name}")
            stored = persona.model_copy(deep=True)
            ordered.append(stored)
            index[stored.name] = stored

        self._personas: tuple[ArchetypePersona, ...] = tuple(ordered)
        self._by_name = index

    def get_all(self) -> list[ArchetypePersona]:
        """All personas in catalog order, as independent copies."""
        return [p.model_copy(deep=True) for p in self._personas]

    def get_by_name(self, name: str) -> Optional[ArchetypePersona]:
        """Copy of the named persona, or None if unknown."""
        persona = self._by_name.get(name)
        if persona is None:
            return None
        return persona.model_copy(deep=True)

    def names(self) -> list[str]:
        return [p.name for p in self._personas]

    def __len__(self) -> int:
        return len(self._personas)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


_default_catalog: Optional[PersonaCatalog] = None


def default_catalog() -> PersonaCatalog:
    """Process-wide catalog instance (safe to share: reads always copy)."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = PersonaCatalog()
    return _default_catalog
