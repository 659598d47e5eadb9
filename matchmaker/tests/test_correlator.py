"""
Archetype Correlation Tests

Verify:
1. Membership: the winner always comes from the catalog
2. Determinism: same input => same persona, same ranking
3. Tie-break: equal scores go to the alphabetically earlier name
4. Matching: substring either direction, case-insensitive, weighted, uncapped
5. Empty catalog is an error
"""

import pytest

from matchmaker.core.errors import EmptyCatalogError
from matchmaker.features.personas.correlator import (
    correlate,
    extract_keywords,
    keywords_match,
    rank_personas,
    score_persona,
)
from matchmaker.features.personas.scorer import score_traits
from matchmaker.features.personas.validator import validate


def _weighted(**overrides):
    raw = {
        "timeOfDay": "",
        "weather": "",
        "conflictStyle": "",
        "snackFlavor": "",
        "ambition": "",
    }
    raw.update(overrides)
    return score_traits(validate(raw).value)


class TestKeywordHelpers:
    def test_extract_keywords_lowercases_and_splits(self):
        assert extract_keywords("  World  DOMINATION ") == ["world", "domination"]

    def test_extract_keywords_empty(self):
        assert extract_keywords("") == []

    def test_keyword_inside_trait(self):
        assert keywords_match("power", "powerful") is True

    def test_trait_inside_keyword(self):
        assert keywords_match("superpowerfulness", "powerful") is True

    def test_case_insensitive(self):
        assert keywords_match("CUNNING", "cunning") is True

    def test_no_overlap(self):
        assert keywords_match("savory", "nocturnal") is False


class TestScoring:
    def test_weighted_matches(self, catalog):
        weighted = _weighted(conflictStyle="cunning", ambition="power")
        score = score_persona(weighted, catalog.get_by_name("Witch"))

        assert score.score == 4.0
        assert score.matches == [
            "conflictStyle:cunning~cunning",
            "ambition:power~powerful",
        ]

    def test_single_weight_attribute(self, catalog):
        weighted = _weighted(timeOfDay="cunning")
        assert score_persona(weighted, catalog.get_by_name("Witch")).score == 1.0

    def test_short_keyword_matches_liberally(self, catalog):
        """'a' is a substring of every Vampire trait; each match counts."""
        weighted = _weighted(ambition="a")
        score = score_persona(weighted, catalog.get_by_name("Vampire"))

        assert score.score == 10.0
        assert len(score.matches) == 5

    def test_repeated_keywords_accumulate(self, catalog):
        weighted = _weighted(ambition="ancient ancient")
        assert score_persona(weighted, catalog.get_by_name("Vampire")).score == 4.0

    def test_empty_values_score_zero(self, catalog):
        weighted = _weighted()
        for persona in catalog.get_all():
            assert score_persona(weighted, persona).score == 0.0


class TestCorrelation:
    def test_witch_wins_on_cunning_power(self, catalog):
        weighted = _weighted(timeOfDay="dusk", weather="clear", conflictStyle="cunning",
                             snackFlavor="bitter", ambition="power")
        assert correlate(weighted, catalog).name == "Witch"

    def test_werewolf_beats_demogorgon(self, catalog):
        weighted = _weighted(conflictStyle="primal", ambition="wild")
        ranking = rank_personas(weighted, catalog)

        assert ranking[0].persona.name == "Werewolf"
        assert ranking[0].score == 4.0
        assert ranking[1].persona.name == "Demogorgon"
        assert ranking[1].score == 2.0

    def test_all_zero_scores_pick_alphabetical_first(self, catalog, valid_input):
        """Nothing in the canonical answers overlaps a trait."""
        weighted = score_traits(validate(valid_input).value)
        ranking = rank_personas(weighted, catalog)

        assert all(entry.score == 0.0 for entry in ranking)
        assert ranking[0].persona.name == "Alien Parasite"

    def test_tie_between_real_personas(self, catalog):
        weighted = _weighted(ambition="ancient")
        assert correlate(weighted, catalog).name == "Cthulhu"

    def test_tie_break_is_name_order(self, make_persona):
        weighted = _weighted(ambition="alpha")
        personas = [make_persona("Zeta"), make_persona("alpha"), make_persona("Beta")]

        assert correlate(weighted, personas).name == "alpha"

    def test_winner_is_catalog_member(self, catalog, valid_input):
        weighted = score_traits(validate(valid_input).value)
        assert correlate(weighted, catalog).name in catalog

    def test_deterministic(self, catalog):
        weighted = _weighted(conflictStyle="sneaky schemes", ambition="immortal glory")
        first = [(e.persona.name, e.score) for e in rank_personas(weighted, catalog)]
        for _ in range(5):
            again = [(e.persona.name, e.score) for e in rank_personas(weighted, catalog)]
            assert again == first

    def test_every_persona_scored(self, catalog):
        ranking = rank_personas(_weighted(), catalog)
        assert sorted(e.persona.name for e in ranking) == sorted(catalog.names())

    def test_empty_catalog_raises(self):
        with pytest.raises(EmptyCatalogError, match="Catalog is empty"):
            correlate(_weighted(), [])

    def test_winner_mutation_does_not_reach_catalog(self, catalog):
        winner = correlate(_weighted(ambition="ancient"), catalog)
        winner.traits[0] = "youthful"

        assert catalog.get_by_name("Cthulhu").traits[0] == "insanity-inducing"
