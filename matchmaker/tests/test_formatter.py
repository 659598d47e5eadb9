"""Output formatting: strict schema, compact JSON."""

import json

import pytest
from pydantic import ValidationError

from matchmaker.features.personas.formatter import build_output, format_output
from matchmaker.models.persona import OutputJSON


class TestFormatter:
    def test_exact_key_sets(self, catalog):
        output = format_output(catalog.get_by_name("Zombie"), "Braaains.", "prompt text")
        parsed = json.loads(output)

        assert list(parsed.keys()) == ["assignment_result", "image_generation_prompt"]
        assert list(parsed["assignment_result"].keys()) == [
            "assigned_persona",
            "rationale",
            "core_trait_summary",
        ]

    def test_values(self, catalog):
        zombie = catalog.get_by_name("Zombie")
        parsed = json.loads(format_output(zombie, "Braaains.", "prompt text"))

        assert parsed["assignment_result"]["assigned_persona"] == "Zombie"
        assert parsed["assignment_result"]["rationale"] == "Braaains."
        assert parsed["assignment_result"]["core_trait_summary"] == zombie.trait_summary
        assert parsed["image_generation_prompt"] == "prompt text"

    def test_compact_serialization(self, catalog):
        """No whitespace between tokens; apostrophes and non-ASCII stay literal."""
        persona = catalog.get_by_name("Frankenstein's Monster")
        output = format_output(persona, "Chef's kiss ☠", "prompt")
        parsed = json.loads(output)

        assert output == json.dumps(parsed, separators=(",", ":"), ensure_ascii=False)
        assert "☠" in output

    def test_build_output_model(self, catalog):
        output = build_output(catalog.get_by_name("Cryptid"), "r", "p")
        assert isinstance(output, OutputJSON)
        assert output.assignment_result.core_trait_summary.startswith("mysterious, ")

    def test_extra_keys_rejected(self):
        with pytest.raises(ValidationError):
            OutputJSON.model_validate({
                "assignment_result": {
                    "assigned_persona": "Vampire",
                    "rationale": "r",
                    "core_trait_summary": "s",
                },
                "image_generation_prompt": "p",
                "confidence": 0.9,
            })
