# matchmaker/conftest.py
import os
import sys
from pathlib import Path

import pytest

# Add project root to PYTHONPATH
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("ENV", "test")

from matchmaker.features.personas.catalog import PersonaCatalog
from matchmaker.models.persona import ArchetypePersona


@pytest.fixture
def valid_input():
    """Canonical valid quiz submission (wire keys)."""
    return {
        "timeOfDay": "night",
        "weather": "stormy",
        "conflictStyle": "direct confrontation",
        "snackFlavor": "savory",
        "ambition": "world domination",
    }


@pytest.fixture
def catalog():
    """Fresh fifteen-persona catalog per test."""
    return PersonaCatalog()


@pytest.fixture
def make_persona():
    """Factory for ad-hoc personas in tie-break and edge-case tests."""

    def _make(name: str, traits=None) -> ArchetypePersona:
        return ArchetypePersona(
            name=name,
            traits=list(traits or ["alpha", "bravo", "charlie", "delta", "echo"]),
        )

    return _make
