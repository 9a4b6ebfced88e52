"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Modules live at the project root (flat layout)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from entity import Entity  # noqa: E402
from flows import FlowRecord  # noqa: E402


def make_entities(rows):
    """rows: iterable of (id, category[, weight])."""
    out = []
    for row in rows:
        eid, cat = row[0], row[1]
        weight = row[2] if len(row) > 2 else 0
        out.append(Entity(eid, cat, weight))
    return out


@pytest.fixture
def small_catalog():
    return make_entities([
        ("PSYC", "SOC", 60), ("ECON", "SOC", 50), ("HIST", "SOC", 20),
        ("NEUR", "APP", 40),
        ("ENGL", "HUM", 35), ("ART", "HUM", 25),
        ("BIOL", "NAT", 55), ("CHEM", "NAT", 30),
    ])


@pytest.fixture
def psyc_neur():
    entities = make_entities([("PSYC", "SOC", 55), ("NEUR", "APP", 40)])
    records = [FlowRecord("PSYC", "NEUR", 14), FlowRecord("NEUR", "PSYC", 3)]
    return entities, records
