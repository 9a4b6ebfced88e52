# sample_data.py
"""
Fixed demo dataset for the viewers: the 28-major catalog and a hand-written
table of aggregated migration flows (start major -> end major, students).
Self-flows are students who graduated in the major they started in.
"""

from typing import List

from entity import Entity
from flows import FlowRecord, entity_flow_totals

# (code, name, division)
MAJOR_CATALOG = [
    # Humanities
    ("ART", "Studio Art", "HUM"),
    ("ARTH", "Art History", "HUM"),
    ("ENGL", "English", "HUM"),
    ("FREN", "French", "HUM"),
    ("SPAN", "Spanish", "HUM"),
    ("PHIL", "Philosophy", "HUM"),
    ("RELI", "Religion", "HUM"),
    ("MUSC", "Music", "HUM"),
    ("RHET", "Rhetoric", "HUM"),
    ("THEA", "Theater", "HUM"),
    ("CLAS", "Classic and Medieval Culture", "HUM"),
    ("ASIA", "Asian Language & Culture", "HUM"),
    # Social Sciences
    ("ECON", "Economics", "SOC"),
    ("PSYC", "Psychology", "SOC"),
    ("SOCI", "Sociology", "SOC"),
    ("POLI", "Political Science", "SOC"),
    ("ANTH", "Anthropology", "SOC"),
    ("HIST", "History", "SOC"),
    ("AFAM", "African American Studies", "SOC"),
    ("GSWS", "Gender, Sexuality & Women's Studies", "SOC"),
    # Natural Sciences
    ("BIOL", "Biology", "NAT"),
    ("CHEM", "Chemistry", "NAT"),
    ("PHYS", "Physics & Astronomy", "NAT"),
    ("MATH", "Mathematics", "NAT"),
    ("ENVI", "Environmental Science", "NAT"),
    # Applied Sciences
    ("CSCI", "Computer Science", "APP"),
    ("ASDS", "Applied Statistics & Data Science", "APP"),
    ("NEUR", "Neuroscience", "APP"),
]

# (start, end, students)
SAMPLE_FLOWS = [
    ("ART", "ART", 22), ("ART", "ARTH", 6), ("ARTH", "ART", 3), ("ART", "ENGL", 2),
    ("ARTH", "ARTH", 9), ("ARTH", "HIST", 4),
    ("ENGL", "ENGL", 35), ("ENGL", "RHET", 5), ("RHET", "ENGL", 8), ("ENGL", "PHIL", 3),
    ("ENGL", "THEA", 2), ("ENGL", "PSYC", 4),
    ("FREN", "FREN", 7), ("FREN", "SPAN", 3), ("SPAN", "FREN", 1), ("FREN", "POLI", 2),
    ("SPAN", "SPAN", 14), ("SPAN", "POLI", 4), ("SPAN", "ECON", 2),
    ("PHIL", "PHIL", 10), ("PHIL", "POLI", 5), ("POLI", "PHIL", 2), ("PHIL", "RELI", 2),
    ("RELI", "RELI", 6), ("RELI", "HIST", 3), ("RELI", "PHIL", 1),
    ("MUSC", "MUSC", 12), ("MUSC", "THEA", 2), ("MUSC", "CSCI", 3),
    ("RHET", "RHET", 11), ("RHET", "POLI", 3),
    ("THEA", "THEA", 9), ("THEA", "ENGL", 2),
    ("CLAS", "CLAS", 5), ("CLAS", "HIST", 3), ("CLAS", "ARTH", 1),
    ("ASIA", "ASIA", 6), ("ASIA", "ECON", 2), ("ASIA", "ANTH", 2),
    ("ECON", "ECON", 48), ("ECON", "ASDS", 9), ("ASDS", "ECON", 4), ("ECON", "MATH", 6),
    ("MATH", "ECON", 11), ("ECON", "POLI", 5), ("POLI", "ECON", 7),
    ("PSYC", "PSYC", 52), ("PSYC", "NEUR", 14), ("NEUR", "PSYC", 3), ("PSYC", "SOCI", 6),
    ("SOCI", "PSYC", 4), ("PSYC", "BIOL", 3), ("BIOL", "PSYC", 5),
    ("SOCI", "SOCI", 17), ("SOCI", "ANTH", 3), ("SOCI", "GSWS", 4), ("GSWS", "SOCI", 2),
    ("POLI", "POLI", 31), ("POLI", "HIST", 6), ("HIST", "POLI", 9),
    ("ANTH", "ANTH", 8), ("ANTH", "SOCI", 2),
    ("HIST", "HIST", 19), ("HIST", "AFAM", 2), ("AFAM", "HIST", 1),
    ("AFAM", "AFAM", 4), ("AFAM", "SOCI", 2),
    ("GSWS", "GSWS", 5), ("GSWS", "PSYC", 1),
    ("BIOL", "BIOL", 44), ("BIOL", "NEUR", 12), ("NEUR", "BIOL", 7), ("BIOL", "CHEM", 5),
    ("CHEM", "BIOL", 9), ("BIOL", "ENVI", 6),
    ("CHEM", "CHEM", 21), ("CHEM", "NEUR", 4), ("CHEM", "PHYS", 2),
    ("PHYS", "PHYS", 13), ("PHYS", "MATH", 4), ("MATH", "PHYS", 2), ("PHYS", "CSCI", 5),
    ("MATH", "MATH", 18), ("MATH", "CSCI", 10), ("CSCI", "MATH", 6), ("MATH", "ASDS", 8),
    ("ENVI", "ENVI", 12), ("ENVI", "POLI", 2), ("ENVI", "BIOL", 3),
    ("CSCI", "CSCI", 39), ("CSCI", "ASDS", 7), ("ASDS", "CSCI", 5), ("CSCI", "ECON", 3),
    ("ASDS", "ASDS", 15), ("ASDS", "MATH", 2),
    ("NEUR", "NEUR", 26), ("NEUR", "CHEM", 2),
]


def sample_records() -> List[FlowRecord]:
    return [FlowRecord(s, t, c) for s, t, c in SAMPLE_FLOWS]


def sample_entities() -> List[Entity]:
    """Catalog entities weighted by graduates (students ending in the major)."""
    unweighted = [Entity(code, div, name=name) for code, name, div in MAJOR_CATALOG]
    totals = entity_flow_totals(unweighted, sample_records())
    return [
        Entity(code, div, weight=totals[code].ending, name=name)
        for code, name, div in MAJOR_CATALOG
    ]
