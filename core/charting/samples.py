"""Sample score data for demos and tests."""

from __future__ import annotations

from types import MappingProxyType

# Skill ratings for three people; the first column holds the axis labels.
SKILLS = MappingProxyType(
    {
        "Label": ("Communicator", "Data Wangler", "Programmer", "Technologist", "Modeller", "Visualizer"),
        "Rich": (9, 7, 4, 5, 3, 7),
        "Andy": (7, 6, 6, 2, 6, 9),
        "Aimee": (6, 5, 8, 4, 7, 6),
    }
)
