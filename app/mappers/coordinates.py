"""Approximate geocoding for addresses around campus.

No external lookup: addresses are matched against a small table of known
streets, anything else gets a jittered pin near the campus anchor.
"""

import random

CAMPUS_ANCHOR: tuple[float, float] = (40.4866, -74.4507)

# Checked in order, first case-sensitive substring match wins
KNOWN_STREETS: tuple[tuple[str, tuple[float, float]], ...] = (
    ("Easton Avenue", (40.4862, -74.4518)),
    ("New Street", (40.4851, -74.4489)),
    ("Bartlett Street", (40.4868, -74.4505)),
    ("Hamilton Street", (40.4883, -74.4534)),
    ("College Avenue", (40.4866, -74.4507)),
)

JITTER_DEGREES = 0.005


def resolve_coordinates(
    address: str, rng: random.Random | None = None
) -> tuple[float, float]:
    for street, coords in KNOWN_STREETS:
        if street in address:
            return coords

    rng = rng or random.Random()
    lat, lng = CAMPUS_ANCHOR
    return (
        lat + rng.uniform(-JITTER_DEGREES, JITTER_DEGREES),
        lng + rng.uniform(-JITTER_DEGREES, JITTER_DEGREES),
    )
