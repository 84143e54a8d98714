"""Pytest configuration and fixtures for the seasonal ecosystem tests."""

import os
import random

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import matplotlib

matplotlib.use("Agg")

import pytest
from pygame.math import Vector2


class FlatTerrain:
    """Terrain stub with one elevation everywhere."""

    def __init__(self, elevation=0.5):
        self.elevation = elevation
        self.elevation_queries = 0

    def elevation_at(self, x, y):
        self.elevation_queries += 1
        return self.elevation


class FixedRng:
    """RNG stub whose random() always returns the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


class StubSeasonManager:
    """Season manager stub with directly settable outputs."""

    def __init__(self, modifier=1.0, in_zone=False, just_changed=False,
                 dormancy_chance=0.0, type_modifier=1.0):
        self.modifier = modifier
        self.in_zone = in_zone
        self.just_changed = just_changed
        self.dormancy_chance = dormancy_chance
        self.type_modifier = type_modifier

    def get_plant_modifier(self, biome_key):
        return self.modifier

    def get_plant_type_modifier(self, plant_type):
        return self.type_modifier

    def should_plant_be_dormant(self, elevation, biome_key=None):
        return self.in_zone

    def get_dormancy_chance(self):
        return self.dormancy_chance


class Critter:
    """Minimal positioned fauna/placeable stand-in."""

    def __init__(self, x=0.0, y=0.0, species_key=None, alive=True):
        self.pos = Vector2(x, y)
        self.species_key = species_key
        self.alive = alive


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def flat_terrain():
    return FlatTerrain()


@pytest.fixture
def stub_season():
    return StubSeasonManager()


@pytest.fixture
def fixed_rng():
    """Factory for RNG stubs returning a constant."""
    return FixedRng


@pytest.fixture
def critter():
    """Factory for positioned entities."""
    return Critter


@pytest.fixture
def terrain_factory():
    return FlatTerrain


@pytest.fixture
def season_stub_factory():
    return StubSeasonManager
