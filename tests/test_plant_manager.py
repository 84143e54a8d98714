"""Tests for plant bookkeeping and the vectorized census."""

import numpy as np
import pytest

from plant_manager import PlantManager
from plants import Plant


def add_plants(manager, terrain, count, plant_type="fern", parent=None):
    plants = []
    for i in range(count):
        plant = Plant(i * 10, i * 5, plant_type, terrain, "podocarp", parent=parent)
        manager.add_plant(plant)
        plants.append(plant)
    return plants


class TestRegistration:
    def test_capacity_grows(self, flat_terrain):
        manager = PlantManager(initial_capacity=2)
        plants = add_plants(manager, flat_terrain, 5)
        assert len(manager) == 5
        assert manager.capacity >= 5
        assert [p.index for p in manager] == [0, 1, 2, 3, 4]
        np.testing.assert_allclose(manager.get_positions()[4], (40, 20))
        assert list(manager) == plants

    def test_remove_swaps_last_into_gap(self, flat_terrain):
        manager = PlantManager()
        first, middle, last = add_plants(manager, flat_terrain, 3)
        manager.remove_plant(first)
        assert len(manager) == 2
        assert last.index == 0
        assert manager.plants[0] is last
        assert first.index == -1
        np.testing.assert_allclose(manager.get_positions()[0], (20, 10))

    def test_remove_unknown_plant_is_ignored(self, flat_terrain, capsys):
        manager = PlantManager()
        add_plants(manager, flat_terrain, 2)
        stranger = Plant(0, 0, "fern", flat_terrain, "podocarp")
        manager.remove_plant(stranger)
        assert len(manager) == 2
        assert "ERROR" in capsys.readouterr().out


class TestCensus:
    def test_census_counts_states(self, flat_terrain, season_stub_factory):
        # Inside the dormancy zone mid-season: nothing falls asleep or wakes on its own.
        season = season_stub_factory(in_zone=True)
        manager = PlantManager()
        plants = add_plants(manager, flat_terrain, 6)
        plants[0].consume()
        plants[1].consume()
        plants[2].go_dormant()
        manager.update_all(season)

        census = manager.census()
        assert census["total"] == 6
        assert census["active"] == 3
        assert census["dormant"] == 1
        assert census["regrowing"] == 2
        assert census["total_nutrition"] == pytest.approx(sum(p.nutrition for p in plants))

    def test_census_sees_plants_eaten_since_last_update(self, flat_terrain, stub_season):
        manager = PlantManager()
        plants = add_plants(manager, flat_terrain, 3)
        manager.update_all(stub_season)
        eaten = plants[0].consume()
        assert eaten > 0

        census = manager.census()
        assert census["active"] == 2
        assert census["regrowing"] == 1
        assert census["total_nutrition"] == pytest.approx(sum(p.nutrition for p in plants))

    def test_empty_census(self):
        census = PlantManager().census()
        assert census["total"] == 0
        assert census["mean_growth"] == 0.0

    def test_permanently_dead_spawned_plants_removed(self, flat_terrain, stub_season, critter):
        manager = PlantManager()
        add_plants(manager, flat_terrain, 3)
        parent = critter()
        add_plants(manager, flat_terrain, 2, parent=parent)

        manager.update_all(stub_season)
        assert manager.remove_permanently_dead() == 0

        parent.alive = False
        manager.update_all(stub_season)
        assert manager.remove_permanently_dead() == 2
        assert len(manager) == 3
        assert not any(p.is_spawned for p in manager)
