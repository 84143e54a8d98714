"""Integration tests for the tick loop: season, plants and spatial grids together."""

import os

import pytest

import constants as C
from graphing_manager import GraphingManager
from simulation import Simulation


@pytest.fixture
def simulation(terrain_factory):
    # Mid-grassland, clear of every dormancy zone.
    return Simulation(terrain_factory(0.25), seed=1, season_duration=10)


class TestSeasonScenario:
    def test_grassland_plant_follows_the_season(self, simulation):
        plant = simulation.add_plant(100, 100, "tussock")
        assert plant.biome_key == "grassland"

        changes = []
        for tick in range(1, 11):
            changes.append(simulation.step())
            if tick == 5:
                assert simulation.season_manager.transition_progress == 0
                assert simulation.season_manager.get_plant_modifier("grassland") == 0.3
                assert plant.seasonal_modifier == 0.3

        assert changes == [False] * 9 + [True]
        assert simulation.season_manager.current_key == "autumn"
        assert simulation.season_manager.get_plant_modifier("grassland") == 1.0
        assert plant.seasonal_modifier == 1.0
        assert simulation.time_manager.total_ticks == 10


class TestSeasonChangeWake:
    def dormant_plant(self, simulation, fixed_rng, plant_type="tussock"):
        plant = simulation.add_plant(100, 100, plant_type)
        # Never passes the per-tick wake roll, so only the season change can wake it.
        plant.rng = fixed_rng(0.99)
        plant.go_dormant()
        return plant

    def test_dormant_plant_outside_new_zone_wakes(self, terrain_factory, fixed_rng):
        simulation = Simulation(terrain_factory(0.5), seed=1, season_duration=10)
        plant = self.dormant_plant(simulation, fixed_rng)
        simulation.rng = fixed_rng(0.3)

        for _ in range(9):
            assert simulation.step() is False
            assert plant.dormant
        assert simulation.step() is True

        assert plant.dormant is False
        assert plant.growth == C.SEASON_CHANGE_WAKE_GROWTH
        assert simulation.plant_manager.census()["active"] == 1

    def test_failed_roll_stays_dormant(self, terrain_factory, fixed_rng):
        simulation = Simulation(terrain_factory(0.5), seed=1, season_duration=10)
        plant = self.dormant_plant(simulation, fixed_rng)
        simulation.rng = fixed_rng(0.7)
        simulation.run(10)
        assert plant.dormant

    def test_plant_inside_new_zone_is_not_rolled(self, terrain_factory, fixed_rng):
        # 0.78 is below summer's drought zone but inside autumn's high-country zone.
        simulation = Simulation(terrain_factory(0.78), seed=1, season_duration=10)
        plant = self.dormant_plant(simulation, fixed_rng)
        rng = fixed_rng(0.0)
        simulation.rng = rng
        simulation.run(10)
        assert simulation.season_manager.current_key == "autumn"
        assert plant.dormant
        assert rng.calls == 0

    def test_spawned_plants_skipped(self, simulation, critter, fixed_rng):
        plant = simulation.spawn_plant(critter(100, 100), 100, 100, "kawakawa")
        plant.go_dormant()
        rng = fixed_rng(0.0)
        simulation.rng = rng
        assert simulation.on_season_change() == 0
        assert plant.dormant
        assert rng.calls == 0


class TestSpatialRebuild:
    def test_only_live_plants_are_indexed(self, simulation):
        eaten = simulation.add_plant(100, 100, "tussock")
        standing = simulation.add_plant(105, 100, "flax")
        simulation.step()
        assert eaten.consume() > 0
        simulation.step()

        found = simulation.plant_grid.get_in_radius(100, 100, 20)
        assert found == [standing]
        assert simulation.find_edible_plants(100, 100, 20) == [standing]
        assert simulation.find_nearest_edible_plant(100, 100, 20) is standing

    def test_dead_fauna_dropped(self, simulation, critter):
        moa = critter(50, 50, species_key="upland_moa")
        simulation.add_fauna(moa)
        simulation.step()
        assert simulation.fauna_grid.get_in_radius(50, 50, 1) == [moa]

        moa.alive = False
        simulation.step()
        assert simulation.fauna == []
        assert simulation.fauna_grid.get_in_radius(50, 50, 1) == []

    def test_migration_hint_uses_registered_fauna(self, simulation, critter):
        assert simulation.get_migration_hint() is None
        simulation.add_fauna(critter(species_key="upland_moa"))
        assert simulation.get_migration_hint()["direction"]
        assert len(simulation.get_migration_messages()) == 1


class TestSpawnedPlants:
    def test_spawned_plant_removed_after_parent_dies(self, simulation, critter):
        nest = critter(200, 200)
        plant = simulation.spawn_plant(nest, 200, 200, "kawakawa")
        simulation.step()
        assert plant in list(simulation.plant_manager)
        assert plant.seasonal_modifier == C.SPAWNED_PLANT_MODIFIER

        nest.alive = False
        simulation.step()
        assert plant not in list(simulation.plant_manager)
        assert simulation.plant_grid.get_in_radius(200, 200, 5) == []


class TestPopulation:
    def test_populate_uses_biome_plant_types(self, simulation):
        placed = simulation.populate_plants(30)
        assert placed == 30
        assert len(simulation.plant_manager) == 30
        assert len(simulation.plant_grid) == 30
        allowed = C.BIOMES["grassland"]["plant_types"]
        assert all(p.plant_type in allowed for p in simulation.plant_manager)

    @pytest.mark.parametrize("elevation,biome", [
        (0.12, "coastal"),
        (0.35, "podocarp"),
        (0.7, "subalpine"),
    ])
    def test_biome_comes_from_elevation(self, terrain_factory, critter, elevation, biome):
        simulation = Simulation(terrain_factory(elevation), seed=1)
        assert simulation.add_plant(10, 10, "tussock").biome_key == biome
        assert simulation.spawn_plant(critter(20, 20), 20, 20, "flax").biome_key == biome

    def test_no_plants_on_barren_terrain(self, terrain_factory):
        simulation = Simulation(terrain_factory(0.05), seed=1)
        assert simulation.populate_plants(10) == 0

    def test_same_seed_same_history(self, terrain_factory):
        def run(seed):
            simulation = Simulation(terrain_factory(0.1), seed=seed, season_duration=20)
            simulation.populate_plants(80)
            for _ in range(4 * 20 + 5):
                simulation.step()
            return [(p.pos.x, p.dormant, round(p.growth, 6)) for p in simulation.plant_manager]

        first = run(7)
        assert first == run(7)
        assert any(dormant for _, dormant, _ in first)


class TestGraphing:
    def test_graphs_written(self, simulation, tmp_path):
        simulation.graphing_manager = GraphingManager(sample_interval=1)
        simulation.populate_plants(10)
        simulation.run(25)

        gm = simulation.graphing_manager
        assert gm.has_data()
        assert len(gm.data["ticks"]) == 25
        assert [name for _, name in gm.data["season_changes"]] == ["Autumn", "Winter"]

        saved = gm.generate_and_save_graphs(str(tmp_path))
        assert len(saved) == 2
        assert all(os.path.exists(path) for path in saved)

    def test_no_data_no_graphs(self, tmp_path):
        assert GraphingManager().generate_and_save_graphs(str(tmp_path)) == []
