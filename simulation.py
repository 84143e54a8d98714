# simulation.py

import random
import constants as C
from season_manager import SeasonManager
from plants import Plant
from plant_manager import PlantManager
from spatial_grid import SpatialGrid
from terrain import biome_for_elevation
from time_manager import TimeManager
import logger as log

class Simulation:
    """
    One simulation run. Each step() advances the season once, every plant
    once, then rebuilds the spatial grids from scratch so fauna AI can query
    this tick's positions.
    """
    def __init__(self, terrain, seed=None, season_duration=C.SEASON_DURATION_TICKS,
                 width=C.WORLD_WIDTH, height=C.WORLD_HEIGHT, cell_size=C.SPATIAL_GRID_CELL_SIZE):
        log.log("Creating a new Simulation...")
        self.terrain = terrain
        self.width = width
        self.height = height
        # One seeded stream drives every stochastic plant transition.
        self.rng = random.Random(seed)
        self.time_manager = TimeManager()
        self.season_manager = SeasonManager(season_duration)
        self.plant_manager = PlantManager()
        self.plant_grid = SpatialGrid(width, height, cell_size)
        self.fauna_grid = SpatialGrid(width, height, cell_size)
        self.fauna = []
        self.graphing_manager = None

        log.set_time_manager(self.time_manager)
        log.set_season_manager(self.season_manager)
        log.log(f"Simulation created. World {width}x{height}, grid cell {cell_size}.")

    # --- Population ---

    def biome_at(self, x, y):
        """Biome from the terrain's elevation alone; terrain only has to provide elevation_at."""
        return biome_for_elevation(self.terrain.elevation_at(x, y))

    def add_plant(self, x, y, plant_type, biome_key=None):
        """Creates and registers a plant. The biome defaults to the terrain's biome at (x, y)."""
        if biome_key is None:
            biome_key = self.biome_at(x, y)
        plant = Plant(x, y, plant_type, self.terrain, biome_key, rng=self.rng)
        self.plant_manager.add_plant(plant)
        return plant

    def spawn_plant(self, placeable, x, y, plant_type):
        """Creates a plant fed by `placeable`. It lives only as long as the placeable does."""
        biome_key = self.biome_at(x, y)
        plant = Plant(x, y, plant_type, self.terrain, biome_key, rng=self.rng, parent=placeable)
        self.plant_manager.add_plant(plant)
        return plant

    def populate_plants(self, count=C.INITIAL_PLANT_COUNT):
        """Scatters plants over plant-capable biomes. Returns how many were placed."""
        log.log(f"Populating the world with up to {count} plants...")
        placed = 0
        for _ in range(count):
            for _attempt in range(C.INITIAL_PLANT_PLACEMENT_ATTEMPTS):
                x = self.rng.uniform(0, self.width)
                y = self.rng.uniform(0, self.height)
                biome_key = self.biome_at(x, y)
                biome = C.BIOMES.get(biome_key)
                if biome is None or not biome['can_have_plants'] or not biome['plant_types']:
                    continue
                self.add_plant(x, y, self.rng.choice(biome['plant_types']), biome_key)
                placed += 1
                break
        log.log(f"Plant population complete. {placed} plants placed.")
        self.rebuild_spatial_grids()
        return placed

    def add_fauna(self, entity):
        """Registers an externally simulated animal (needs pos, alive, species_key)."""
        self.fauna.append(entity)

    # --- Tick ---

    def step(self):
        """Advances the simulation by one tick. Returns True if the season changed."""
        season_changed = self.season_manager.update()
        self.plant_manager.update_all(self.season_manager)
        if season_changed:
            self.on_season_change()
        self.plant_manager.remove_permanently_dead()
        self.fauna = [f for f in self.fauna if f.alive]
        self.rebuild_spatial_grids()
        self.time_manager.advance()

        if season_changed:
            self.report_season_change()
        if self.graphing_manager is not None:
            self.graphing_manager.record(self)
        return season_changed

    def on_season_change(self):
        """
        Thaw sweep. Each dormant plant that sits outside the new season's
        dormancy zone gets one extra chance to wake. Entering dormancy is left
        to each plant's own just_changed roll in Plant.check_dormancy.
        Returns how many plants woke.
        """
        woke = 0
        for plant in self.plant_manager:
            if plant.is_spawned or not plant.dormant:
                continue
            if self.season_manager.should_plant_be_dormant(plant.elevation, plant.biome_key):
                continue
            if self.rng.random() < C.SEASON_CHANGE_WAKE_CHANCE:
                plant.wake(C.SEASON_CHANGE_WAKE_GROWTH)
                woke += 1
        log.log(f"Season change: {woke} plants woke up.")
        return woke

    def run(self, ticks):
        for _ in range(ticks):
            self.step()

    def rebuild_spatial_grids(self):
        self.plant_grid.clear()
        self.fauna_grid.clear()
        for plant in self.plant_manager:
            if plant.alive:
                self.plant_grid.insert(plant)
        for animal in self.fauna:
            if animal.alive:
                self.fauna_grid.insert(animal)

    # --- Queries for fauna AI and UI ---

    def find_edible_plants(self, x, y, radius):
        """Plants within the radius that a grazer could eat right now."""
        return [p for p in self.plant_grid.get_in_radius(x, y, radius) if p.alive and not p.dormant]

    def find_nearest_edible_plant(self, x, y, radius):
        return self.plant_grid.get_closest(x, y, radius, lambda p: p.alive and not p.dormant)

    def get_migration_hint(self):
        return self.season_manager.get_migration_hint(self.fauna)

    def get_migration_messages(self):
        return self.season_manager.get_migration_messages(self.fauna)

    def report_season_change(self):
        census = self.plant_manager.census()
        log.log(f"Season change: {census['active']} active, {census['dormant']} dormant, "
                f"{census['regrowing']} regrowing of {census['total']} plants.")
        for message in self.get_migration_messages():
            log.log(f"Migration: {message['current']} {message['upcoming']}")
