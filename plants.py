# plants.py

import random
from pygame.math import Vector2
import constants as C
from plant_types import get_plant_type

class Plant:
    """
    A single edible plant and its lifecycle state machine.

    States, as the fauna see them:
      alive and not dormant -> edible, nutrition tracks growth and season
      dormant               -> inedible, shrunk, waiting for the season to turn
      not alive             -> consumed, accumulating regrowth time
    update() is the only per-tick entry point and consume() the only one
    available to fauna.
    """
    def __init__(self, x, y, plant_type, terrain, biome_key, rng=None, parent=None):
        plant_def = get_plant_type(plant_type)  # Raises ValueError for unknown types

        self.pos = Vector2(x, y)  # World coordinate, in pixels
        self.plant_type = plant_type
        self.terrain = terrain
        self.biome_key = biome_key
        self.elevation = terrain.elevation_at(x, y)  # Cached elevation, unitless [0, 1]
        self.rng = rng if rng is not None else random.Random()
        self.index = -1 # Will be set by the PlantManager upon registration.

        # --- Static per-type baseline ---
        self.base_nutrition = plant_def.nutrition
        self.base_color = plant_def.color
        self.size = plant_def.size
        self.base_growth_time = plant_def.growth_time  # Ticks of regrowth at modifier 1.0
        self.growth_time = plant_def.growth_time

        # --- Lifecycle State ---
        self.alive = True
        self.dormant = False
        self.dormant_timer = 0  # Ticks spent in the current dormancy
        self.regrowth_timer = 0.0  # Modifier-weighted ticks since being consumed
        self.growth = 1.0  # Fraction of full size / nutrition reached, [0, 1]
        self.seasonal_modifier = C.DEFAULT_SEASONAL_MODIFIER
        self.plant_type_modifier = C.DEFAULT_SEASONAL_MODIFIER
        self.max_nutrition = float(plant_def.nutrition)
        self.nutrition = float(plant_def.nutrition)

        # A plant fed by a placeable never goes dormant and dies with its parent.
        self.parent = parent
        self.is_spawned = parent is not None

    def update(self, season_manager):
        if self.is_spawned:
            if not self.parent.alive:
                self.alive = False
                self.nutrition = 0.0
                return
            self.seasonal_modifier = C.SPAWNED_PLANT_MODIFIER
            self.plant_type_modifier = C.DEFAULT_SEASONAL_MODIFIER
            self.handle_growth()
            return

        self.seasonal_modifier = season_manager.get_plant_modifier(self.biome_key)
        self.plant_type_modifier = season_manager.get_plant_type_modifier(self.plant_type)

        self.check_dormancy(season_manager)

        if self.dormant:
            self.handle_dormancy(season_manager)
            return

        self.handle_growth()

    @property
    def is_permanently_dead(self):
        """A spawned plant whose parent is gone can never regrow."""
        return self.is_spawned and not self.parent.alive

    def check_dormancy(self, season_manager):
        """Rolls for entering dormancy. Consumed plants can go dormant too."""
        if self.dormant:
            return
        if not season_manager.should_plant_be_dormant(self.elevation, self.biome_key):
            return

        dormancy_chance = season_manager.get_dormancy_chance()
        if season_manager.just_changed and self.rng.random() < dormancy_chance:
            self.go_dormant()
        elif (self.seasonal_modifier < C.PLANT_STRESS_MODIFIER_THRESHOLD
              and self.growth > C.PLANT_STRESS_GROWTH_THRESHOLD
              and self.rng.random() < C.PLANT_STRESS_DORMANCY_CHANCE):
            self.go_dormant()

    def go_dormant(self):
        self.dormant = True
        self.dormant_timer = 0
        self.growth = max(C.PLANT_DORMANT_MIN_GROWTH, self.growth * C.PLANT_DORMANT_GROWTH_FACTOR)
        self.nutrition = 0.0

    def wake(self, growth=C.PLANT_WAKE_GROWTH):
        self.dormant = False
        self.growth = growth

    def handle_dormancy(self, season_manager):
        self.dormant_timer += 1
        self.max_nutrition = self.base_nutrition * self.seasonal_modifier

        still_in_zone = season_manager.should_plant_be_dormant(self.elevation, self.biome_key)
        if not still_in_zone and self.seasonal_modifier > C.PLANT_WAKE_MODIFIER_THRESHOLD:
            if self.rng.random() < C.PLANT_WAKE_CHANCE:
                self.wake()

        # Dormant plants are inedible, and a freshly woken one re-earns nutrition next tick.
        self.nutrition = 0.0

    def handle_growth(self):
        modifier = self.seasonal_modifier
        self.max_nutrition = self.base_nutrition * modifier

        if not self.alive:
            # Richer seasons regrow faster. Poor ones cap growth_time at base / C.PLANT_MIN_REGROWTH_DIVISOR.
            self.regrowth_timer += modifier
            self.growth_time = self.base_growth_time / max(C.PLANT_MIN_REGROWTH_DIVISOR, modifier)
            if self.regrowth_timer >= self.growth_time:
                self.alive = True
                self.growth = C.PLANT_REGROWN_GROWTH
                self.regrowth_timer = 0.0
        elif self.growth < 1.0:
            self.growth = min(1.0, self.growth + C.PLANT_GROWTH_RATE_PER_TICK * modifier)
            self.nutrition = min(self.max_nutrition,
                                 self.max_nutrition * self.growth * modifier * self.plant_type_modifier)
        else:
            self.nutrition = min(self.max_nutrition,
                                 self.max_nutrition * modifier * self.plant_type_modifier)

    def consume(self):
        """Harvests the plant. Returns the nutrition gained, 0 if there was nothing to eat."""
        if self.dormant or not self.alive:
            return 0

        nutrition_gained = self.nutrition
        self.alive = False
        self.growth = 0.0
        self.nutrition = 0.0
        self.regrowth_timer = 0.0
        return nutrition_gained

    @property
    def display_state(self):
        """Renderer-facing category derived from simulation state."""
        if self.dormant:
            return 'dormant'
        if self.seasonal_modifier < C.PLANT_WILTING_MODIFIER:
            return 'wilting'
        if self.seasonal_modifier > C.PLANT_THRIVING_MODIFIER and self.growth > C.PLANT_THRIVING_GROWTH:
            return 'thriving'
        return 'mature'

    def __repr__(self):
        return (f"Plant({self.plant_type!r}, biome={self.biome_key!r}, pos=({self.pos.x:.0f}, {self.pos.y:.0f}), "
                f"alive={self.alive}, dormant={self.dormant}, growth={self.growth:.2f})")
