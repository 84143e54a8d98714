# season_manager.py
import constants as C
import logger as log

def lerp(a, b, t):
    "Linear interpolation."
    return a + t * (b - a)

class Season:
    """
    A static description of one season. Instances are built once at import
    time and treated as read-only reference data.
    """
    def __init__(self, key, display_name, icon, color, description,
                 plant_modifiers, preferred_elevation, migration_strength, hunger_modifier,
                 dormancy_elevation=None, dormancy_chance=0.0, dormancy_above=True,
                 plant_type_modifiers=None):
        self.key = key
        self.display_name = display_name
        self.icon = icon
        self.color = color
        self.description = description
        self.plant_modifiers = dict(plant_modifiers)  # Growth multiplier keyed by biome, unitless
        self.preferred_elevation = tuple(preferred_elevation)  # (min, max), normalized [0, 1]
        self.migration_strength = migration_strength  # How hard migratory fauna seek the preferred band, [0, 1]
        self.hunger_modifier = hunger_modifier  # Multiplier on fauna hunger rate
        self.dormancy_elevation = dormancy_elevation  # Threshold elevation, or None for no dormancy zone
        self.dormancy_chance = dormancy_chance  # Probability a plant in the zone goes dormant at the season change
        self.dormancy_above = dormancy_above  # True: zone is above the threshold, False: below it
        self.plant_type_modifiers = dict(plant_type_modifiers or {})  # Extra multiplier keyed by plant type

    def __repr__(self):
        return f"Season({self.key!r})"


SEASONS = {
    'summer': Season(
        'summer', "Summer", "☀️", (244, 164, 96),
        "Lowlands dry out. Moa migrate upland.",
        plant_modifiers={'coastal': 0.3, 'grassland': 0.3, 'podocarp': 0.5, 'montane': 0.8, 'subalpine': 1.2},
        preferred_elevation=(0.45, 0.75),
        migration_strength=0.8,
        hunger_modifier=1.1,
        # Drought: parched lowland plants shut down.
        dormancy_elevation=0.2, dormancy_chance=0.15, dormancy_above=False,
    ),
    'autumn': Season(
        'autumn', "Autumn", "🍂", (210, 105, 30),
        "Mild conditions. Plants fruit before winter.",
        plant_modifiers={'coastal': 0.6, 'grassland': 1.0, 'podocarp': 1.0, 'montane': 1.0, 'subalpine': 0.7},
        preferred_elevation=(0.30, 0.60),
        migration_strength=0.4,
        hunger_modifier=1.0,
        dormancy_elevation=0.75, dormancy_chance=0.3, dormancy_above=True,
        plant_type_modifiers={'rimu': 1.3, 'patotara': 1.4, 'beech': 1.2},
    ),
    'winter': Season(
        'winter', "Winter", "❄️", (135, 206, 235),
        "Alpine areas freeze. Moa descend to forests.",
        plant_modifiers={'coastal': 0.7, 'grassland': 0.9, 'podocarp': 0.8, 'montane': 0.4, 'subalpine': 0.1},
        preferred_elevation=(0.18, 0.45),
        migration_strength=1.0,
        hunger_modifier=1.2,
        dormancy_elevation=0.55, dormancy_chance=0.7, dormancy_above=True,
        plant_type_modifiers={'patotara': 0.5},
    ),
    'spring': Season(
        'spring', "Spring", "🌸", (152, 251, 152),
        "New growth emerges. Best time for nesting.",
        plant_modifiers={'coastal': 1.0, 'grassland': 1.2, 'podocarp': 1.1, 'montane': 0.9, 'subalpine': 0.6},
        preferred_elevation=(0.25, 0.55),
        migration_strength=0.5,
        hunger_modifier=0.9,
    ),
}

# Advisory text per migratory species and season: (current behaviour, upcoming change, direction hint).
MIGRATION_PATTERNS = {
    'upland_moa': {
        'display_name': "Upland Moa",
        'summer': ("Upland Moa are browsing the cool subalpine slopes.",
                   "Autumn will draw them down into the montane beech.", "↑"),
        'autumn': ("Upland Moa are feeding on mast in the montane forest.",
                   "Winter snow will push them below the treeline.", "↓"),
        'winter': ("Upland Moa are sheltering in the podocarp forest.",
                   "Spring growth will pull them back uphill.", "↓"),
        'spring': ("Upland Moa are climbing back toward the ranges.",
                   "Summer heat will send them to the tops.", "↑"),
    },
    'south_island_giant_moa': {
        'display_name': "South Island Giant Moa",
        'summer': ("Giant Moa are leaving the parched lowland plains.",
                   "Autumn rain will green the grassland again.", "↑"),
        'autumn': ("Giant Moa are grazing the recovering grassland.",
                   "Winter will keep them on the plains.", "→"),
        'winter': ("Giant Moa are wintering on the lowland flats.",
                   "Spring flush will spread them across the grassland.", "↓"),
        'spring': ("Giant Moa are fattening on fresh grassland growth.",
                   "Summer drought will force them into the forest edge.", "→"),
    },
    'eastern_moa': {
        'display_name': "Eastern Moa",
        'summer': ("Eastern Moa are following the forest edge upward.",
                   "Autumn fruit will hold them in the podocarp.", "↑"),
        'autumn': ("Eastern Moa are feeding on podocarp fruit.",
                   "Winter will push them to the coast.", "→"),
        'winter': ("Eastern Moa are foraging along the coastal scrub.",
                   "Spring will let them return inland.", "↓"),
        'spring': ("Eastern Moa are moving inland with new growth.",
                   "Summer will drive them toward shade.", "→"),
    },
}

class SeasonManager:
    """
    Drives the cyclic season timer and exposes the current effective
    environmental values. During the final C.SEASON_TRANSITION_FRACTION of
    each season every value is linearly blended toward the next season, so
    consumers never see a step change at the boundary.
    """
    def __init__(self, season_duration=C.SEASON_DURATION_TICKS):
        if season_duration <= 0:
            raise ValueError(f"season_duration must be positive, got {season_duration}")
        self.season_duration = season_duration  # Ticks per season
        self.season_order = C.SEASON_ORDER
        self.current_season_index = 0
        self.timer = 0.0  # Ticks elapsed in the current season
        self.transition_progress = 0.0  # [0, 1], non-zero only in the transition window
        self.just_changed = False  # True only for the update() call that rolled the season over
        log.log(f"SeasonManager initialized. Season duration: {season_duration} ticks. Starting in {self.current.display_name}.")

    @property
    def current_key(self):
        return self.season_order[self.current_season_index]

    @property
    def current(self):
        return SEASONS[self.current_key]

    @property
    def next_key(self):
        next_index = (self.current_season_index + 1) % len(self.season_order)
        return self.season_order[next_index]

    @property
    def next(self):
        return SEASONS[self.next_key]

    @property
    def progress(self):
        """Fraction of the current season elapsed, [0, 1)."""
        return self.timer / self.season_duration

    def update(self, dt=1):
        """Advances the season timer. Returns True on the call that changes season."""
        self.timer += dt

        transition_length = self.season_duration * C.SEASON_TRANSITION_FRACTION
        transition_start = self.season_duration - transition_length
        if self.timer >= transition_start:
            self.transition_progress = min(1.0, (self.timer - transition_start) / transition_length)
        else:
            self.transition_progress = 0.0

        if self.timer >= self.season_duration:
            self.timer = 0.0
            self.current_season_index = (self.current_season_index + 1) % len(self.season_order)
            self.transition_progress = 0.0
            self.just_changed = True
            log.log(f"Event: Season changed to {self.current.display_name}. {self.current.description}")
            return True

        self.just_changed = False
        return False

    def _blend(self, current_value, next_value):
        if self.transition_progress > 0:
            return lerp(current_value, next_value, self.transition_progress)
        return current_value

    # --- Plant-facing queries ---

    def get_plant_modifier(self, biome_key):
        current_mod = self.current.plant_modifiers.get(biome_key, C.DEFAULT_SEASONAL_MODIFIER)
        next_mod = self.next.plant_modifiers.get(biome_key, C.DEFAULT_SEASONAL_MODIFIER)
        return self._blend(current_mod, next_mod)

    def get_plant_type_modifier(self, plant_type):
        current_mod = self.current.plant_type_modifiers.get(plant_type, C.DEFAULT_SEASONAL_MODIFIER)
        next_mod = self.next.plant_type_modifiers.get(plant_type, C.DEFAULT_SEASONAL_MODIFIER)
        return self._blend(current_mod, next_mod)

    def should_plant_be_dormant(self, elevation, biome_key=None):
        """
        Tests whether an elevation lies in the current season's dormancy zone.
        biome_key is accepted for callers but does not change the decision.
        """
        season = self.current
        if season.dormancy_elevation is None or season.dormancy_chance <= 0:
            return False
        if season.dormancy_above:
            return elevation > season.dormancy_elevation
        return elevation < season.dormancy_elevation

    def get_dormancy_chance(self):
        return self.current.dormancy_chance or 0.0

    # --- Fauna-facing queries ---

    def get_hunger_modifier(self):
        return self._blend(self.current.hunger_modifier, self.next.hunger_modifier)

    def get_migration_strength(self):
        return self._blend(self.current.migration_strength, self.next.migration_strength)

    def get_preferred_elevation(self):
        """Returns the preferred elevation band as {'min': ..., 'max': ...}."""
        cur_min, cur_max = self.current.preferred_elevation
        next_min, next_max = self.next.preferred_elevation
        return {'min': self._blend(cur_min, next_min), 'max': self._blend(cur_max, next_max)}

    def _alive_species(self, fauna):
        """Distinct species keys among living fauna, in order of first appearance."""
        seen = []
        for animal in fauna:
            if not getattr(animal, 'alive', False):
                continue
            key = getattr(animal, 'species_key', None)
            if key is not None and key not in seen:
                seen.append(key)
        return seen

    def get_migration_messages(self, fauna):
        """
        Returns one guidance entry per living migratory species in `fauna`.
        Species without a registered pattern are skipped.
        """
        messages = []
        for species_key in self._alive_species(fauna):
            pattern = MIGRATION_PATTERNS.get(species_key)
            if pattern is None:
                continue
            current_text, upcoming_text, direction = pattern[self.current_key]
            messages.append({
                'species': species_key,
                'name': pattern['display_name'],
                'current': current_text,
                'upcoming': upcoming_text,
                'direction': direction,
            })
        return messages

    def get_migration_hint(self, fauna):
        """Short HUD hint for the first migratory species found, or None."""
        messages = self.get_migration_messages(fauna)
        if not messages:
            return None
        first = messages[0]
        text = first['current']
        if self.transition_progress > 0:
            text = f"{self.next.display_name} approaching"
        return {'text': text, 'detail': first['upcoming'], 'direction': first['direction']}
