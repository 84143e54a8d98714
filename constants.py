# constants.py

# =============================================================================
# --- SIMULATION & PERFORMANCE SETTINGS ---
# =============================================================================
HEADLESS_RUN_TICKS = 4 * 2100 # One full year at the default season length
PROFILER_PRINT_LINE_COUNT = 20
UI_LOG_INTERVAL_TICKS = 600

# =============================================================================
# --- WORLD & SPATIAL INDEX ---
# =============================================================================
WORLD_WIDTH = 2400 # World size, in pixels
WORLD_HEIGHT = 1600
SPATIAL_GRID_CELL_SIZE = 50 # Edge length of one square grid cell, in pixels
INITIAL_PLANT_COUNT = 400
INITIAL_PLANT_PLACEMENT_ATTEMPTS = 20 # Retries per plant to land on plant-capable terrain

# =============================================================================
# --- TERRAIN (reference collaborator) ---
# =============================================================================
TERRAIN_NOISE_SEED = 24322
TERRAIN_NOISE_SCALE = 600.0
TERRAIN_NOISE_OCTAVES = 3
TERRAIN_NOISE_PERSISTENCE = 0.3
TERRAIN_NOISE_LACUNARITY = 3.0
TERRAIN_ELEVATION_POWER = 1.5

# Elevation bands, normalized [0, 1]. Upper bound is exclusive.
BIOMES = {
    'sea':       {'min_elevation': 0.0,  'max_elevation': 0.1,  'can_have_plants': False, 'plant_types': ()},
    'coastal':   {'min_elevation': 0.1,  'max_elevation': 0.15, 'can_have_plants': True,  'plant_types': ('flax',)},
    'grassland': {'min_elevation': 0.15, 'max_elevation': 0.3,  'can_have_plants': True,  'plant_types': ('tussock', 'flax')},
    'podocarp':  {'min_elevation': 0.3,  'max_elevation': 0.4,  'can_have_plants': True,  'plant_types': ('fern', 'rimu', 'kawakawa')},
    'montane':   {'min_elevation': 0.4,  'max_elevation': 0.6,  'can_have_plants': True,  'plant_types': ('beech', 'fern', 'patotara')},
    'subalpine': {'min_elevation': 0.6,  'max_elevation': 0.8,  'can_have_plants': True,  'plant_types': ('tussock', 'patotara')},
    'alpine':    {'min_elevation': 0.8,  'max_elevation': 0.9,  'can_have_plants': False, 'plant_types': ()},
    'snow':      {'min_elevation': 0.9,  'max_elevation': 1.01, 'can_have_plants': False, 'plant_types': ()},
}

# =============================================================================
# --- SEASONS ---
# =============================================================================
SEASON_ORDER = ('summer', 'autumn', 'winter', 'spring')
SEASON_DURATION_TICKS = 2100
SEASON_TRANSITION_FRACTION = 0.15 # Final share of each season blended toward the next
DEFAULT_SEASONAL_MODIFIER = 1.0 # Used for biomes / plant types a season does not list

# =============================================================================
# --- PLANTS ---
# =============================================================================
PLANT_GROWTH_RATE_PER_TICK = 0.002 # Growth fraction gained per tick at modifier 1.0
PLANT_MIN_REGROWTH_DIVISOR = 0.3 # Regrowth time never exceeds base / 0.3
PLANT_REGROWN_GROWTH = 0.3 # Growth fraction a consumed plant returns with
PLANT_DORMANT_GROWTH_FACTOR = 0.3 # Growth is multiplied by this on entering dormancy
PLANT_DORMANT_MIN_GROWTH = 0.1 # Dormant plants never shrink below this
PLANT_WAKE_GROWTH = 0.2 # Growth fraction after waking from dormancy
PLANT_STRESS_MODIFIER_THRESHOLD = 0.25 # Below this modifier a grown plant may go dormant any tick
PLANT_STRESS_GROWTH_THRESHOLD = 0.5
PLANT_STRESS_DORMANCY_CHANCE = 0.01 # Per-tick probability
PLANT_WAKE_MODIFIER_THRESHOLD = 0.5 # Modifier must exceed this before a dormant plant can wake
PLANT_WAKE_CHANCE = 0.02 # Per-tick probability
SEASON_CHANGE_WAKE_CHANCE = 0.5 # Per dormant plant outside the new zone, once per season change
SEASON_CHANGE_WAKE_GROWTH = 0.3
SPAWNED_PLANT_MODIFIER = 1.2 # Fixed modifier for plants fed by a placeable

# Display state thresholds (renderer-facing only)
PLANT_WILTING_MODIFIER = 0.5
PLANT_THRIVING_MODIFIER = 1.1
PLANT_THRIVING_GROWTH = 0.7

# =============================================================================
# --- COLORS ---
# =============================================================================
COLOR_WHITE = (255, 255, 255)
COLOR_PLANT_DORMANT_TINT = (80, 70, 50) # Added to half the base colour while dormant
COLOR_PLANT_WILTED = (160, 140, 90)
COLOR_PLANT_THRIVING_BOOST = 30

# =============================================================================
# --- GRAPHING ---
# =============================================================================
GRAPH_SAMPLE_INTERVAL_TICKS = 10
GRAPH_POPULATION_FILE = 'plant_population_graph.png'
GRAPH_MODIFIER_FILE = 'seasonal_modifier_graph.png'
GRAPH_FIGURE_SIZE = (12, 7)
