#plant_types.py

class PlantType:
    """A read-only data container for the baseline traits of one plant species."""
    __slots__ = ('key', 'name', 'nutrition', 'color', 'size', 'growth_time')

    def __init__(self, key, name, nutrition, color, size, growth_time):
        object.__setattr__(self, 'key', key)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'nutrition', nutrition)  # Nutrition when fully grown, unitless
        object.__setattr__(self, 'color', color)  # Base RGB colour
        object.__setattr__(self, 'size', size)  # Visual diameter when fully grown, in pixels
        object.__setattr__(self, 'growth_time', growth_time)  # Ticks of regrowth at modifier 1.0

    def __setattr__(self, name, value):
        raise AttributeError(f"PlantType '{self.key}' is immutable")

    def __repr__(self):
        return f"PlantType({self.key!r}, nutrition={self.nutrition}, growth_time={self.growth_time})"


PLANT_TYPES = {
    'tussock':  PlantType('tussock', "Tussock", 25, (142, 160, 64), 12, 200),
    'flax':     PlantType('flax', "Flax", 35, (72, 112, 32), 20, 280),
    'fern':     PlantType('fern', "Fern", 30, (34, 139, 34), 18, 240),
    'rimu':     PlantType('rimu', "Rimu Fruit", 50, (139, 0, 0), 14, 400),
    'beech':    PlantType('beech', "Beech Mast", 40, (139, 67, 15), 16, 350),
    'kawakawa': PlantType('kawakawa', "Kawakawa", 40, (61, 154, 94), 11, 150),
    'patotara': PlantType('patotara', "Patotara Berries", 20, (200, 120, 60), 9, 180),
}

def get_plant_type(key):
    """Looks up a plant type. Unknown keys are rejected, there is no safe default."""
    try:
        return PLANT_TYPES[key]
    except KeyError:
        raise ValueError(f"Unknown plant type '{key}'. Known types: {sorted(PLANT_TYPES)}") from None
