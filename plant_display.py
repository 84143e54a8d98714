# plant_display.py

import constants as C

def lerp_color(c1, c2, t):
    t = max(0, min(1, t))
    return tuple(int(start + (end - start) * t) for start, end in zip(c1, c2))

def clamp_channel(value):
    return max(0, min(255, int(value)))

def plant_display_color(plant):
    """
    Derives the RGB colour a renderer should draw a plant with. Reads only
    base_color, display_state and growth; never touches simulation state.
    """
    state = plant.display_state
    r, g, b = plant.base_color
    if state == 'dormant':
        tr, tg, tb = C.COLOR_PLANT_DORMANT_TINT
        return (clamp_channel(r * 0.5 + tr), clamp_channel(g * 0.5 + tg), clamp_channel(b * 0.5 + tb))
    if state == 'wilting':
        # Fade toward straw as the season modifier drops.
        t = 1.0 - plant.seasonal_modifier / C.PLANT_WILTING_MODIFIER
        return lerp_color(plant.base_color, C.COLOR_PLANT_WILTED, t)
    if state == 'thriving':
        boost = C.COLOR_PLANT_THRIVING_BOOST
        return (clamp_channel(r), clamp_channel(g + boost), clamp_channel(b))
    return (r, g, b)

def plant_display_size(plant):
    """Diameter to draw at, in pixels. Dormant plants are drawn at half size."""
    dormant_mult = 0.5 if plant.dormant else 1.0
    return plant.size * plant.growth * dormant_mult
