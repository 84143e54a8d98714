# terrain.py
import numpy as np
import constants as C
import logger as log

GRADIENT_VECTORS = np.array([[0, 1], [0, -1], [1, 0], [-1, 0]])

def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

def gradient(h, x, y):
    """Dot product of the hashed corner gradient with the offset (x, y)."""
    g = GRADIENT_VECTORS[h % 4]
    return g[..., 0] * x + g[..., 1] * y

def perlin_noise_2d(p, x, y, octaves=1, persistence=0.5, lacunarity=2.0):
    """
    Fractal 2D Perlin noise over numpy coordinate arrays of equal shape,
    using the pre-shuffled permutation table `p` (length 512).
    """
    total_noise = np.zeros(np.shape(x))
    amplitude = 1.0
    for _ in range(octaves):
        xi = np.floor(x).astype(int)
        yi = np.floor(y).astype(int)
        xf, yf = x - xi, y - yi
        u, v = fade(xf), fade(yf)

        px0 = xi % 256
        px1 = (px0 + 1) % 256
        py0 = yi % 256
        py1 = (py0 + 1) % 256

        g00 = gradient(p[p[px0] + py0], xf, yf)
        g01 = gradient(p[p[px0] + py1], xf, yf - 1)
        g10 = gradient(p[p[px1] + py0], xf - 1, yf)
        g11 = gradient(p[p[px1] + py1], xf - 1, yf - 1)

        x1 = g00 + u * (g10 - g00)
        x2 = g01 + u * (g11 - g01)
        total_noise += (x1 + v * (x2 - x1)) * amplitude

        amplitude *= persistence
        x, y = x * lacunarity, y * lacunarity
    return total_noise

def biome_for_elevation(elevation):
    """Maps a normalized elevation to its biome key from C.BIOMES."""
    for key, biome in C.BIOMES.items():
        if biome['min_elevation'] <= elevation < biome['max_elevation']:
            return key
    return None

class Terrain:
    """
    Reference terrain collaborator. The simulation core only ever calls
    elevation_at(x, y); biomes are derived from elevation by biome_for_elevation.
    """
    def __init__(self, width=C.WORLD_WIDTH, height=C.WORLD_HEIGHT, seed=C.TERRAIN_NOISE_SEED):
        self.width = width
        self.height = height
        self.seed = seed

        p = np.arange(256, dtype=int)
        np.random.default_rng(seed).shuffle(p)
        self.p = np.stack([p, p]).flatten()
        log.log(f"Terrain initialized ({width}x{height}, seed {seed}).")

    def elevation_grid(self, xs, ys):
        """Vectorized elevation lookup, normalized [0, 1]."""
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        noise_values = perlin_noise_2d(
            self.p, xs / C.TERRAIN_NOISE_SCALE, ys / C.TERRAIN_NOISE_SCALE,
            octaves=C.TERRAIN_NOISE_OCTAVES, persistence=C.TERRAIN_NOISE_PERSISTENCE,
            lacunarity=C.TERRAIN_NOISE_LACUNARITY
        )
        normalized = np.clip((noise_values + 1) / 2, 0.0, 1.0)
        return normalized ** C.TERRAIN_ELEVATION_POWER

    def elevation_at(self, x, y):
        return float(self.elevation_grid(np.array([x]), np.array([y]))[0])
