# plant_manager.py
import numpy as np
import logger as log

class PlantManager:
    """
    Owns every plant in the world. Per-plant state is mirrored into NumPy
    arrays after each bulk update and again before each census, so the
    counting itself runs vectorized.
    """
    def __init__(self, initial_capacity=1000):
        self.plants = []
        self.capacity = initial_capacity
        self.count = 0

        self.arrays = {
            'positions': np.zeros((initial_capacity, 2), dtype=np.float32),
            'growths': np.zeros(initial_capacity, dtype=np.float32),
            'nutritions': np.zeros(initial_capacity, dtype=np.float64),
            'max_nutritions': np.zeros(initial_capacity, dtype=np.float64),
            'seasonal_modifiers': np.ones(initial_capacity, dtype=np.float32),
            'alive': np.zeros(initial_capacity, dtype=bool),
            'dormant': np.zeros(initial_capacity, dtype=bool),
        }

    def add_plant(self, plant):
        """Adds a new plant, linking it to the NumPy arrays via its index."""
        if self.count == self.capacity:
            self._grow_capacity()

        plant.index = self.count
        self.plants.append(plant)
        self.arrays['positions'][self.count] = (plant.pos.x, plant.pos.y)
        self._sync(plant)
        self.count += 1

    def _sync(self, plant):
        idx = plant.index
        self.arrays['growths'][idx] = plant.growth
        self.arrays['nutritions'][idx] = plant.nutrition
        self.arrays['max_nutritions'][idx] = plant.max_nutrition
        self.arrays['seasonal_modifiers'][idx] = plant.seasonal_modifier
        self.arrays['alive'][idx] = plant.alive
        self.arrays['dormant'][idx] = plant.dormant

    def _grow_capacity(self):
        """Doubles the capacity of all NumPy arrays within the self.arrays dictionary."""
        new_capacity = self.capacity * 2
        log.log(f"DEBUG: PlantManager growing from {self.capacity} to {new_capacity}")

        for key, arr in self.arrays.items():
            # Special handling for 2D arrays like 'positions'
            if arr.ndim == 2:
                self.arrays[key] = np.resize(arr, (new_capacity, arr.shape[1]))
            else:
                self.arrays[key] = np.resize(arr, new_capacity)

        self.capacity = new_capacity

    def update_all(self, season_manager):
        """Advances every plant by one tick, then refreshes the mirrored arrays."""
        for plant in self.plants:
            plant.update(season_manager)
            self._sync(plant)

    def remove_plant(self, plant_to_remove):
        """Removes a plant with 'swap and pop', keeping indices dense."""
        idx_to_remove = getattr(plant_to_remove, 'index', -1)
        if not 0 <= idx_to_remove < self.count or self.plants[idx_to_remove] is not plant_to_remove:
            log.log(f"ERROR: Attempted to remove a plant with an invalid index or mismatched object. Index: {idx_to_remove}")
            return

        last_idx = self.count - 1
        if idx_to_remove != last_idx:
            last_plant = self.plants[last_idx]
            for arr in self.arrays.values():
                arr[idx_to_remove] = arr[last_idx]
            self.plants[idx_to_remove] = last_plant
            last_plant.index = idx_to_remove

        self.plants.pop()
        self.count -= 1
        plant_to_remove.index = -1

    def remove_permanently_dead(self):
        """Drops spawned plants whose parent placeable is gone. Returns how many were removed."""
        dead = [p for p in self.plants if p.is_permanently_dead]
        for plant in dead:
            self.remove_plant(plant)
        if dead:
            log.log(f"Removed {len(dead)} spawned plants whose parent is gone.")
        return len(dead)

    def sync_all(self):
        """Refreshes the mirrored arrays from the plants, e.g. after fauna ate some mid-tick."""
        for plant in self.plants:
            self._sync(plant)

    def census(self):
        """Vectorized population summary over all registered plants, as of right now."""
        self.sync_all()
        live = slice(0, self.count)
        alive = self.arrays['alive'][live]
        dormant = self.arrays['dormant'][live]
        growths = self.arrays['growths'][live]
        return {
            'total': int(self.count),
            'active': int(np.count_nonzero(alive & ~dormant)),
            'dormant': int(np.count_nonzero(dormant)),
            'regrowing': int(np.count_nonzero(~alive & ~dormant)),
            'total_nutrition': float(self.arrays['nutritions'][live].sum()),
            'mean_growth': float(growths.mean()) if self.count else 0.0,
        }

    def get_positions(self):
        return self.arrays['positions'][:self.count]

    def __iter__(self):
        """Allows the manager to be iterated over like a list (e.g., 'for plant in manager')."""
        return iter(self.plants)

    def __len__(self):
        """Allows the len() function to be called on the manager."""
        return self.count
