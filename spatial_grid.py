#spatial_grid.py

import math

class SpatialGrid:
    """
    A uniform-cell spatial index, rebuilt every tick.

    Cells are keyed by (col, row) in a dict, so positions outside the nominal
    world bounds still land in a valid (if unusual) cell. Entities must expose
    `pos.x` and `pos.y`.
    """
    def __init__(self, width, height, cell_size):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.inv_cell_size = 1.0 / cell_size
        self.cols = math.ceil(width * self.inv_cell_size)
        self.rows = math.ceil(height * self.inv_cell_size)
        self.cells = {}

    def get_dimensions(self):
        return {
            'width': self.width,
            'height': self.height,
            'cols': self.cols,
            'rows': self.rows,
            'cell_size': self.cell_size,
        }

    def clear(self):
        """Empties every cell. The grid keeps no history across ticks."""
        self.cells.clear()

    def get_cell_coords(self, x, y):
        return (math.floor(x * self.inv_cell_size), math.floor(y * self.inv_cell_size))

    def insert(self, entity):
        self.insert_at(entity, entity.pos.x, entity.pos.y)

    def insert_at(self, entity, x, y):
        """Files an entity under an arbitrary position, e.g. a predicted one."""
        key = self.get_cell_coords(x, y)
        cell = self.cells.get(key)
        if cell is None:
            cell = self.cells[key] = []
        cell.append(entity)

    def _cells_around(self, x, y, radius):
        """Yields the non-empty cells in the square block covering the radius."""
        cell_radius = math.ceil(radius * self.inv_cell_size)
        center_col, center_row = self.get_cell_coords(x, y)
        for row in range(center_row - cell_radius, center_row + cell_radius + 1):
            for col in range(center_col - cell_radius, center_col + cell_radius + 1):
                cell = self.cells.get((col, row))
                if cell:
                    yield cell

    def get_nearby(self, x, y, radius):
        """All entities in cells touching the query square. A superset of get_in_radius."""
        result = []
        for cell in self._cells_around(x, y, radius):
            result.extend(cell)
        return result

    def get_in_radius(self, x, y, radius):
        radius_sq = radius * radius
        result = []
        for cell in self._cells_around(x, y, radius):
            for entity in cell:
                dx = entity.pos.x - x
                dy = entity.pos.y - y
                if dx * dx + dy * dy <= radius_sq:
                    result.append(entity)
        return result

    def get_in_radius_excluding(self, x, y, radius, exclude_entity):
        return [e for e in self.get_in_radius(x, y, radius) if e is not exclude_entity]

    def get_closest(self, x, y, radius, filter_fn=None):
        """Nearest entity within the radius that passes filter_fn, or None."""
        closest = None
        closest_dist_sq = radius * radius
        for cell in self._cells_around(x, y, radius):
            for entity in cell:
                if filter_fn is not None and not filter_fn(entity):
                    continue
                dx = entity.pos.x - x
                dy = entity.pos.y - y
                dist_sq = dx * dx + dy * dy
                # The first hit may sit exactly on the radius; later ones must be strictly closer.
                if dist_sq < closest_dist_sq or (closest is None and dist_sq == closest_dist_sq):
                    closest_dist_sq = dist_sq
                    closest = entity
        return closest

    def get_closest_n(self, x, y, radius, n, filter_fn=None):
        candidates = self.get_in_radius(x, y, radius)
        if filter_fn is not None:
            candidates = [e for e in candidates if filter_fn(e)]
        candidates.sort(key=lambda e: (e.pos.x - x) ** 2 + (e.pos.y - y) ** 2)
        return candidates[:n]

    def count_in_radius(self, x, y, radius, filter_fn=None):
        count = 0
        for entity in self.get_in_radius(x, y, radius):
            if filter_fn is None or filter_fn(entity):
                count += 1
        return count

    def has_any_in_radius(self, x, y, radius, filter_fn=None):
        radius_sq = radius * radius
        for cell in self._cells_around(x, y, radius):
            for entity in cell:
                if filter_fn is not None and not filter_fn(entity):
                    continue
                dx = entity.pos.x - x
                dy = entity.pos.y - y
                if dx * dx + dy * dy <= radius_sq:
                    return True
        return False

    def get_stats(self):
        """Debug summary of grid occupancy."""
        sizes = [len(cell) for cell in self.cells.values() if cell]
        total = sum(sizes)
        return {
            'total_entities': total,
            'non_empty_cells': len(sizes),
            'max_in_cell': max(sizes) if sizes else 0,
            'avg_per_cell': round(total / len(sizes), 1) if sizes else 0,
            'grid_size': f"{self.cols}x{self.rows}",
            'world_size': f"{self.width}x{self.height}",
        }

    def __len__(self):
        return sum(len(cell) for cell in self.cells.values())
