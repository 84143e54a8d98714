#main.py

import cProfile
import pstats
import constants as C
from graphing_manager import GraphingManager
from simulation import Simulation
from terrain import Terrain
import logger

def run_simulation(ticks=C.HEADLESS_RUN_TICKS, seed=None):
    terrain = Terrain()
    simulation = Simulation(terrain, seed=seed)
    simulation.graphing_manager = GraphingManager()
    simulation.populate_plants()

    logger.log(f"Starting headless simulation loop for {ticks} ticks...")
    for _ in range(ticks):
        simulation.step()
        if simulation.time_manager.total_ticks % C.UI_LOG_INTERVAL_TICKS == 0:
            census = simulation.plant_manager.census()
            logger.log(f"{simulation.time_manager.get_display_string()} | "
                       f"Plants: {census['active']} active, {census['dormant']} dormant, "
                       f"{census['regrowing']} regrowing | Grid: {simulation.plant_grid.get_stats()['non_empty_cells']} cells")

    logger.log("Main simulation loop ended.")
    return simulation

def main():
    logger.log("--- Simulation Start ---")
    simulation = run_simulation()
    simulation.graphing_manager.generate_and_save_graphs()
    logger.log("--- Simulation Exit ---")

if __name__ == '__main__':
    profiler = cProfile.Profile()
    try:
        profiler.run('main()')
    except SystemExit:
        # This allows the simulation to exit cleanly without a profiler error
        pass
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
