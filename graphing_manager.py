# graphing_manager.py

import os
import matplotlib.pyplot as plt
import logger as log
import constants as C

class GraphingManager:
    """
    Collects plant census and seasonal modifier time series during a run
    and generates plots after the simulation ends.
    """
    def __init__(self, biome_keys=None, sample_interval=C.GRAPH_SAMPLE_INTERVAL_TICKS):
        self.sample_interval = sample_interval
        self.biome_keys = list(biome_keys or [k for k, b in C.BIOMES.items() if b['can_have_plants']])
        self.data = {
            'ticks': [],
            'active': [],
            'dormant': [],
            'regrowing': [],
            'total_nutrition': [],
            'season_changes': [],
        }
        self.modifiers = {key: [] for key in self.biome_keys}
        log.log("GraphingManager initialized.")

    def record(self, simulation):
        """Adds a data point every sample_interval ticks."""
        tick = simulation.time_manager.total_ticks
        if simulation.season_manager.just_changed:
            self.data['season_changes'].append((tick, simulation.season_manager.current.display_name))
        if tick % self.sample_interval != 0:
            return

        census = simulation.plant_manager.census()
        self.data['ticks'].append(tick)
        self.data['active'].append(census['active'])
        self.data['dormant'].append(census['dormant'])
        self.data['regrowing'].append(census['regrowing'])
        self.data['total_nutrition'].append(census['total_nutrition'])
        for key in self.biome_keys:
            self.modifiers[key].append(simulation.season_manager.get_plant_modifier(key))

    def has_data(self):
        """
        Checks if any data has been collected.
        """
        return len(self.data['ticks']) > 0

    def _mark_seasons(self, ax):
        for tick, name in self.data['season_changes']:
            ax.axvline(tick, color='grey', linestyle=':', linewidth=0.8)
            ax.text(tick, ax.get_ylim()[1], f" {name}", va='top', fontsize=8, color='grey')

    def _save(self, fig, file_path, label):
        try:
            fig.savefig(file_path)
            log.log(f"[GraphingManager] {label} graph saved to {file_path}")
        except OSError as e:
            log.log(f"[GraphingManager] ERROR: Could not save {label.lower()} graph. Reason: {e}")
            return None
        finally:
            plt.close(fig)
        return file_path

    def generate_and_save_population_graph(self, output_dir='.'):
        """
        Uses matplotlib to plot active, dormant and regrowing plant counts.
        """
        log.log(f"[GraphingManager] Generating population plot with {len(self.data['ticks'])} data points...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        ax.plot(self.data['ticks'], self.data['active'], label='Active', color='tab:green')
        ax.plot(self.data['ticks'], self.data['dormant'], label='Dormant', color='tab:brown')
        ax.plot(self.data['ticks'], self.data['regrowing'], label='Regrowing', color='tab:gray')

        ax.set_title('Plant Population Over Time')
        ax.set_xlabel('Time (Ticks)')
        ax.set_ylabel('Plants')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()
        self._mark_seasons(ax)
        fig.tight_layout()

        return self._save(fig, os.path.join(output_dir, C.GRAPH_POPULATION_FILE), "Population")

    def generate_and_save_modifier_graph(self, output_dir='.'):
        """
        Uses matplotlib to plot the effective seasonal modifier of each biome.
        """
        log.log("[GraphingManager] Generating seasonal modifier plot...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        for key in self.biome_keys:
            ax.plot(self.data['ticks'], self.modifiers[key], label=key.capitalize())

        ax.axhline(1.0, color='r', linestyle='--', linewidth=0.8, label='Neutral')
        ax.set_title('Effective Plant Modifier by Biome')
        ax.set_xlabel('Time (Ticks)')
        ax.set_ylabel('Modifier')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()
        self._mark_seasons(ax)
        fig.tight_layout()

        return self._save(fig, os.path.join(output_dir, C.GRAPH_MODIFIER_FILE), "Modifier")

    def generate_and_save_graphs(self, output_dir='.'):
        """
        Generates and saves all configured graphs if data exists. Returns the saved paths.
        """
        if not self.has_data():
            log.log("[GraphingManager] No data collected, skipping plot generation.")
            return []

        saved = [
            self.generate_and_save_population_graph(output_dir),
            self.generate_and_save_modifier_graph(output_dir),
        ]
        return [path for path in saved if path]
