#time_manager.py

class TimeManager:
    def __init__(self):
        self.total_ticks = 0

    def advance(self, ticks=1):
        """Updates the total tick counter for log timestamps and UI display."""
        self.total_ticks += ticks

    def get_display_string(self):
        return f"Tick: {self.total_ticks}"
