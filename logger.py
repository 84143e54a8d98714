# logger.py

# These hold references to the simulation's clock and season state.
_time_manager = None
_season_manager = None

def set_time_manager(tm):
    """Sets the global time manager for the logger to use."""
    global _time_manager
    _time_manager = tm

def set_season_manager(sm):
    """Sets the season manager whose current season is shown in timestamps."""
    global _season_manager
    _season_manager = sm

def format_timestamp():
    """Builds the bracketed prefix for a log line."""
    if _time_manager and _time_manager.total_ticks > 0:
        time_str = f"Tick {_time_manager.total_ticks:06d}"
        if _season_manager:
            time_str += f" {_season_manager.current.display_name}"
        return f"[{time_str}]"
    # For messages logged before the main loop starts.
    return "[Sim Start]"

def log(message):
    """Prints a message with a simulation timestamp if available."""
    print(f"{format_timestamp()} {message}")
