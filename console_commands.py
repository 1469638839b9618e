# console_commands.py - Console commands for placing the global grabber
"""
Two commands, both no-ops until the world is ready:

    printLocation         Log the actor's current map and tile
    setForagerLocation    Make the actor's map and tile the global grabber
                          target and save the config

Commands are looked up in COMMANDS by name; run_command() reports unknown
names through the log instead of raising.
"""

import logging

from mod_config import CONFIG_FILE, save_config


def print_location(logic, config_path=None):
    """Log the map name and tile the actor stands on."""
    state = logic.state
    if not state.is_world_ready:
        return False
    player = state.player
    state.log_action(f"Map: {player.location_name}", logging.INFO)
    state.log_action(f"Tile: ({player.tile[0]}, {player.tile[1]})", logging.INFO)
    return True


def set_forager_location(logic, config_path=None):
    """
    Point the global grabber at the actor's current map and tile.

    Args:
        logic: GameLogic whose config is updated
        config_path: Where to save the config (CONFIG_FILE if None)

    Returns:
        True if the config was updated and saved
    """
    state = logic.state
    if not state.is_world_ready:
        return False
    player = state.player
    config = logic.config
    config.global_forage_map = player.location_name
    config.global_forage_tile_x = player.tile[0]
    config.global_forage_tile_y = player.tile[1]

    saved = save_config(config, config_path or CONFIG_FILE)
    if saved:
        state.log_action(f"Global grabber set to {config.global_forage_map}: "
                         f"<{config.global_forage_tile_x}, {config.global_forage_tile_y}>",
                         logging.INFO)
    else:
        state.log_action("Could not save grabber config", logging.WARNING)
    return saved


COMMANDS = {
    "printLocation": print_location,
    "setForagerLocation": set_forager_location,
}


def run_command(name, logic, config_path=None):
    """Run a console command by name. Returns False for unknown commands."""
    command = COMMANDS.get(name)
    if command is None:
        logic.state.log_action(f"Unknown command '{name}'", logging.WARNING)
        return False
    return command(logic, config_path)
