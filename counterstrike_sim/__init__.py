"""Team-based combat simulation with guns, players, maps and a match manager."""

__version__ = "0.1.0"