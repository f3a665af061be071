"""Maps on which matches are played."""

from __future__ import annotations

from collections.abc import Sequence

Point = tuple[float, float, float]


def _point(values: Sequence[float]) -> Point:
    if len(values) != 3:
        raise ValueError(f"a bomb site needs 3 coordinates, got {len(values)}")
    x, y, z = values
    return (float(x), float(y), float(z))


class GameMap:
    """A map with spawn points and two bomb sites."""

    def __init__(self, name: str = "Unknown", designer: str = "Unknown", night: bool = False) -> None:
        self.map_name = name
        self.designer_name = designer
        self.is_night = night
        self.spawn_points_ct = 0
        self.spawn_points_t = 0
        self.bomb_site_a: Point = (0.0, 0.0, 0.0)
        self.bomb_site_b: Point = (0.0, 0.0, 0.0)

    def set_spawn_points(self, ct: int, t: int) -> None:
        self.spawn_points_ct = ct
        self.spawn_points_t = t

    def set_bomb_sites(self, a: Sequence[float], b: Sequence[float]) -> None:
        """Set both bomb sites from (x, y, z) coordinates."""
        self.bomb_site_a = _point(a)
        self.bomb_site_b = _point(b)

    def describe(self) -> str:
        ax, ay, az = self.bomb_site_a
        bx, by, bz = self.bomb_site_b
        return (
            "=== Map Information ===\n"
            f"Name: {self.map_name}\n"
            f"Designer: {self.designer_name}\n"
            f"Time: {'Night' if self.is_night else 'Day'}\n"
            f"CT Spawn Points: {self.spawn_points_ct}\n"
            f"T Spawn Points: {self.spawn_points_t}\n"
            f"Bomb Site A: ({ax:g}, {ay:g}, {az:g})\n"
            f"Bomb Site B: ({bx:g}, {by:g}, {bz:g})\n"
        )

    def __repr__(self) -> str:
        return f"GameMap({self.map_name!r}, {self.designer_name!r}, night={self.is_night})"