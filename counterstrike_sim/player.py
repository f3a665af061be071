"""Base class for anyone taking part in a match."""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from counterstrike_sim.gun import Gun

MAX_HEALTH = 100.0
MAX_ARMOR = 100.0


class Player(ABC):
    """A combatant with health, armor, money and at most one gun."""

    def __init__(self, name: str = "", is_ai: bool = False, initial_money: float = 0.0) -> None:
        self.name = name
        self.is_ai = is_ai
        self.money = initial_money
        self.health = MAX_HEALTH
        self.armor = 0.0
        self.is_alive = True
        self.current_gun: Gun | None = None
        self.position: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.player_id = self._new_id()

    def _new_id(self) -> str:
        return f"{self.name}_{int(time.time()):x}_{random.randint(1000, 9999)}"

    def initialize(self, name: str, is_ai: bool, initial_money: float) -> None:
        """Rename the player, set money and AI flag, and issue a new id."""
        self.name = name
        self.is_ai = is_ai
        self.money = initial_money
        self.player_id = self._new_id()

    @property
    @abstractmethod
    def team(self) -> str:
        """Name of the player's team."""

    def describe(self) -> str:
        lines = [
            f"Player ID: {self.player_id}",
            f"Name: {self.name}",
            f"Team: {self.team}",
            f"Health: {self.health:g}",
            f"Armor: {self.armor:g}",
            f"Money: ${self.money:g}",
            f"Status: {'Alive' if self.is_alive else 'Dead'}",
        ]
        if self.current_gun is not None:
            lines.append("Current Gun: " + self.current_gun.describe())
        else:
            lines.append("No gun equipped")
        return "\n".join(lines)

    def update(self, new_name: str, new_money: float) -> None:
        self.name = new_name
        self.money = new_money

    def reset(self) -> None:
        """Restore full health, remove armor and gun, and revive."""
        self.health = MAX_HEALTH
        self.armor = 0.0
        self.is_alive = True
        self.current_gun = None

    def take_damage(self, amount: float) -> None:
        """Apply damage; armor absorbs up to half of it."""
        to_armor = min(self.armor, amount * 0.5)
        self.armor -= to_armor
        self.health -= amount - to_armor
        if self.health <= 0:
            self.health = 0.0
            self.is_alive = False

    def heal(self, amount: float) -> None:
        if self.is_alive:
            self.health = min(MAX_HEALTH, self.health + amount)

    def buy_armor(self, amount: float) -> None:
        if self.money >= amount and self.is_alive:
            self.armor = min(MAX_ARMOR, self.armor + amount)
            self.money -= amount

    def buy_gun(self, gun: Gun) -> None:
        if self.money >= gun.price and self.is_alive:
            self.current_gun = gun
            self.money -= gun.price

    def calculate_power(self) -> float:
        """Firepower of the current gun, or 0 when unarmed or dead."""
        if self.current_gun is None or not self.is_alive:
            return 0.0
        return self.current_gun.bullet_count * self.current_gun.damage_per_bullet

    def set_position(self, x: float, y: float, z: float) -> None:
        self.position = (x, y, z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.player_id == other.player_id

    def __hash__(self) -> int:
        return hash(self.player_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.player_id!r}, health={self.health:g})"