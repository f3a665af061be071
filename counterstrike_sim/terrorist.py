"""The terrorist side, which carries and plants the bomb."""

from __future__ import annotations

from counterstrike_sim.player import Player

BOMB_CARRIER_BONUS = 1.15


class Terrorist(Player):
    """A player who may carry and plant the bomb."""

    def __init__(self, name: str = "", is_ai: bool = False, initial_money: float = 0.0) -> None:
        super().__init__(name, is_ai, initial_money)
        self.is_bomb_carrier = False
        self.has_planted_bomb = False

    def plant_bomb(self) -> None:
        """Plant the bomb if carrying it and alive."""
        if self.is_bomb_carrier and self.is_alive:
            self.has_planted_bomb = True
            self.is_bomb_carrier = False
            print(f"{self.name} has planted the bomb!")

    def set_bomb_carrier(self, status: bool) -> None:
        if self.is_alive:
            self.is_bomb_carrier = status
            if status:
                print(f"{self.name} is now carrying the bomb.")

    @property
    def team(self) -> str:
        return "Terrorist"

    def describe(self) -> str:
        return (
            super().describe()
            + f"\nBomb Carrier: {'Yes' if self.is_bomb_carrier else 'No'}"
            + f"\nBomb Planted: {'Yes' if self.has_planted_bomb else 'No'}"
        )

    def calculate_power(self) -> float:
        base = super().calculate_power()
        return base * BOMB_CARRIER_BONUS if self.is_bomb_carrier else base