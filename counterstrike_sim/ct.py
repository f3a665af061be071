"""The counter-terrorist side, which defuses the bomb."""

from __future__ import annotations

from counterstrike_sim.player import Player

DEFUSE_KIT_BONUS = 10.0
DEFUSED_BOMB_BONUS = 20.0


class CT(Player):
    """A player who may carry a defuse kit and defuse the bomb."""

    def __init__(self, name: str = "", is_ai: bool = False, initial_money: float = 0.0) -> None:
        super().__init__(name, is_ai, initial_money)
        self.has_defuse_kit = False
        self.has_defused_bomb = False

    @property
    def team(self) -> str:
        return "Counter-Terrorist"

    def defuse_bomb(self) -> None:
        """Defuse the bomb if holding a kit and alive."""
        if self.has_defuse_kit and self.is_alive:
            self.has_defused_bomb = True
            print(f"{self.name} has defused the bomb!")

    def set_defuse_kit(self, status: bool) -> None:
        if self.is_alive:
            self.has_defuse_kit = status
            if status:
                print(f"{self.name} acquired a defuse kit.")

    def describe(self) -> str:
        return (
            super().describe()
            + f"\nDefuse Kit: {'Yes' if self.has_defuse_kit else 'No'}"
            + f"\nBomb Defused: {'Yes' if self.has_defused_bomb else 'No'}"
        )

    def calculate_power(self) -> float:
        power = super().calculate_power()
        if self.has_defuse_kit:
            power += DEFUSE_KIT_BONUS
        if self.has_defused_bomb:
            power += DEFUSED_BOMB_BONUS
        return power