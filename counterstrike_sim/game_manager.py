"""Match setup, the round-by-round combat loop and the results history."""

from __future__ import annotations

import random
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

from counterstrike_sim.ct import CT
from counterstrike_sim.game_map import GameMap
from counterstrike_sim.player import Player
from counterstrike_sim.terrorist import Terrorist

DEFAULT_HISTORY_PATH = "game_history.txt"
DEFAULT_ROUND_DELAY = 0.5
TIE_DAMAGE = 10.0

_P = TypeVar("_P", bound=Player)


def _next_alive(players: Sequence[_P], start: int) -> int:
    """Index of the first living player at or after start, wrapping to the front."""
    for index in range(start, len(players)):
        if players[index].is_alive:
            return index
    return next(index for index, player in enumerate(players) if player.is_alive)


class GameManager:
    """Holds both teams and the map, runs matches and records their winners."""

    _instance: GameManager | None = None

    def __init__(
        self,
        history_path: str | Path = DEFAULT_HISTORY_PATH,
        round_delay: float = DEFAULT_ROUND_DELAY,
    ) -> None:
        self.history_path = Path(history_path)
        self.round_delay = round_delay
        self.terrorists: list[Terrorist] = []
        self.cts: list[CT] = []
        self.match_name = "Unnamed Match"
        self.result = "No result yet"
        self.logged_in_user_id = ""
        self.current_map: GameMap | None = None

    @classmethod
    def get_instance(cls) -> GameManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def setup_match(
        self,
        map_name: str,
        terrorist_count: int,
        ct_count: int,
        initial_money: float,
    ) -> None:
        """Reset the game and fill both teams with AI players; one terrorist gets the bomb."""
        self.reset_game()
        self.match_name = map_name
        self.terrorists = [
            Terrorist(f"Terrorist_{number}", True, initial_money)
            for number in range(1, terrorist_count + 1)
        ]
        self.cts = [CT(f"CT_{number}", True, initial_money) for number in range(1, ct_count + 1)]
        if self.terrorists:
            random.choice(self.terrorists).set_bomb_carrier(True)

    def start_game(self) -> None:
        """Fight duels until one side is wiped out, then record the winner."""
        if not self.terrorists or not self.cts:
            self.result = "Cannot start game - one or both teams are empty"
            return

        t_index = 0
        ct_index = 0
        round_number = 1
        while True:
            terrorists_alive = any(t.is_alive for t in self.terrorists)
            cts_alive = any(ct.is_alive for ct in self.cts)
            if not terrorists_alive or not cts_alive:
                self.result = "Terrorists Win!" if terrorists_alive else "CTs Win!"
                break

            t_index = _next_alive(self.terrorists, t_index)
            ct_index = _next_alive(self.cts, ct_index)
            terrorist = self.terrorists[t_index]
            ct = self.cts[ct_index]

            t_power = terrorist.calculate_power()
            ct_power = ct.calculate_power()
            print(f"Round {round_number}: {terrorist.name} vs {ct.name}")
            round_number += 1

            if t_power > ct_power:
                damage = t_power - ct_power
                ct.take_damage(damage)
                print(f"{terrorist.name} damaged {ct.name} for {damage:g}")
                if not ct.is_alive:
                    print(f"{ct.name} was defeated!")
            elif ct_power > t_power:
                damage = ct_power - t_power
                terrorist.take_damage(damage)
                print(f"{ct.name} damaged {terrorist.name} for {damage:g}")
                if not terrorist.is_alive:
                    print(f"{terrorist.name} was defeated!")
            else:
                terrorist.take_damage(TIE_DAMAGE)
                ct.take_damage(TIE_DAMAGE)
                print("Both players damaged each other!")

            if self.round_delay > 0:
                time.sleep(self.round_delay)

        self.save_game_result()

    def end_game(self, result: str) -> None:
        """Finish the match with the given result and record it."""
        self.result = result
        self.save_game_result()

    def save_game_result(self) -> None:
        """Append the winner to the history file: 1 for terrorists, 0 otherwise."""
        winner = "1" if "Terrorists" in self.result else "0"
        try:
            with self.history_path.open("a", encoding="utf-8") as history:
                history.write(winner + "\n")
        except OSError:
            pass

    def game_history(self) -> list[str]:
        """One line per recorded match, oldest first."""
        try:
            with self.history_path.open(encoding="utf-8") as history:
                lines = [line.rstrip("\r\n") for line in history]
        except FileNotFoundError:
            return []
        winners = [line for line in lines if line]
        return [
            f"Round {number}: winner: {'Terrorist' if winner == '1' else 'CT'}"
            for number, winner in enumerate(winners, start=1)
        ]

    def add_terrorist(self, terrorist: Terrorist) -> None:
        self.terrorists.append(terrorist)

    def add_ct(self, ct: CT) -> None:
        self.cts.append(ct)

    def remove_terrorist(self, player_id: str) -> None:
        self.terrorists = [t for t in self.terrorists if t.player_id != player_id]

    def remove_ct(self, player_id: str) -> None:
        self.cts = [ct for ct in self.cts if ct.player_id != player_id]

    def describe_match(self) -> str:
        text = (
            f"Match Name: {self.match_name}\n"
            f"Terrorists: {len(self.terrorists)} players\n"
            f"CTs: {len(self.cts)} players\n"
            f"Current Result: {self.result}\n"
        )
        if self.current_map is not None:
            text += self.current_map.describe()
        return text

    def reset_game(self) -> None:
        """Empty both teams, clear the result and drop the map."""
        self.terrorists = []
        self.cts = []
        self.result = "No result yet"
        self.current_map = None