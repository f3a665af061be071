# counterstrike_sim

A small team-combat simulation. Terrorists and counter-terrorists buy guns and
armor, take damage, and carry and plant a bomb or defuse it. A game manager
sets the two teams against each other one duel at a time until one side has
nobody left standing. It keeps a history of match winners in a text file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

- `counterstrike_sim.gun`: `GunType` and `Gun`. A gun has a `bullet_count`, a
  `price`, a `gun_type` and a `damage_per_bullet`. Negative values, whether
  given to the constructor or to `update()`, raise `ValueError`. Every gun gets
  its own `gun_id`, copies made with `copy()` included, and
  `Gun.total_created()` counts how many guns have been made. Two guns compare
  equal when their bullets, price, type and damage match. `clear()` empties a
  gun and sets its type to `GunType.UNKNOWN`. `type_name()` gives the display
  name, for example `"AK-47"`.
- `counterstrike_sim.player`: `Player`, the abstract base for both teams. It
  tracks `health` (starting at 100), `armor`, `money`, `is_alive`,
  `current_gun` and `position`. `take_damage()` lets armor absorb up to half of
  the incoming damage. `heal()`, `buy_armor()` and `buy_gun()` cap health and
  armor at 100 and act only while the player is alive. Buying also needs
  enough money. `calculate_power()` is bullets × damage per bullet for the
  current gun, or 0 when the player is unarmed or dead. Players compare equal
  by `player_id`.
- `counterstrike_sim.terrorist`: `Terrorist`. `set_bomb_carrier()` hands over
  the bomb. A bomb carrier gets a 15% power bonus and can `plant_bomb()`.
- `counterstrike_sim.ct`: `CT`. `set_defuse_kit()` gives the player a kit,
  which adds 10 power and allows `defuse_bomb()`. A defused bomb adds 20 more
  power.
- `counterstrike_sim.game_map`: `GameMap`, with a name, a designer, day or
  night, spawn point counts and two bomb sites given as (x, y, z) coordinates.
- `counterstrike_sim.game_manager`: `GameManager`, which sets up matches, runs
  them and records the results.

Every class has a `describe()` method that returns a multi-line text summary.

## Example

```python
from counterstrike_sim.game_manager import GameManager
from counterstrike_sim.gun import Gun, GunType

manager = GameManager(history_path="game_history.txt", round_delay=0)
manager.setup_match("Dust II", 1, 1, 5000.0)

manager.terrorists[0].buy_gun(Gun(30, 2700.0, GunType.AK47, 36.0))
manager.cts[0].buy_gun(Gun(30, 3100.0, GunType.M4A1, 33.0))

manager.start_game()
print(manager.result)          # "Terrorists Win!"
print(manager.game_history())  # [..., "Round N: winner: Terrorist"]
```

`setup_match()` resets the manager and creates AI players named
`Terrorist_1`, `CT_1` and so on, each with the given money. It then makes one
terrorist the bomb carrier at random.

In `start_game()`, the current living player of each side fights the other in
turn. The one with more power deals the difference as damage. On a tie, each
player takes 10 damage. Each duel is printed, and the manager waits
`round_delay` seconds between rounds. If either team is empty, the game does
not run and `result` says so. When a game ends, the winner is appended to the
history file: `1` for terrorists and `0` otherwise. `end_game()` records a
given result the same way.

`game_history()` reads the history file back, oldest match first. Errors when
writing to the history file are ignored. `GameManager.get_instance()` returns
one shared manager for the whole process. It uses the default history file
`game_history.txt` and a half-second round delay.

Teams can also be managed by hand with `add_terrorist()`, `add_ct()`,
`remove_terrorist()` and `remove_ct()`, which take a `player_id`. A map can be
attached by setting `current_map`.

## What this package does not do

This is a library only. It has no command-line program, no interactive menus
and no user accounts or logins. The only thing it stores is the winners
history file.