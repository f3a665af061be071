import pytest

from counterstrike_sim.ct import CT


def test_team():
    assert CT("TestCT", False, 800.0).team == "Counter-Terrorist"


def test_kit_and_defuse():
    ct = CT("TestCT", False, 800.0)
    ct.set_defuse_kit(True)
    assert ct.has_defuse_kit
    ct.defuse_bomb()
    assert ct.has_defused_bomb


def test_defuse_without_kit_fails():
    ct = CT("TestCT", False, 800.0)
    ct.defuse_bomb()
    assert not ct.has_defused_bomb


def test_dead_cannot_take_kit():
    ct = CT("TestCT", False, 800.0)
    ct.take_damage(500.0)
    ct.set_defuse_kit(True)
    assert not ct.has_defuse_kit


def test_messages(capsys):
    ct = CT("Sapper", False, 800.0)
    ct.set_defuse_kit(True)
    ct.defuse_bomb()
    out = capsys.readouterr().out
    assert "Sapper acquired a defuse kit." in out
    assert "Sapper has defused the bomb!" in out


def test_power_bonuses():
    ct = CT("TestCT", False, 800.0)
    assert ct.calculate_power() == 0.0
    ct.set_defuse_kit(True)
    assert ct.calculate_power() == pytest.approx(10.0)
    before = ct.calculate_power()
    ct.defuse_bomb()
    assert ct.calculate_power() - before == pytest.approx(20.0)


def test_player_damage_kills():
    ct = CT("TestPlayer", False, 1000.0)
    ct.take_damage(50.0)
    assert ct.is_alive
    ct.take_damage(60.0)
    assert not ct.is_alive


def test_describe():
    ct = CT("TestCT", False, 800.0)
    ct.set_defuse_kit(True)
    text = ct.describe()
    assert "Team: Counter-Terrorist" in text
    assert "Defuse Kit: Yes" in text
    assert "Bomb Defused: No" in text