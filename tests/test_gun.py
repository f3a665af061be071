import pytest

from counterstrike_sim.gun import Gun, GunType


def test_gun_creation():
    ak47 = Gun(30, 2700.0, GunType.AK47, 36.0)
    assert ak47.bullet_count == 30
    assert ak47.price == 2700.0
    assert ak47.gun_type is GunType.AK47
    assert ak47.damage_per_bullet == 36.0
    assert ak47.type_name() == "AK-47"


def test_create_matches_constructor():
    built = Gun.create(30, 2700.0, GunType.AK47, 36.0)
    assert built == Gun(30, 2700.0, GunType.AK47, 36.0)


def test_empty_magazine_is_allowed():
    empty = Gun(0, 100.0, GunType.GLOCK, 15.0)
    assert empty.bullet_count == 0


def test_negative_values_rejected():
    with pytest.raises(ValueError, match="Negative values are not allowed"):
        Gun(-5, -100.0, GunType.DEAGLE, -10.0)


def test_update_rejects_negative_values():
    gun = Gun(30, 2700.0, GunType.AK47, 36.0)
    with pytest.raises(ValueError, match="Negative values are not allowed"):
        gun.update(10, -1.0, 5.0)


def test_equality_and_update():
    gun1 = Gun(30, 2700.0, GunType.AK47, 36.0)
    gun2 = gun1.copy()
    gun3 = Gun(20, 2000.0, GunType.M4A1, 30.0)
    assert gun1 == gun2
    assert gun1 != gun3
    gun2.update(25, 2500.0, 35.0)
    assert gun1 != gun2
    assert gun2.bullet_count == 25


def test_copy_gets_new_id():
    gun = Gun(30, 2700.0, GunType.AK47, 36.0)
    clone = gun.copy()
    assert clone.gun_id == gun.gun_id + 1


def test_static_counter():
    initial = Gun.total_created()
    Gun(10, 1000.0, GunType.GLOCK, 15.0)
    assert Gun.total_created() == initial + 1


def test_ids_are_unique():
    guns = [Gun(1, 1.0, GunType.AWP, 1.0) for _ in range(5)]
    assert len({g.gun_id for g in guns}) == 5


def test_clear():
    gun = Gun(30, 2700.0, GunType.AK47, 36.0)
    gun.clear()
    assert gun.bullet_count == 0
    assert gun.price == 0
    assert gun.damage_per_bullet == 0
    assert gun.type_name() == "Unknown"


@pytest.mark.parametrize(
    "gun_type, name",
    [
        (GunType.AK47, "AK-47"),
        (GunType.M4A1, "M4A1"),
        (GunType.AWP, "AWP"),
        (GunType.DEAGLE, "Desert Eagle"),
        (GunType.GLOCK, "Glock-18"),
        (GunType.UNKNOWN, "Unknown"),
    ],
)
def test_type_names(gun_type, name):
    assert Gun(1, 1.0, gun_type, 1.0).type_name() == name


def test_describe():
    gun = Gun(30, 2700.0, GunType.AK47, 36.0)
    text = gun.describe()
    assert f"Gun ID: {gun.gun_id}" in text
    assert "Type: AK-47" in text
    assert "Bullets: 30" in text
    assert "Damage per bullet: 36" in text
    assert "Price: $2700" in text