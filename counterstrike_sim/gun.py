"""Firearms that players can buy and carry."""

from __future__ import annotations

from enum import Enum


class GunType(Enum):
    """Kinds of gun, each valued by its display name."""

    AK47 = "AK-47"
    M4A1 = "M4A1"
    AWP = "AWP"
    DEAGLE = "Desert Eagle"
    GLOCK = "Glock-18"
    UNKNOWN = "Unknown"


class Gun:
    """A gun with a magazine, a price and per-bullet damage.

    Every gun gets a fresh numeric id, copies included.
    """

    _total_created = 0

    def __init__(
        self,
        bullets: int = 0,
        price: float = 0.0,
        gun_type: GunType = GunType.UNKNOWN,
        damage: float = 0.0,
    ) -> None:
        self._validate(bullets, price, damage)
        Gun._total_created += 1
        self._gun_id = Gun._total_created
        self.bullet_count = bullets
        self.price = price
        self.gun_type = gun_type
        self.damage_per_bullet = damage

    @staticmethod
    def _validate(bullets: int, price: float, damage: float) -> None:
        if bullets < 0 or price < 0 or damage < 0:
            raise ValueError("Negative values are not allowed for Gun attributes")

    @property
    def gun_id(self) -> int:
        return self._gun_id

    @classmethod
    def create(cls, bullets: int, price: float, gun_type: GunType, damage: float) -> Gun:
        """Build a new gun from its attributes."""
        return cls(bullets, price, gun_type, damage)

    @classmethod
    def total_created(cls) -> int:
        """Number of guns created so far, copies included."""
        return Gun._total_created

    def update(self, bullets: int, price: float, damage: float) -> None:
        """Change bullets, price and damage; negative values are rejected."""
        self._validate(bullets, price, damage)
        self.bullet_count = bullets
        self.price = price
        self.damage_per_bullet = damage

    def clear(self) -> None:
        """Reset the gun to an empty, unknown weapon."""
        self.bullet_count = 0
        self.price = 0.0
        self.damage_per_bullet = 0.0
        self.gun_type = GunType.UNKNOWN

    def type_name(self) -> str:
        return self.gun_type.value

    def describe(self) -> str:
        return (
            f"Gun ID: {self._gun_id}\n"
            f"Type: {self.type_name()}\n"
            f"Bullets: {self.bullet_count}\n"
            f"Damage per bullet: {self.damage_per_bullet:g}\n"
            f"Price: ${self.price:g}"
        )

    def copy(self) -> Gun:
        """Return an equal gun with its own id."""
        return Gun(self.bullet_count, self.price, self.gun_type, self.damage_per_bullet)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gun):
            return NotImplemented
        return (
            self.bullet_count == other.bullet_count
            and self.price == other.price
            and self.gun_type == other.gun_type
            and self.damage_per_bullet == other.damage_per_bullet
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Gun(id={self._gun_id}, type={self.gun_type.name}, "
            f"bullets={self.bullet_count}, price={self.price:g}, "
            f"damage={self.damage_per_bullet:g})"
        )