"""Enumerations shared by characters, weapons and movement logic."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "EntityCategory",
    "InputID",
    "EquippedHandType",
    "HandEquipStatus",
    "WeaponType",
    "WeaponAttachPosition",
    "CombatWeaponState",
    "MovementDirection",
    "TargetHeight",
    "enum_key_as_string",
]


class _NamedEnum(Enum):
    """Enum whose members carry a human readable display name."""

    @property
    def display_name(self) -> str:
        return self.name


class EntityCategory(_NamedEnum):
    Undefined = 0
    Player = 1
    Neutral = 2
    Enemy = 3


class InputID(_NamedEnum):
    None_ = 0
    Jump = 1
    Attack = 2
    Guard = 3
    Sprint = 4
    ToggleCombatMode = 5
    FixedCamera = 6
    Dodge = 7
    Skill1 = 8
    Skill2 = 9
    Skill3 = 10
    Skill4 = 11

    @property
    def display_name(self) -> str:
        return "None" if self is InputID.None_ else self.name


class EquippedHandType(_NamedEnum):
    Empty = 0
    OneHand = 1
    TwoHand = 2


class HandEquipStatus(_NamedEnum):
    Empty = 0
    OnlyMain = 1
    OnlySub = 2
    Dual = 3


class WeaponType(_NamedEnum):
    None_ = 0
    Axe = 1
    Sword = 2
    Shield = 3
    Spear = 4
    Dagger = 5
    Hammer = 6
    Staff = 7
    GreatSword = 8
    Gauntlet = 9
    Bow = 10
    Katana = 11

    @property
    def display_name(self) -> str:
        return "None" if self is WeaponType.None_ else self.name


class WeaponAttachPosition(_NamedEnum):
    Back = 0
    WaistBack = 1


class CombatWeaponState(_NamedEnum):
    # Regular attack sets
    None_ = 0
    OnlyOneHandWeapon = 1
    OneHandWeaponAndShield = 2
    DualHandWeapon = 3
    OnlyOneHandDagger = 4
    OneHandDaggerAndShield = 5
    TwoHandGreatSword = 6
    TwoHandSpear = 7
    TwoHandBlunt = 8
    # Special attack sets
    OnlyDualFist = 9
    TwoHandBow = 10
    TwoHandKatana = 11
    TwoHandMagicStaff = 12

    @property
    def display_name(self) -> str:
        return "None" if self is CombatWeaponState.None_ else self.name


_MOVEMENT_DISPLAY_NAMES = {
    "F": "Forward",
    "FL": "ForwardLeft",
    "FR": "ForwardRight",
    "L": "Left",
    "R": "Right",
    "B": "Backward",
    "BL": "BackwardLeft",
    "BR": "BackwardRight",
}


class MovementDirection(_NamedEnum):
    F = 0
    FL = 1
    FR = 2
    L = 3
    R = 4
    B = 5
    BL = 6
    BR = 7

    @property
    def display_name(self) -> str:
        return _MOVEMENT_DISPLAY_NAMES[self.name]


class TargetHeight(_NamedEnum):
    Low = 0
    Middle = 1
    High = 2


def _key_of(member: Enum) -> str:
    name = member.name
    return name[:-1] if name.endswith("_") else name


def enum_key_as_string(value: Enum | str) -> str:
    """Return the bare key of an enum member.

    Accepts a member or a qualified string such as ``"WeaponType::Sword"``;
    for a string the part after ``::`` is returned, or the whole string if it
    has no qualifier.
    """
    if isinstance(value, Enum):
        return _key_of(value)
    parts = [part for part in value.split("::") if part]
    if not parts:
        raise ValueError(f"no enum key in {value!r}")
    return parts[0] if len(parts) == 1 else parts[1]