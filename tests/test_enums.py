import pytest

from nlgame.enums import (
    CombatWeaponState,
    EntityCategory,
    EquippedHandType,
    InputID,
    MovementDirection,
    TargetHeight,
    WeaponAttachPosition,
    WeaponType,
    enum_key_as_string,
)


def test_key_of_member():
    assert enum_key_as_string(WeaponAttachPosition.WaistBack) == "WaistBack"
    assert enum_key_as_string(WeaponAttachPosition.Back) == "Back"


def test_key_of_none_member_has_no_trailing_underscore():
    assert enum_key_as_string(WeaponType.None_) == "None"
    assert enum_key_as_string(InputID.None_) == "None"


def test_key_of_qualified_string():
    assert enum_key_as_string("EUWeaponType::Sword") == "Sword"


def test_key_of_unqualified_string():
    assert enum_key_as_string("Sword") == "Sword"


def test_key_of_empty_string_raises():
    with pytest.raises(ValueError):
        enum_key_as_string("")


@pytest.mark.parametrize("member", list(WeaponType) + list(CombatWeaponState))
def test_qualified_round_trip(member):
    qualified = f"{type(member).__name__}::{enum_key_as_string(member)}"
    assert enum_key_as_string(qualified) == enum_key_as_string(member)


def test_movement_display_names_differ_from_keys():
    assert enum_key_as_string(MovementDirection.F) == "F"
    assert MovementDirection.F.display_name == "Forward"
    assert enum_key_as_string(MovementDirection.BR) == "BR"
    assert MovementDirection.BR.display_name == "BackwardRight"


def test_display_name_defaults_to_key():
    for member in list(EntityCategory) + list(EquippedHandType) + list(TargetHeight):
        assert member.display_name == enum_key_as_string(member)


def test_keys_follow_declaration_order():
    assert [enum_key_as_string(m) for m in WeaponType] == [
        "None",
        "Axe",
        "Sword",
        "Shield",
        "Spear",
        "Dagger",
        "Hammer",
        "Staff",
        "GreatSword",
        "Gauntlet",
        "Bow",
        "Katana",
    ]
    assert [enum_key_as_string(m) for m in MovementDirection] == [
        "F",
        "FL",
        "FR",
        "L",
        "R",
        "B",
        "BL",
        "BR",
    ]
    assert [m.value for m in WeaponType] == list(range(len(WeaponType)))
    assert [m.value for m in MovementDirection] == list(range(len(MovementDirection)))