"""Queries and transitions over an actor's gameplay state tags."""

from __future__ import annotations

from nlgame.enums import CombatWeaponState, EquippedHandType, WeaponType
from nlgame.tags import (
    STATE_IDLE,
    STATUS_COMBAT,
    STATUS_GUARD,
    STATUS_TARGETING,
    GameplayTag,
    TagContainer,
)
from nlgame.weapon import Weapon

__all__ = [
    "is_target_mode",
    "combat_weapon_state",
    "is_idle",
    "is_combat_mode",
    "is_guarding",
    "change_state",
]


def is_target_mode(container: TagContainer) -> bool:
    return container.has_matching_tag(STATUS_TARGETING)


def _paired_state(
    sub_weapon: Weapon | None,
    alone: CombatWeaponState,
    with_shield: CombatWeaponState,
) -> CombatWeaponState | None:
    if sub_weapon is None:
        return alone
    if sub_weapon.weapon_type is WeaponType.Shield:
        return with_shield
    if sub_weapon.equipped_hand_type is EquippedHandType.OneHand:
        return CombatWeaponState.DualHandWeapon
    return None


def combat_weapon_state(main_weapon: Weapon | None, sub_weapon: Weapon | None) -> CombatWeaponState:
    """Classify the combat set formed by the main and sub weapons."""
    if main_weapon is None:
        return CombatWeaponState.None_

    kind = main_weapon.weapon_type
    hands = main_weapon.equipped_hand_type

    if kind in (WeaponType.Sword, WeaponType.Axe) and hands is EquippedHandType.OneHand:
        state = _paired_state(
            sub_weapon,
            CombatWeaponState.OnlyOneHandWeapon,
            CombatWeaponState.OneHandWeaponAndShield,
        )
        if state is not None:
            return state

    if kind is WeaponType.Dagger:
        state = _paired_state(
            sub_weapon,
            CombatWeaponState.OnlyOneHandDagger,
            CombatWeaponState.OneHandDaggerAndShield,
        )
        if state is not None:
            return state

    if kind is WeaponType.GreatSword and hands is EquippedHandType.TwoHand:
        return CombatWeaponState.TwoHandGreatSword
    if kind is WeaponType.Spear and hands is EquippedHandType.TwoHand:
        return CombatWeaponState.TwoHandSpear
    if kind in (WeaponType.Axe, WeaponType.Hammer) and hands is EquippedHandType.TwoHand:
        return CombatWeaponState.TwoHandBlunt
    if kind is WeaponType.Gauntlet:
        return CombatWeaponState.OnlyDualFist
    # Katana shares the bow's combat set.
    if kind in (WeaponType.Bow, WeaponType.Katana):
        return CombatWeaponState.TwoHandBow
    if kind is WeaponType.Staff:
        return CombatWeaponState.TwoHandMagicStaff
    return CombatWeaponState.None_


def is_idle(container: TagContainer) -> bool:
    return container.has_matching_tag(STATE_IDLE)


def is_combat_mode(container: TagContainer) -> bool:
    return container.has_matching_tag(STATUS_COMBAT)


def is_guarding(container: TagContainer) -> bool:
    return container.has_matching_tag(STATUS_GUARD)


def change_state(
    container: TagContainer,
    previous_tag: GameplayTag,
    new_tag: GameplayTag,
    replicated: bool = False,
) -> None:
    """Drop ``previous_tag`` and hold ``new_tag`` once."""
    container.set_loose_tag_count(previous_tag, 0)
    container.set_loose_tag_count(new_tag, 1)
    if replicated:
        container.set_replicated_loose_tag_count(previous_tag, 0)
        container.set_replicated_loose_tag_count(new_tag, 1)