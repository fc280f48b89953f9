"""Weapons that attach to character sockets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from nlgame.enums import (
    EquippedHandType,
    WeaponAttachPosition,
    WeaponType,
    enum_key_as_string,
)

__all__ = ["Character", "Weapon"]

Vector = tuple[float, float, float]


@dataclass(eq=False)
class Character:
    """A character whose mesh exposes named sockets that items attach to."""

    name: str = ""
    attachments: dict[Any, str] = field(default_factory=dict)

    def attach(self, item: Any, socket: str) -> None:
        """Attach ``item`` to ``socket``, detaching it from any previous owner."""
        previous = getattr(item, "parent", None)
        if previous is not None and previous is not self:
            previous.attachments.pop(item, None)
        self.attachments[item] = socket
        item.parent = self

    def socket_of(self, item: Any) -> str | None:
        return self.attachments.get(item)


def _side_suffix(is_main: bool) -> str:
    return "_r" if is_main else "_l"


@dataclass(eq=False)
class Weapon:
    """A weapon actor and the data that drives its attachment and hits."""

    weapon_type: WeaponType = WeaponType.None_
    equipped_hand_type: EquippedHandType = EquippedHandType.Empty
    attach_position: WeaponAttachPosition = WeaponAttachPosition.Back
    skeleton: Any = None
    attack_effect: Any = None
    hit_actors: set[Any] = field(default_factory=set)
    prev_start_location: Vector = (0.0, 0.0, 0.0)
    prev_end_location: Vector = (0.0, 0.0, 0.0)
    parent: Character | None = field(default=None, init=False)

    @property
    def socket(self) -> str | None:
        """The socket this weapon currently sits in, if attached."""
        return self.parent.socket_of(self) if self.parent is not None else None

    def _holster_socket(self, is_main: bool) -> str:
        position = enum_key_as_string(self.attach_position).lower()
        return f"weapon_{position}{_side_suffix(is_main)}"

    def equip(self, character: Character, is_main: bool) -> None:
        """Put the weapon in the character's right (main) or left hand."""
        character.attach(self, "weapon" + _side_suffix(is_main))

    def unequip(self, is_main: bool, character: Character | None = None) -> None:
        """Holster the weapon on ``character``, or on its current owner."""
        target = character if character is not None else self.parent
        if target is None:
            return
        target.attach(self, self._holster_socket(is_main))

    def swap_two_hand(self) -> None:
        """Move a two-handed weapon to the two-hand grip socket."""
        if self.equipped_hand_type is not EquippedHandType.TwoHand:
            return
        if self.parent is not None:
            self.parent.attach(self, "weapon_twoHand")