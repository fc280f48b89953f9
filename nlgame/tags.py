"""Hierarchical gameplay tags and a loose tag-count container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

__all__ = [
    "GameplayTag",
    "TagContainer",
    "add_gameplay_tag",
    "remove_gameplay_tag",
    "set_gameplay_tag",
    "DESCRIPTIONS",
]


@dataclass(frozen=True, order=True)
class GameplayTag:
    """A dot separated tag such as ``State.Attack.Combo``."""

    name: str

    def __post_init__(self) -> None:
        if not self.name or any(not part for part in self.name.split(".")):
            raise ValueError(f"invalid gameplay tag {self.name!r}")

    def matches(self, other: GameplayTag) -> bool:
        """True if this tag equals ``other`` or lies beneath it."""
        return self.name == other.name or self.name.startswith(other.name + ".")

    def parent(self) -> GameplayTag | None:
        head, sep, _ = self.name.rpartition(".")
        return GameplayTag(head) if sep else None

    def __str__(self) -> str:
        return self.name


@dataclass
class TagContainer:
    """Loose and replicated loose tag counts owned by one actor."""

    _loose: dict[GameplayTag, int] = field(default_factory=dict)
    _replicated: dict[GameplayTag, int] = field(default_factory=dict)

    @staticmethod
    def _store(counts: dict[GameplayTag, int], tag: GameplayTag, count: int) -> None:
        if count > 0:
            counts[tag] = count
        else:
            counts.pop(tag, None)

    def set_loose_tag_count(self, tag: GameplayTag, count: int) -> None:
        self._store(self._loose, tag, count)

    def set_replicated_loose_tag_count(self, tag: GameplayTag, count: int) -> None:
        self._store(self._replicated, tag, count)

    def tag_count(self, tag: GameplayTag) -> int:
        return self._loose.get(tag, 0)

    def replicated_tag_count(self, tag: GameplayTag) -> int:
        return self._replicated.get(tag, 0)

    def has_matching_tag(self, tag: GameplayTag) -> bool:
        """True if any owned tag equals ``tag`` or is a child of it."""
        return any(owned.matches(tag) for owned in self._loose)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, GameplayTag) and self.has_matching_tag(tag)

    def __iter__(self) -> Iterator[GameplayTag]:
        return iter(sorted(self._loose))

    def __len__(self) -> int:
        return len(self._loose)


def _apply(container: TagContainer, tag: GameplayTag, count: int, replicated: bool) -> None:
    if replicated:
        container.set_replicated_loose_tag_count(tag, count)
    container.set_loose_tag_count(tag, count)


def add_gameplay_tag(container: TagContainer, tag: GameplayTag, count: int, replicated: bool = False) -> None:
    """Set the tag's count, also on the replicated side when asked."""
    _apply(container, tag, count, replicated)


def remove_gameplay_tag(container: TagContainer, tag: GameplayTag, count: int, replicated: bool = False) -> None:
    """Set the tag's count, also on the replicated side when asked."""
    _apply(container, tag, count, replicated)


def set_gameplay_tag(container: TagContainer, tag: GameplayTag, count: int, replicated: bool = False) -> None:
    """Set the tag's count, also on the replicated side when asked."""
    _apply(container, tag, count, replicated)


ABILITY = GameplayTag("Ability")
ABILITY_GUARD = GameplayTag("Ability.Guard")
CATEGORY = GameplayTag("Category")
CATEGORY_ENTITY = GameplayTag("Category.Entity")
DATA = GameplayTag("Data")
DATA_ATTACK_DIRECTION = GameplayTag("Data.AttackDirection")
STATE = GameplayTag("State")
STATE_IDLE = GameplayTag("State.Idle")
STATE_GRAB_WEAPON = GameplayTag("State.GrabWeapon")
STATE_PUT_WEAPON = GameplayTag("State.PutWeapon")
STATE_ATTACK = GameplayTag("State.Attack")
STATE_ATTACK_COMBO = GameplayTag("State.Attack.Combo")
STATE_ATTACK_HEAVY = GameplayTag("State.Attack.Heavy")
STATE_ATTACK_JUMP = GameplayTag("State.Attack.Jump")
STATUS = GameplayTag("Status")
STATUS_COMBAT = GameplayTag("Status.Combat")
STATUS_BLOCK = GameplayTag("Status.Block")
STATUS_GUARD = GameplayTag("Status.Guard")
STATUS_TARGETING = GameplayTag("Status.Targeting")
STATUS_IS_FALLING = GameplayTag("Status.IsFalling")

DESCRIPTIONS: dict[GameplayTag, str] = {
    ABILITY: "Root of ability tags",
    ABILITY_GUARD: "Basic ability: guard",
    CATEGORY: "Root of actor category tags",
    CATEGORY_ENTITY: "The actor is a living entity",
    DATA: "Data passed through set-by-caller magnitudes",
    DATA_ATTACK_DIRECTION: "Direction of an attack",
    STATE: "Root of action state tags; only one may be held",
    STATE_IDLE: "The actor is idle",
    STATE_GRAB_WEAPON: "The actor is drawing a weapon",
    STATE_PUT_WEAPON: "The actor is sheathing a weapon",
    STATE_ATTACK: "The actor is attacking",
    STATE_ATTACK_COMBO: "The actor is performing a combo attack",
    STATE_ATTACK_HEAVY: "The actor is performing a heavy attack",
    STATE_ATTACK_JUMP: "The actor is performing a jump attack",
    STATUS: "Root of situation tags; several may be held",
    STATUS_COMBAT: "The actor is ready for combat",
    STATUS_BLOCK: "The actor is blocking",
    STATUS_GUARD: "The actor is ready to guard",
    STATUS_TARGETING: "The character has locked on to a target",
    STATUS_IS_FALLING: "The character is falling",
}