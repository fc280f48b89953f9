"""The player's health, mana and stamina bars."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from nlgame.percent_bar import ValuePercentBar

__all__ = ["Attribute", "PlayerStatus"]


class Attribute(Enum):
    HEALTH = "Health"
    MAX_HEALTH = "MaxHealth"
    MANA = "Mana"
    MAX_MANA = "MaxMana"
    STAMINA = "Stamina"
    MAX_STAMINA = "MaxStamina"


@dataclass
class PlayerStatus:
    """Keeps the three status bars in step with attribute changes."""

    health_bar: ValuePercentBar = field(default_factory=ValuePercentBar)
    mana_bar: ValuePercentBar = field(default_factory=ValuePercentBar)
    stamina_bar: ValuePercentBar = field(default_factory=ValuePercentBar)

    def _bars(self) -> tuple[ValuePercentBar, ...]:
        return (self.health_bar, self.mana_bar, self.stamina_bar)

    def _pairs(self) -> tuple[tuple[ValuePercentBar, Attribute, Attribute], ...]:
        return (
            (self.health_bar, Attribute.HEALTH, Attribute.MAX_HEALTH),
            (self.mana_bar, Attribute.MANA, Attribute.MAX_MANA),
            (self.stamina_bar, Attribute.STAMINA, Attribute.MAX_STAMINA),
        )

    def initialize(self, values: Mapping[Attribute, float]) -> None:
        """Fill every bar from a full set of attribute values."""
        for bar, current, maximum in self._pairs():
            bar.initialize_percent(values[current], values[maximum])

    def on_attribute_changed(self, attribute: Attribute, new_value: float) -> None:
        """Route an attribute change to the bar that shows it."""
        for bar, current, maximum in self._pairs():
            if attribute is current:
                bar.set_current_value(new_value)
                return
            if attribute is maximum:
                bar.set_max_value(new_value)
                return
        raise ValueError(f"unknown attribute {attribute!r}")

    def advance(self, seconds: float) -> None:
        for bar in self._bars():
            bar.advance(seconds)