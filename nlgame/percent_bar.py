"""A value bar whose trailing indicator drains towards the current value."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["ValuePercentBar"]

_DECREASE_STEP = 0.01


@dataclass
class ValuePercentBar:
    """Two overlaid progress bars: the value itself and a delayed trail.

    When the value drops, the main bar jumps to the new percent at once and
    the trail follows after ``delayed_time`` seconds, losing one percent every
    ``percent_decrease_time`` seconds until it reaches the new percent.
    """

    main_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    sub_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    delayed_time: float = 1.2
    percent_decrease_time: float = 0.025
    current_value: float = 0.0
    max_value: float = 0.0
    percent: float = field(default=0.0, init=False)
    delayed_percent: float = field(default=0.0, init=False)
    _trail_current: float = field(default=0.0, init=False, repr=False)
    _trail_final: float = field(default=0.0, init=False, repr=False)
    _until_tick: float | None = field(default=None, init=False, repr=False)

    @property
    def draining(self) -> bool:
        """True while the trail is scheduled to shrink."""
        return self._until_tick is not None

    def _ratio(self) -> float:
        if self.max_value == 0:
            raise ValueError("max value must be non-zero")
        return self.current_value / self.max_value

    def initialize_percent(self, current_value: float, max_value: float) -> None:
        self.current_value = current_value
        self.max_value = max_value
        self.percent = self.delayed_percent = self._ratio()

    def set_current_value(self, new_value: float) -> None:
        """Apply a new value; a drop starts the delayed drain of the trail."""
        if new_value < self.current_value:
            previous = self.current_value
            self.current_value = new_value
            if self.max_value == 0:
                raise ValueError("max value must be non-zero")
            previous_percent = previous / self.max_value
            new_percent = self._ratio()
            self.percent = new_percent
            self._trail_current = previous_percent
            self._trail_final = new_percent
            self._until_tick = self.delayed_time
        else:
            self.current_value = new_value
            self.percent = self.delayed_percent = self._ratio()

    def set_max_value(self, new_value: float) -> None:
        self.max_value = new_value
        new_percent = self._ratio()
        self._trail_final = new_percent
        self.percent = self.delayed_percent = new_percent

    def _tick(self) -> None:
        self._trail_current -= _DECREASE_STEP
        self.delayed_percent = self._trail_current
        if self._trail_current <= self._trail_final:
            self._trail_current = self._trail_final
            self.delayed_percent = self._trail_current
            self._until_tick = None

    def advance(self, seconds: float) -> None:
        """Let ``seconds`` of game time pass, firing any due drain steps."""
        if seconds < 0:
            raise ValueError("cannot advance by a negative time")
        remaining = seconds
        while self._until_tick is not None and self._until_tick <= remaining:
            remaining -= self._until_tick
            self._until_tick = self.percent_decrease_time
            self._tick()
        if self._until_tick is not None:
            self._until_tick -= remaining