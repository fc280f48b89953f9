"""Gameplay helpers for an action role-playing game: enums, tags, directions, weapons, combat states and status bars."""

__version__ = "0.1.0"
__all__ = ["enums", "tags", "locate", "weapon", "state", "percent_bar", "player_status"]