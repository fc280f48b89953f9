# nlgame

Gameplay helpers for an action role-playing game. The package holds the
parts of the game logic that do not need an engine:

- `nlgame.enums`: the game's enumerations: `EntityCategory`, `InputID`,
  `EquippedHandType`, `HandEquipStatus`, `WeaponType`, `WeaponAttachPosition`,
  `CombatWeaponState`, `MovementDirection` and `TargetHeight`. Each member has
  a `display_name`. Members that would be called `None` are spelled `None_`
  (for example `WeaponType.None_`). `enum_key_as_string` returns a member's
  bare key (`"None"` for `WeaponType.None_`). It also accepts a qualified
  string such as `"WeaponType::Sword"` and returns `"Sword"`.
- `nlgame.tags`: hierarchical `GameplayTag` values such as
  `State.Attack.Combo`, with `matches` and `parent`. A `TagContainer` keeps
  loose and replicated loose tag counts. `has_matching_tag` finds a tag or any
  of its children. The helpers `add_gameplay_tag`, `remove_gameplay_tag` and
  `set_gameplay_tag` each set a tag's count, and also set the replicated count
  when `replicated` is true. The module also defines the game's tags as
  constants (`STATE_IDLE`, `STATUS_COMBAT`, `STATUS_GUARD`, `STATUS_TARGETING`
  and others) and gives a short description of each in `DESCRIPTIONS`.
- `nlgame.locate`:
  - `direction_by_movement_data` and `direction_by_vector` map an exact input
    such as `(-1, 1)` to a `MovementDirection` and fall back to forward.
  - `direction_by_angle` sorts an angle into bands of directions.
  - `to_simple_direction` turns diagonals into `L` or `R`.
  - `look_at_rotation` returns the `Rotator` that points from one point to
    another.
  - `target_height_by_point` sorts a point on an actor into a `TargetHeight`.
- `nlgame.weapon`: a `Weapon` that attaches to named sockets on a
  `Character`:
  - `equip` uses `weapon_r` or `weapon_l`.
  - `unequip` uses `weapon_back_r`, `weapon_waistback_l` and so on, taken from
    the weapon's attach position.
  - `swap_two_hand` moves a two-handed weapon to `weapon_twoHand`.
- `nlgame.state`:
  - `combat_weapon_state` works out a `CombatWeaponState` from the main and
    sub weapon. A katana counts as `TwoHandBow`.
  - `is_target_mode`, `is_idle`, `is_combat_mode` and `is_guarding` query a
    `TagContainer`.
  - `change_state` replaces one state tag with another.
- `nlgame.percent_bar`: a `ValuePercentBar` for health, mana or stamina.
  - `percent` follows the value immediately.
  - When the value drops, `delayed_percent` waits `delayed_time` seconds
    (1.2 by default). It then falls by 0.01 every `percent_decrease_time`
    seconds (0.025 by default) until it reaches `percent`.
  - Time passes only when you call `advance(seconds)`.
  - A maximum value of zero raises `ValueError`.
- `nlgame.player_status`: a `PlayerStatus` with health, mana and stamina bars.
  `initialize` fills them from a mapping of `Attribute` to value.
  `on_attribute_changed` sends a change to the right bar, and `advance`
  advances all three bars.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from nlgame.enums import EquippedHandType, WeaponType
from nlgame.state import combat_weapon_state
from nlgame.weapon import Weapon

sword = Weapon(weapon_type=WeaponType.Sword, equipped_hand_type=EquippedHandType.OneHand)
shield = Weapon(weapon_type=WeaponType.Shield, equipped_hand_type=EquippedHandType.OneHand)
print(combat_weapon_state(sword, shield))  # CombatWeaponState.OneHandWeaponAndShield
```

```python
from nlgame.percent_bar import ValuePercentBar

bar = ValuePercentBar()
bar.initialize_percent(100, 100)
bar.set_current_value(50)   # bar.percent is 0.5 at once; bar.delayed_percent is still 1.0
bar.advance(2.0)            # after 1.2 s the delayed bar starts draining toward 0.5
```

## What the package does not do

This is a library of game logic only. It does not draw anything, play
animations or run a game loop, and it has no command to run. Sockets are
plain names stored on a `Character`. The bars hold numbers for you to display.
You drive timing yourself through `advance`.