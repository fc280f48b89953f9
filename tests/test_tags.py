import pytest

from nlgame import tags
from nlgame.tags import (
    GameplayTag,
    TagContainer,
    add_gameplay_tag,
    remove_gameplay_tag,
    set_gameplay_tag,
)


def test_tag_matches_itself_and_ancestors():
    combo = GameplayTag("State.Attack.Combo")
    assert combo.matches(GameplayTag("State.Attack.Combo"))
    assert combo.matches(GameplayTag("State.Attack"))
    assert combo.matches(GameplayTag("State"))


def test_tag_does_not_match_descendant_or_prefix_lookalike():
    assert not GameplayTag("State").matches(GameplayTag("State.Idle"))
    assert not GameplayTag("StateX").matches(GameplayTag("State"))


def test_parent_chain():
    combo = GameplayTag("State.Attack.Combo")
    assert combo.parent() == GameplayTag("State.Attack")
    assert combo.parent().parent() == GameplayTag("State")
    assert GameplayTag("State").parent() is None


@pytest.mark.parametrize("bad", ["", ".State", "State.", "State..Idle"])
def test_invalid_tag_names_raise(bad):
    with pytest.raises(ValueError):
        GameplayTag(bad)


def test_declared_tag_names():
    assert str(tags.STATUS_TARGETING) == "Status.Targeting"
    assert tags.STATE_ATTACK_JUMP.parent() == tags.STATE_ATTACK
    assert all(tag in tags.DESCRIPTIONS for tag in (tags.ABILITY, tags.STATUS_IS_FALLING))


def test_container_counts_and_removal():
    container = TagContainer()
    container.set_loose_tag_count(tags.STATE_IDLE, 2)
    assert container.tag_count(tags.STATE_IDLE) == 2
    container.set_loose_tag_count(tags.STATE_IDLE, 0)
    assert container.tag_count(tags.STATE_IDLE) == 0
    assert len(container) == 0


def test_container_matching_uses_hierarchy():
    container = TagContainer()
    container.set_loose_tag_count(tags.STATE_ATTACK_COMBO, 1)
    assert container.has_matching_tag(tags.STATE_ATTACK)
    assert container.has_matching_tag(tags.STATE)
    assert not container.has_matching_tag(tags.STATE_ATTACK_HEAVY)
    assert tags.STATE in container


def test_add_without_replication_leaves_replicated_side_alone():
    container = TagContainer()
    add_gameplay_tag(container, tags.STATUS_COMBAT, 1)
    assert container.tag_count(tags.STATUS_COMBAT) == 1
    assert container.replicated_tag_count(tags.STATUS_COMBAT) == 0


def test_add_with_replication_sets_both():
    container = TagContainer()
    add_gameplay_tag(container, tags.STATUS_GUARD, 3, True)
    assert container.tag_count(tags.STATUS_GUARD) == 3
    assert container.replicated_tag_count(tags.STATUS_GUARD) == 3


def test_remove_sets_given_count():
    container = TagContainer()
    add_gameplay_tag(container, tags.STATUS_BLOCK, 2, True)
    remove_gameplay_tag(container, tags.STATUS_BLOCK, 0, True)
    assert not container.has_matching_tag(tags.STATUS_BLOCK)
    assert container.replicated_tag_count(tags.STATUS_BLOCK) == 0


def test_set_overwrites_count():
    container = TagContainer()
    set_gameplay_tag(container, tags.STATE_IDLE, 5)
    set_gameplay_tag(container, tags.STATE_IDLE, 1)
    assert container.tag_count(tags.STATE_IDLE) == 1
    assert list(container) == [tags.STATE_IDLE]