"""
Tests for the hero conflict rule.
"""

from hero_api.entities import HeroEntity


def test_new_name_containing_existing_name_conflicts():
    existing = HeroEntity(id=1, name="Max")
    assert HeroEntity(id=2, name="Maximus").conflicts_with(existing)


def test_new_name_contained_in_existing_name_does_not_conflict():
    existing = HeroEntity(id=1, name="Maximus")
    assert not HeroEntity(id=2, name="Max").conflicts_with(existing)


def test_equal_id_conflicts():
    existing = HeroEntity(id=7, name="Bolt")
    assert HeroEntity(id=7, name="Storm").conflicts_with(existing)


def test_name_match_is_case_sensitive():
    existing = HeroEntity(id=1, name="max")
    assert not HeroEntity(id=2, name="Maximus").conflicts_with(existing)


def test_missing_id_only_checks_name():
    existing = HeroEntity(id=1, name="Bolt")
    assert not HeroEntity(id=None, name="Storm").conflicts_with(existing)
    assert HeroEntity(id=None, name="BoltStorm").conflicts_with(existing)


def test_with_id_returns_copy():
    hero = HeroEntity(id=None, name="Storm")
    assert hero.with_id(5) == HeroEntity(id=5, name="Storm")
    assert hero.id is None
