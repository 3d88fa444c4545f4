import pytest

from aprioriminer import AssociationRule, DomainError, ItemSet


def test_rule():
    rule = AssociationRule(ItemSet(['milk', 'sugar'], 0.5), ItemSet(['coffee'], 0.75), 0.5)

    assert repr(rule) == "[milk, sugar] -> [coffee]"
    assert rule.key() == (('milk', 'sugar'), ('coffee',))
    assert rule == AssociationRule(ItemSet(['sugar', 'milk']), ItemSet(['coffee']), 0.5)
    assert len({rule, AssociationRule(ItemSet(['sugar', 'milk']), ItemSet(['coffee']), 0.5)}) == 1


def test_covers():
    rule = AssociationRule(ItemSet(['milk', 'sugar']), ItemSet(['coffee']), 0.5)

    assert rule.covers(['sugar', 'bread', 'milk'])
    assert not rule.covers(['sugar', 'coffee'])


@pytest.mark.parametrize('body, head, support', [
    ([], ['a'], 0.5),
    (['a'], [], 0.5),
    (['a', 'b'], ['b'], 0.5),
    (['a'], ['b'], 1.5),
])
def test_invalid_rules(body, head, support):
    with pytest.raises(DomainError):
        AssociationRule(ItemSet(body), ItemSet(head), support)


def test_rules_are_ordered_by_support():
    rule1 = AssociationRule(ItemSet(['a']), ItemSet(['b']), 0.25)
    rule2 = AssociationRule(ItemSet(['a']), ItemSet(['c']), 0.5)

    assert rule1 < rule2
    assert sorted([rule2, rule1]) == [rule1, rule2]
