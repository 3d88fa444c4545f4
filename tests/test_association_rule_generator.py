from itertools import combinations

import pytest

from aprioriminer import DomainError, ItemSet, LookupInconsistency, find_frequent_item_sets, \
    generate_association_rules
from aprioriminer.Metrics import Confidence


def rule_keys(rules):
    return {rule.key() for rule in rules}


def brute_force_rules(frequent_item_sets, min_confidence):
    rules = set()
    for key, item_set in frequent_item_sets.items():
        for size in range(1, len(key)):
            for body in combinations(key, size):
                if item_set.support / frequent_item_sets[body].support >= min_confidence:
                    rules.add((body, tuple(item for item in key if item not in body)))
    return rules


def test_generate_association_rules(frequent_item_sets):
    rules = generate_association_rules(frequent_item_sets, 1.0)

    assert rule_keys(rules) == {
        (('milk', 'sugar'), ('coffee',)),
        (('coffee', 'sugar'), ('milk',)),
        (('bread',), ('sugar',)),
        (('coffee',), ('milk',)),
        (('milk',), ('coffee',)),
    }


def test_low_confidence_branch_is_not_refined(frequent_item_sets):
    rules = rule_keys(generate_association_rules(frequent_item_sets, 1.0))

    # confidence 0.5 / 0.75, so neither the rule nor its specializations are generated
    assert (('coffee', 'milk'), ('sugar',)) not in rules
    assert (('coffee',), ('milk', 'sugar')) not in rules
    assert (('milk',), ('coffee', 'sugar')) not in rules


def test_rule_supports(frequent_item_sets):
    for rule in generate_association_rules(frequent_item_sets, 0.0):
        assert not set(rule.body) & set(rule.head)
        union = tuple(sorted(set(rule.body) | set(rule.head)))
        assert frequent_item_sets[union].support == rule.support
        assert rule.body.support == frequent_item_sets[rule.body.key()].support
        assert rule.head.support == frequent_item_sets[rule.head.key()].support


def test_matches_brute_force(random_transactions):
    frequent_item_sets = find_frequent_item_sets(random_transactions, 0.1)

    for min_confidence in [0.0, 0.3, 0.5, 0.7, 0.9, 1.0]:
        assert rule_keys(generate_association_rules(frequent_item_sets, min_confidence)) == \
            brute_force_rules(frequent_item_sets, min_confidence)


def test_no_duplicate_rules(random_transactions):
    frequent_item_sets = find_frequent_item_sets(random_transactions, 0.1)
    rules = generate_association_rules(frequent_item_sets, 0.0)

    assert len(rules) == len(rule_keys(rules))


def test_confidence_anti_monotonicity(random_transactions):
    frequent_item_sets = find_frequent_item_sets(random_transactions, 0.1)
    rules = {rule.key(): rule for rule in generate_association_rules(frequent_item_sets, 0.0)}
    confidence = Confidence()

    for [body, head], rule in rules.items():
        if len(body) > 1:
            for item in body:
                specialized_body = tuple(x for x in body if x != item)
                specialized_head = tuple(sorted(head + (item,)))
                specialized_rule = rules[(specialized_body, specialized_head)]
                assert confidence.evaluate(rule) >= confidence.evaluate(specialized_rule)


def test_threshold_monotonicity(random_transactions):
    frequent_item_sets = find_frequent_item_sets(random_transactions, 0.1)
    counts = [len(generate_association_rules(frequent_item_sets, min_confidence / 10.0))
              for min_confidence in range(11)]

    assert counts == sorted(counts, reverse=True)


def test_single_items_generate_no_rules():
    frequent_item_sets = {('a',): ItemSet(['a'], 0.5), ('b',): ItemSet(['b'], 0.5)}

    assert generate_association_rules(frequent_item_sets, 0.0) == set()


def test_missing_sub_item_set():
    frequent_item_sets = {('a',): ItemSet(['a'], 0.5), ('a', 'b'): ItemSet(['a', 'b'], 0.5)}

    with pytest.raises(LookupInconsistency):
        generate_association_rules(frequent_item_sets, 0.0)


def test_zero_body_support_has_zero_confidence(transactions):
    frequent_item_sets = find_frequent_item_sets(transactions, 0.0)
    rules = generate_association_rules(frequent_item_sets, 0.0)

    assert (('butter', 'coffee'), ('milk',)) in rule_keys(rules)
    assert rule_keys(generate_association_rules(frequent_item_sets, 0.01)) < rule_keys(rules)


@pytest.mark.parametrize('min_confidence', [-0.5, 1.5, float('nan')])
def test_invalid_min_confidence(frequent_item_sets, min_confidence):
    with pytest.raises(DomainError):
        generate_association_rules(frequent_item_sets, min_confidence)
