import logging

from .AssociationRule import AssociationRule
from .Errors import LookupInconsistency, ensure_probability
from .ItemSet import ItemSet
from .Metrics import Confidence

logger = logging.getLogger(__name__)


# ################## functions for generating association rules ###################
def generate_association_rules(frequent_item_sets, min_confidence):
    """Generate all association rules whose confidence is at least min_confidence.

    The search exploits the anti-monotonicity of confidence: the confidence of A,B -> C is an upper bound
    on the confidence of A -> B,C. Rules with a single item in the head are created first, and items are
    only moved from the body to the head of rules which reach the minimum confidence.

    :param
    @frequent_item_sets - the dict returned by find_frequent_item_sets, keyed by the sorted item tuples
    @min_confidence - the minimum confidence a rule must reach, in [0, 1]
    :return a set of AssociationRule
    """
    ensure_probability(min_confidence, "minimum confidence")
    logger.debug("Generating association rules (min_confidence = %s)", min_confidence)

    rules = set()
    for item_set in frequent_item_sets.values():
        if len(item_set) > 1:
            rules.update(generate_rules(item_set, frequent_item_sets, min_confidence))

    logger.debug("Generated %d association rules", len(rules))
    return rules


# generate the rules of a single item set by repeatedly moving items from the body to the head
def generate_rules(item_set, frequent_item_sets, min_confidence):
    rules = set()
    # the head is always item_set minus the body, so the body alone identifies a visited node
    visited = set()
    stack = [(ItemSet(item_set, item_set.support), ItemSet())]

    while stack:
        [body, head] = stack.pop()

        for item in body:
            rule_body = body.without(item)
            rule_head = head.with_item(item)
            rule_body.support = get_support(frequent_item_sets, rule_body)
            rule_head.support = get_support(frequent_item_sets, rule_head)

            rule = AssociationRule(rule_body, rule_head, item_set.support)

            if Confidence().evaluate(rule) >= min_confidence:
                rules.add(rule)

                if len(rule_body) > 1 and rule_body.key() not in visited:
                    visited.add(rule_body.key())
                    stack.append((rule_body, rule_head))

    return rules


def get_support(frequent_item_sets, item_set):
    frequent_item_set = frequent_item_sets.get(item_set.key())
    if frequent_item_set is None:
        raise LookupInconsistency("The item set " + repr(item_set) + " is not contained by the frequent item sets")
    return frequent_item_set.support

