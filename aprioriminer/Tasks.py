import logging

from .AssociationRuleGenerator import generate_association_rules
from .Errors import DomainError, ensure_at_least, ensure_greater
from .FrequentItemSetMiner import find_frequent_item_sets

logger = logging.getLogger(__name__)


# ################## threshold sweep ###################
def sweep(run, max_threshold, min_threshold, delta, target_count):
    """Run with a decreasing threshold until the result has target_count elements or min_threshold is passed.

    The threshold starts at max_threshold and is decreased by delta after each run. The largest result seen
    is returned, so the target count is not guaranteed to be reached.
    """
    ensure_greater(delta, 0.0, "The delta must be greater than 0")
    ensure_at_least(max_threshold, min_threshold, "The maximum threshold must be at least the minimum threshold")
    ensure_at_least(target_count, 1, "The target count must be at least 1")

    result = None
    current = max_threshold

    while current >= min_threshold and (result is None or len(result) < target_count):
        candidate = run(current)
        logger.debug("threshold = %s: %d results", current, len(candidate))

        if result is None or len(candidate) >= len(result):
            result = candidate

        current -= delta

    return result


def find_frequent_item_sets_task(transactions, configuration):
    """Find frequent item sets as configured. Sweeps the minimum support if a frequent item set count is given."""
    if configuration.frequent_item_set_count > 0:
        # each run traverses the transactions again
        if iter(transactions) is transactions:
            raise DomainError("The transactions must support repeated traversal, not be a single-use iterator")

        result = sweep(lambda min_support: find_frequent_item_sets(transactions, min_support),
                       configuration.max_support, configuration.min_support, configuration.support_delta,
                       configuration.frequent_item_set_count)
        return result if result is not None else dict()

    return find_frequent_item_sets(transactions, configuration.min_support)


def generate_association_rules_task(frequent_item_sets, configuration):
    """Generate association rules as configured. Sweeps the minimum confidence if a rule count is given."""
    if configuration.rule_count > 0:
        result = sweep(lambda min_confidence: generate_association_rules(frequent_item_sets, min_confidence),
                       configuration.max_confidence, configuration.min_confidence, configuration.confidence_delta,
                       configuration.rule_count)
        return result if result is not None else set()

    return generate_association_rules(frequent_item_sets, configuration.min_confidence)
