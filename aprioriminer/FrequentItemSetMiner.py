import logging

from .Errors import ensure_probability
from .ItemSet import TransactionalItemSet

logger = logging.getLogger(__name__)


# ################## functions for the level-wise (Apriori) search ###################
def find_frequent_item_sets(transactions, min_support):
    """Find all item sets whose support is at least min_support.

    :param
    @transactions - an iterable of transactions, each one an iterable of hashable, totally ordered items.
        Items occurring more than once in a transaction are counted once
    @min_support - the minimum support an item set must reach to be considered frequent, in [0, 1]
    :return a dict with the sorted tuple of each frequent item set's items as key and the ItemSet as value
    """
    ensure_probability(min_support, "minimum support")
    logger.debug("Searching for frequent item sets (min_support = %s)", min_support)

    frequent_item_sets = dict()
    [candidates, transaction_count] = generate_initial_item_sets(transactions)
    k = 1

    while candidates:
        frequent_candidates = filter_frequent_item_sets(candidates, transaction_count, min_support)
        logger.debug("k = %d: %d candidates, %d frequent", k, len(candidates), len(frequent_candidates))

        candidates = combine_item_sets(frequent_candidates, k)

        for item_set in frequent_candidates:
            frequent_item_sets[item_set.key()] = item_set.to_item_set()
        k += 1

    logger.debug("Found %d frequent item sets", len(frequent_item_sets))
    return frequent_item_sets


# scan all transactions once, creating an item set per distinct item together with the ids of
# the transactions it occurs in
def generate_initial_item_sets(transactions):
    item_sets = dict()
    transaction_count = 0

    for transaction in transactions:
        for item in set(transaction):
            item_set = item_sets.get(item)
            if item_set is None:
                item_set = TransactionalItemSet([item])
                item_sets[item] = item_set
            item_set.transactions.add(transaction_count)

        transaction_count += 1

    return [list(item_sets.values()), transaction_count]


# assign the support of each candidate and keep those which are frequent, in sorted order
def filter_frequent_item_sets(candidates, transaction_count, min_support):
    frequent_candidates = []

    for candidate in candidates:
        candidate.support = calculate_support(transaction_count, len(candidate.transactions))

        if candidate.support >= min_support:
            frequent_candidates.append(candidate)

    return sorted(frequent_candidates, key=TransactionalItemSet.key)


# Create item sets of length k + 1 by combining two item sets of length k whose first k - 1 items are equal.
# Because item_sets is sorted, all item sets sharing a prefix are adjacent and every candidate is created
# exactly once. The transactions of a candidate are those shared by both of its parents.
def combine_item_sets(item_sets, k):
    combined_item_sets = []

    for i in range(len(item_sets)):
        item_set1 = item_sets[i]

        for j in range(i + 1, len(item_sets)):
            item_set2 = item_sets[j]

            if not item_set1.prefix_matches(item_set2, k - 1):
                break

            combined_item_set = TransactionalItemSet(item_set1,
                                                     transactions=item_set1.transactions & item_set2.transactions)
            combined_item_set.add(item_set2[k - 1])
            combined_item_sets.append(combined_item_set)

    return combined_item_sets


def calculate_support(transaction_count, occurrences):
    if transaction_count > 0:
        return occurrences / transaction_count
    return 0.0
