import pandas as pd

from .Metrics import Confidence, Leverage, Lift
from .Sorting import for_association_rules, for_item_sets


def format_value(value):
    return "{:.2f}".format(value)


# ############################# Class FrequentItemSets/RuleSet #############################
class FrequentItemSets(list):
    """The frequent item sets found by the algorithm, kept in the order given by a sorting."""

    def __init__(self, item_sets=(), sorting=None):
        self.sorting = sorting if sorting is not None else for_item_sets()
        super().__init__(self.sorting.sort(item_sets))

    def sorted_by(self, sorting):
        return FrequentItemSets(self, sorting)

    def filter(self, predicate):
        return FrequentItemSets([item_set for item_set in self if predicate(item_set)], self.sorting)

    def to_frame(self):
        return pd.DataFrame({'itemset': [item_set.key() for item_set in self],
                             'size': [len(item_set) for item_set in self],
                             'support': [item_set.support for item_set in self]},
                            columns=['itemset', 'size', 'support'])

    def __str__(self):
        return "[" + ",\n".join(repr(item_set) + " (support = " + format_value(item_set.support) + ")"
                                for item_set in self) + "]"


class RuleSet(list):
    """The association rules generated by the algorithm, kept in the order given by a sorting."""

    def __init__(self, rules=(), sorting=None):
        self.sorting = sorting if sorting is not None else for_association_rules()
        super().__init__(self.sorting.sort(rules))

    def sorted_by(self, sorting):
        return RuleSet(self, sorting)

    def filter(self, predicate):
        return RuleSet([rule for rule in self if predicate(rule)], self.sorting)

    def to_frame(self):
        confidence = Confidence()
        lift = Lift()
        leverage = Leverage()
        return pd.DataFrame([[rule.body.key(), rule.head.key(), rule.support, confidence.evaluate(rule),
                              lift.evaluate(rule), leverage.evaluate(rule)] for rule in self],
                            columns=['body', 'head', 'support', 'confidence', 'lift', 'leverage'])

    def __str__(self):
        confidence = Confidence()
        lift = Lift()
        leverage = Leverage()
        return "[" + ",\n".join(repr(rule) +
                                " (support = " + format_value(rule.support) +
                                ", confidence = " + format_value(confidence.evaluate(rule)) +
                                ", lift = " + format_value(lift.evaluate(rule)) +
                                ", leverage = " + format_value(leverage.evaluate(rule)) + ")"
                                for rule in self) + "]"


# ############################# Class Output #############################
class Output:
    """The result of running the algorithm.

    :param
    @configuration - the Configuration which was used
    @start_time - the time the algorithm was started at, in milliseconds since the epoch
    @end_time - the time the algorithm terminated at, in milliseconds since the epoch
    @frequent_item_sets - the FrequentItemSets, sorted by descending support
    @rule_set - the RuleSet, or None if no rules were generated
    """
    def __init__(self, configuration, start_time, end_time, frequent_item_sets, rule_set=None):
        self.configuration = configuration
        self.start_time = start_time
        self.end_time = end_time
        self.frequent_item_sets = frequent_item_sets
        self.rule_set = rule_set

    @property
    def runtime(self):
        return self.end_time - self.start_time
