import math

from .Errors import ensure_at_least, ensure_at_maximum


# ############################# filters #############################
class AbstractFilter:
    """A predicate on item sets or rules. Filters created from another filter must satisfy both."""

    def __init__(self, predicate=None, parent=None):
        self.predicate = predicate if predicate is not None else (lambda x: True)
        self.parent = parent

    def test(self, x):
        return self.predicate(x) and (self.parent is None or self.parent.test(x))

    def __call__(self, x):
        return self.test(x)


def check_size_range(min_size, max_size):
    ensure_at_least(min_size, 0, "The minimum size must be at least 0")
    ensure_at_least(max_size, min_size, "The maximum size must be at least the minimum size")


class ItemSetFilter(AbstractFilter):

    def by_support(self, min_support, max_support=1.0):
        ensure_at_least(min_support, 0.0, "The minimum support must be at least 0")
        ensure_at_maximum(min_support, 1.0, "The minimum support must be at maximum 1")
        ensure_at_maximum(max_support, 1.0, "The maximum support must be at maximum 1")
        ensure_at_least(max_support, min_support, "The maximum support must be at least the minimum support")
        return ItemSetFilter(lambda x: min_support <= x.support <= max_support, self)

    def by_size(self, min_size, max_size=math.inf):
        check_size_range(min_size, max_size)
        return ItemSetFilter(lambda x: min_size <= len(x) <= max_size, self)


class AssociationRuleFilter(AbstractFilter):

    def by_operator(self, operator, min_performance, max_performance=math.inf):
        ensure_at_least(min_performance, 0.0, "The minimum performance must be at least 0")
        ensure_at_least(max_performance, min_performance,
                        "The maximum performance must be at least the minimum performance")
        return AssociationRuleFilter(lambda x: min_performance <= operator.evaluate(x) <= max_performance, self)

    # the size of a rule is the number of items in its body and head
    def by_size(self, min_size, max_size=math.inf):
        check_size_range(min_size, max_size)
        return AssociationRuleFilter(lambda x: min_size <= len(x.body) + len(x.head) <= max_size, self)

    def by_body_size(self, min_size, max_size=math.inf):
        check_size_range(min_size, max_size)
        return AssociationRuleFilter(lambda x: min_size <= len(x.body) <= max_size, self)

    def by_head_size(self, min_size, max_size=math.inf):
        check_size_range(min_size, max_size)
        return AssociationRuleFilter(lambda x: min_size <= len(x.head) <= max_size, self)


def for_item_sets():
    return ItemSetFilter()


def for_association_rules():
    return AssociationRuleFilter()
