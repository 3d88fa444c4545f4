from enum import Enum
from functools import cmp_to_key

from .Metrics import Confidence


class Order(Enum):
    ASCENDING = 1
    DESCENDING = -1


def compare_values(value1, value2):
    return (value1 > value2) - (value1 < value2)


# ############################# sortings #############################
class AbstractSorting:
    """Orders item sets or rules by a primary value, consulting a tie breaker when two values are equal."""

    def __init__(self, order=Order.DESCENDING, tie_breaker=None):
        self.order = order
        self.tie_breaker = tie_breaker

    def with_order(self, order):
        self.order = order
        return self

    def with_tie_breaking(self, tie_breaker):
        self.tie_breaker = tie_breaker
        return self

    def compare_primary(self, o1, o2):
        raise NotImplementedError

    def compare(self, o1, o2):
        result = self.compare_primary(o1, o2)

        if result == 0 and self.tie_breaker is not None:
            result = self.tie_breaker.compare(o1, o2)

        return result * self.order.value

    def sort(self, iterable):
        return sorted(iterable, key=cmp_to_key(self.compare))


class ItemSetSorting(AbstractSorting):

    def compare_primary(self, o1, o2):
        return compare_values(o1.support, o2.support)


class AssociationRuleSorting(AbstractSorting):

    def __init__(self, order=Order.DESCENDING, tie_breaker=None, operator=None):
        super().__init__(order, tie_breaker)
        self.operator = operator if operator is not None else Confidence()

    # rules are compared by their support if no operator is set
    def by_operator(self, operator):
        self.operator = operator
        return self

    def compare_primary(self, o1, o2):
        if self.operator is not None:
            return compare_values(self.operator.evaluate(o1), self.operator.evaluate(o2))
        return compare_values(o1.support, o2.support)


def for_item_sets():
    return ItemSetSorting()


def for_association_rules():
    return AssociationRuleSorting()


# ############################# tie breakers #############################
class AbstractTieBreaker:
    """A chain of comparisons. The parent's criteria are applied before this tie breaker's own comparator."""

    def __init__(self, comparator, parent=None):
        self.comparator = comparator
        self.parent = parent

    def compare(self, o1, o2):
        if self.parent is not None:
            result = self.parent.compare(o1, o2)
            if result != 0:
                return result

        return self.comparator(o1, o2)

    def custom(self, comparator):
        return type(self)(comparator, self)


class ItemSetTieBreaker(AbstractTieBreaker):

    def prefer_small(self):
        return ItemSetTieBreaker(lambda o1, o2: compare_values(len(o2), len(o1)), self)

    def prefer_large(self):
        return ItemSetTieBreaker(lambda o1, o2: compare_values(len(o1), len(o2)), self)


def rule_size(rule):
    return len(rule.body) + len(rule.head)


class AssociationRuleTieBreaker(AbstractTieBreaker):

    def by_operator(self, operator):
        return AssociationRuleTieBreaker(
            lambda o1, o2: compare_values(operator.evaluate(o1), operator.evaluate(o2)), self)

    def prefer_simple(self):
        return AssociationRuleTieBreaker(lambda o1, o2: compare_values(rule_size(o2), rule_size(o1)), self)

    def prefer_complex(self):
        return AssociationRuleTieBreaker(lambda o1, o2: compare_values(rule_size(o1), rule_size(o2)), self)

    def prefer_simple_body(self):
        return AssociationRuleTieBreaker(lambda o1, o2: compare_values(len(o2.body), len(o1.body)), self)

    def prefer_complex_body(self):
        return AssociationRuleTieBreaker(lambda o1, o2: compare_values(len(o1.body), len(o2.body)), self)

    def prefer_simple_head(self):
        return AssociationRuleTieBreaker(lambda o1, o2: compare_values(len(o2.head), len(o1.head)), self)

    def prefer_complex_head(self):
        return AssociationRuleTieBreaker(lambda o1, o2: compare_values(len(o1.head), len(o2.head)), self)


def tie_breaker_for_item_sets():
    return ItemSetTieBreaker(lambda o1, o2: 0)


def tie_breaker_for_association_rules():
    return AssociationRuleTieBreaker(lambda o1, o2: 0)
