from bisect import bisect_left

from .Errors import ensure_probability


# ############################# Class ItemSet/TransactionalItemSet #############################
class ItemSet(list):
    """A sorted, duplicate-free list of items with an attached support.

    Two item sets are equal iff they contain the same items; the support is metadata only.
    Use key() rather than the item set itself when storing item sets in a dict.
    """

    def __init__(self, items=(), support=0.0):
        super().__init__()
        self._support = 0.0
        self.support = support
        for item in items:
            self.add(item)

    @property
    def support(self):
        return self._support

    @support.setter
    def support(self, support):
        ensure_probability(support, "support")
        self._support = support

    def add(self, item):
        index = bisect_left(self, item)
        if index < len(self) and self[index] == item:
            return False
        super().insert(index, item)
        return True

    # keep the list sorted whichever way an item is added
    def append(self, item):
        self.add(item)

    def insert(self, index, item):
        self.add(item)

    def extend(self, items):
        for item in items:
            self.add(item)

    def __iadd__(self, items):
        self.extend(items)
        return self

    def __imul__(self, n):
        raise TypeError("The items of an item set cannot be repeated")

    # the position of an item is given by the order of the items
    def __setitem__(self, index, item):
        raise TypeError("The items of an item set cannot be assigned by index")

    def reverse(self):
        raise TypeError("An item set cannot be reversed")

    def sort(self, *args, **kwargs):
        raise TypeError("An item set is always sorted")

    def key(self):
        return tuple(self)

    def prefix_matches(self, other, k):
        if len(self) < k or len(other) < k:
            return False
        return self[:k] == other[:k]

    def copy(self):
        return ItemSet(self, self.support)

    def without(self, item):
        item_set = self.copy()
        item_set.remove(item)
        return item_set

    def with_item(self, item):
        item_set = self.copy()
        item_set.add(item)
        return item_set

    __hash__ = None

    def __repr__(self):
        return "[" + ", ".join(str(item) for item in self) + "]"


class TransactionalItemSet(ItemSet):
    """An item set which also remembers the indices of the transactions it occurs in."""

    def __init__(self, items=(), support=0.0, transactions=None):
        super().__init__(items, support)
        self.transactions = set(transactions) if transactions is not None else set()

    def copy(self):
        return TransactionalItemSet(self, self.support, self.transactions)

    def to_item_set(self):
        return ItemSet(self, self.support)
