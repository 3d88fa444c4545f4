import random

import pytest

from aprioriminer import find_frequent_item_sets

# bread/butter/sugar/coffee/milk baskets; their supports are worked out by hand in the tests
BASKETS = [
    ('bread', 'butter', 'sugar'),
    ('coffee', 'milk', 'sugar'),
    ('bread', 'coffee', 'milk', 'sugar'),
    ('coffee', 'milk'),
]


@pytest.fixture
def transactions():
    return list(BASKETS)


@pytest.fixture
def frequent_item_sets(transactions):
    return find_frequent_item_sets(transactions, 0.5)


@pytest.fixture
def random_transactions():
    rng = random.Random(42)
    return [tuple(item for item in range(8) if rng.random() < 0.45) for _ in range(60)]
