# ############################# Errors #############################
class DomainError(ValueError):
    """Raised when a threshold, weight or other configuration value lies outside its allowed range."""


class LookupInconsistency(LookupError):
    """Raised when a sub-itemset is missing from the frequent item sets passed to the rule generator.

    This means the mapping was not produced by (or was modified after) the frequent item set miner.
    """


# ############################# range checks #############################
# written as positive conditions, so that NaN fails them
def ensure_at_least(value, minimum, message):
    if not value >= minimum:
        raise DomainError(message)


def ensure_at_maximum(value, maximum, message):
    if not value <= maximum:
        raise DomainError(message)


def ensure_greater(value, minimum, message):
    if not value > minimum:
        raise DomainError(message)


def ensure_probability(value, name):
    ensure_at_least(value, 0.0, "The " + name + " must be at least 0")
    ensure_at_maximum(value, 1.0, "The " + name + " must be at maximum 1")
