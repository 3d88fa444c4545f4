from .Errors import DomainError, ensure_probability


# ############################# Class AssociationRule #############################
class AssociationRule:
    """A rule "body -> head", stating that transactions containing the body tend to contain the head.

    :param
    @body - the ItemSet of the rule's antecedent, with its own support
    @head - the ItemSet of the rule's consequent, with its own support
    @support - the support of the union of body and head
    """
    def __init__(self, body, head, support):
        if not body or not head:
            raise DomainError("The body and the head of a rule may not be empty")
        if set(body) & set(head):
            raise DomainError("The body and the head of a rule may not share items")
        ensure_probability(support, "support")
        self.body = body
        self.head = head
        self.support = support

    def key(self):
        return self.body.key(), self.head.key()

    # true iff all items of the body are contained in items
    def covers(self, items):
        items = set(items)
        return all(item in items for item in self.body)

    def __eq__(self, other):
        if not isinstance(other, AssociationRule):
            return NotImplemented
        return self.key() == other.key() and self.support == other.support

    def __hash__(self):
        return hash((self.key(), self.support))

    # rules are ordered by their support
    def __lt__(self, other):
        return self.support < other.support

    def __repr__(self):
        return repr(self.body) + " -> " + repr(self.head)
