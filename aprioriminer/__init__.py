from .Apriori import Apriori, Configuration
from .AssociationRule import AssociationRule
from .AssociationRuleGenerator import generate_association_rules
from .Errors import DomainError, LookupInconsistency
from .FrequentItemSetMiner import find_frequent_item_sets
from .ItemSet import ItemSet
from .Output import FrequentItemSets, Output, RuleSet
from .Tasks import sweep
from .Transactions import TransactionFile, from_data_frame
