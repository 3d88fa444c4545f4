import logging
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
from aprioriminer import Apriori, Configuration, TransactionFile
from aprioriminer.Filter import for_association_rules
from aprioriminer.Metrics import Lift


def main():
    logging.basicConfig(level=logging.INFO)

    transactions = TransactionFile(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'Data', 'demo.csv'))

    # try to find 8 frequent item sets and 5 rules, lowering the thresholds step by step
    configuration = Configuration(min_support=0.1, max_support=1.0, support_delta=0.1, frequent_item_set_count=8,
                                  generate_rules=True, min_confidence=0.5, max_confidence=1.0,
                                  confidence_delta=0.1, rule_count=5)
    output = Apriori(configuration).fit(transactions)

    print("Frequent item sets: \n")
    print(output.frequent_item_sets.to_frame().to_string(index=False))

    if output.rule_set:
        print("\nAssociation rules: \n")
        print(output.rule_set)

        print("\nAssociation rules with a lift of at least 1: \n")
        print(output.rule_set.filter(for_association_rules().by_operator(Lift(), 1.0)))

    print("\nRuntime: " + str(output.runtime) + " ms")


if __name__ == "__main__":
    main()
