import logging
import time

from .Errors import DomainError, ensure_at_least, ensure_greater, ensure_probability
from .ItemSet import ItemSet
from .Output import FrequentItemSets, Output, RuleSet
from .Tasks import find_frequent_item_sets_task, generate_association_rules_task

logger = logging.getLogger(__name__)


class Configuration:
    """The thresholds used by the Apriori algorithm, checked for consistency once when created.

    :param
    @min_support - the minimum support an item set must reach to be considered frequent
    @max_support - the minimum support used initially when trying to find frequent_item_set_count item sets
    @support_delta - the value the minimum support is decreased by after each try
    @frequent_item_set_count - the number of frequent item sets to try to find, or 0 to use min_support only
    @generate_rules - True: association rules are generated from the frequent item sets
    @min_confidence - the minimum confidence a rule must reach
    @max_confidence - the minimum confidence used initially when trying to generate rule_count rules
    @confidence_delta - the value the minimum confidence is decreased by after each try
    @rule_count - the number of rules to try to generate, or 0 to use min_confidence only
    """
    def __init__(self,
                 min_support=0.0,
                 max_support=1.0,
                 support_delta=0.1,
                 frequent_item_set_count=0,
                 generate_rules=False,
                 min_confidence=0.0,
                 max_confidence=1.0,
                 confidence_delta=0.1,
                 rule_count=0
                 ):
        check_threshold_range(min_support, max_support, support_delta, "support")
        check_threshold_range(min_confidence, max_confidence, confidence_delta, "confidence")
        ensure_at_least(frequent_item_set_count, 0, "The number of frequent item sets must be at least 0")
        ensure_at_least(rule_count, 0, "The rule count must be at least 0")

        self.min_support = min_support
        self.max_support = max_support
        self.support_delta = support_delta
        self.frequent_item_set_count = frequent_item_set_count
        self.generate_rules = generate_rules
        self.min_confidence = min_confidence
        self.max_confidence = max_confidence
        self.confidence_delta = confidence_delta
        self.rule_count = rule_count

    def __repr__(self):
        return "Configuration(" + ", ".join(name + "=" + repr(value) for name, value in vars(self).items()) + ")"


def check_threshold_range(min_threshold, max_threshold, delta, name):
    ensure_probability(min_threshold, "minimum " + name)
    ensure_probability(max_threshold, "maximum " + name)
    ensure_at_least(max_threshold, min_threshold, "The maximum " + name + " must be at least the minimum " + name)
    ensure_greater(delta, 0.0, "The " + name + " delta must be greater than 0")


class Apriori:
    """Implementation of the Apriori algorithm, which finds frequent item sets in a collection of transactions
    and optionally derives association rules from them.

    Frequent item sets are found level by level: the item sets of length k + 1 are only created from frequent
    item sets of length k, since a superset of an item set that is not frequent cannot be frequent either.
    Association rules are derived by moving items from the body of a rule to its head as long as the rule
    reaches the minimum confidence.

    Copyright (C) 2017 - 2019 Michael Rapp

    Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance
    with the License. You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software distributed under the License is distributed
    on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License
    for the specific language governing permissions and limitations under the License.
    """

    """
    :param
    @configuration - the Configuration to use. If omitted, one is created from the keyword arguments,
        which may not be given together with a configuration
    """
    def __init__(self, configuration=None, **kwargs):
        if configuration is not None and kwargs:
            raise DomainError("Either a configuration or keyword arguments may be given, not both")
        self.configuration = configuration if configuration is not None else Configuration(**kwargs)

    def fit(self, transactions):
        """Run the algorithm on transactions.

        The transactions must be an iterable that can be traversed more than once if a frequent item set
        count is configured, e.g. a list or a TransactionFile.
        :return an Output
        """
        logger.info("Starting Apriori algorithm...")
        start_time = current_millis()

        frequent_item_sets = find_frequent_item_sets_task(transactions, self.configuration)

        rule_set = None
        if self.configuration.generate_rules:
            rule_set = RuleSet(generate_association_rules_task(frequent_item_sets, self.configuration))

        sorted_item_sets = FrequentItemSets(ItemSet(item_set, item_set.support)
                                            for item_set in frequent_item_sets.values())
        end_time = current_millis()

        output = Output(self.configuration, start_time, end_time, sorted_item_sets, rule_set)
        logger.info("Apriori algorithm terminated after %d milliseconds", output.runtime)
        return output


def current_millis():
    return int(round(time.time() * 1000))
