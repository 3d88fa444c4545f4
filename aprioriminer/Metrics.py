import numpy as np

from .Errors import DomainError, ensure_greater

# largest representable value, used as the upper bound of unbounded metrics
maxValue = np.finfo("float64").max


# ############################# metrics #############################
class Metric:
    """A measure of the "interestingness" of an association rule."""

    min_value = 0.0
    max_value = 1.0

    def evaluate(self, rule):
        raise NotImplementedError

    def __call__(self, rule):
        return self.evaluate(rule)


class Support(Metric):

    def evaluate(self, rule):
        return rule.support


# fraction of the transactions containing the body which also contain the head
class Confidence(Metric):

    def evaluate(self, rule):
        body_support = rule.body.support
        if body_support > 0:
            return rule.support / body_support
        return 0.0


# ratio of the observed support to the support expected if body and head were independent
class Lift(Metric):

    max_value = maxValue

    def evaluate(self, rule):
        product = rule.body.support * rule.head.support
        if product > 0:
            return rule.support / product
        return 0.0


# difference between the observed support and the support expected if body and head were independent
class Leverage(Metric):

    min_value = -maxValue

    def evaluate(self, rule):
        return rule.support - rule.body.support * rule.head.support


class Conviction(Metric):

    max_value = maxValue

    def evaluate(self, rule):
        numerator = 1 - rule.head.support
        denominator = 1 - Confidence().evaluate(rule)
        if denominator == 0:
            return 0.0
        return numerator / denominator


# ############################# operators #############################
class Operator(Metric):
    """Combines the values of several weighted metrics into a single one."""

    def __init__(self):
        self.metrics = []
        self.weights = []

    def add(self, metric, weight=1.0):
        ensure_greater(weight, 0.0, "The weight must be greater than 0")
        self.metrics.append(metric)
        self.weights.append(weight)
        return self

    def values(self, rule):
        if not self.metrics:
            raise DomainError("No metrics added")
        return np.array([metric.evaluate(rule) for metric in self.metrics], dtype=float)


class ArithmeticMean(Operator):

    def evaluate(self, rule):
        return float(np.average(self.values(rule), weights=self.weights))


class HarmonicMean(Operator):

    def evaluate(self, rule):
        values = self.values(rule)
        # a single zero value dominates the harmonic mean
        if np.any(values == 0):
            return 0.0
        weights = np.array(self.weights)
        denominator = np.sum(weights / values)
        if denominator > 0:
            return float(np.sum(weights) / denominator)
        return 0.0
