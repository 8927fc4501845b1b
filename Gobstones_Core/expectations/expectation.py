"""Fluent expectations: chain matchers on a value, then act on the result."""

from . import matchers


class FinishedExpectation:
    """Something with a boolean result that can be turned into an action."""

    def get_result(self):
        raise NotImplementedError

    def or_throw(self, error):
        """Raise `error` if the result is false."""
        if not self.get_result():
            raise error

    def or_yield(self, value):
        return value if not self.get_result() else None

    def and_do_or(self, action_when_true, action_when_false):
        if self.get_result():
            action_when_true()
        else:
            action_when_false()

    def and_do(self, action):
        self.and_do_or(action, lambda: None)

    def or_do(self, action):
        self.and_do_or(lambda: None, action)


class JoinedExpectation(FinishedExpectation):
    def __init__(self, expectations, joiner):
        self.expectations = list(expectations)
        self._result = joiner(e.get_result() for e in self.expectations)

    def get_result(self):
        return self._result


class MatcherCall:
    __slots__ = ("matcher", "args", "result")

    def __init__(self, matcher, args, result):
        self.matcher = matcher
        self.args = args
        self.result = result

    def __repr__(self):
        return f"MatcherCall({self.matcher}, {self.args!r}, {self.result})"


class Expectation(FinishedExpectation):
    """Accumulates matcher results over one value.

    The overall result is the conjunction of every matcher called so far, and
    it is None until the first matcher runs. `not_` flips the meaning of the
    matchers that follow it.
    """

    def __init__(self, element):
        self.element = element
        self.is_not = False
        self.states = []
        self._result = None

    @property
    def not_(self):
        self.is_not = not self.is_not
        return self

    def get_result(self):
        return self._result

    # Generic

    def to_be(self, value):
        return self._run("to_be", value)

    def to_be_like(self, value):
        return self._run("to_be_like", value)

    def to_be_none(self):
        return self._run("to_be_none")

    def to_be_defined(self):
        return self._run("to_be_defined")

    def to_be_truthy(self):
        return self._run("to_be_truthy")

    def to_be_falsy(self):
        return self._run("to_be_falsy")

    def to_have_type(self, type_name):
        return self._run("to_have_type", type_name)

    def to_be_instance_of(self, cls):
        return self._run("to_be_instance_of", cls)

    # Numbers

    def to_be_greater_than(self, value):
        return self._run("to_be_greater_than", value)

    def to_be_greater_than_or_equal(self, value):
        return self._run("to_be_greater_than_or_equal", value)

    def to_be_lower_than(self, value):
        return self._run("to_be_lower_than", value)

    def to_be_lower_than_or_equal(self, value):
        return self._run("to_be_lower_than_or_equal", value)

    def to_be_between(self, low, high):
        return self._run("to_be_between", low, high)

    def to_be_infinity(self):
        return self._run("to_be_infinity")

    def to_be_nan(self):
        return self._run("to_be_nan")

    def to_be_close_to(self, value, digits=5):
        return self._run("to_be_close_to", value, digits)

    # Strings

    def to_have_substring(self, substring):
        return self._run("to_have_substring", substring)

    def to_start_with(self, prefix):
        return self._run("to_start_with", prefix)

    def to_end_with(self, suffix):
        return self._run("to_end_with", suffix)

    def to_match(self, pattern):
        return self._run("to_match", pattern)

    # Sequences

    def to_have_length(self, length):
        return self._run("to_have_length", length)

    def to_contain(self, value):
        return self._run("to_contain", value)

    def to_have_at_position(self, value, position):
        return self._run("to_have_at_position", value, position)

    def all_to_satisfy(self, criteria):
        return self._run("all_to_satisfy", criteria)

    def any_to_satisfy(self, criteria):
        return self._run("any_to_satisfy", criteria)

    def amount_to_satisfy(self, amount, criteria):
        return self._run("amount_to_satisfy", amount, criteria)

    # Mappings and objects

    def to_have_property_count(self, count):
        return self._run("to_have_property_count", count)

    def to_have_at_least(self, keys):
        return self._run("to_have_at_least", list(keys))

    def to_have_no_other_than(self, keys):
        return self._run("to_have_no_other_than", list(keys))

    def to_have_property(self, name):
        return self._run("to_have_property", name)

    def _run(self, matcher_name, *args):
        outcome = bool(getattr(matchers, matcher_name)(self.element, *args))
        result = not outcome if self.is_not else outcome
        self.states.append(MatcherCall(matcher_name, args, result))
        self._result = result if self._result is None else self._result and result
        return self
