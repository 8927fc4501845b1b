"""Fluent expectations used as guard clauses across the package.

    expect(amount).to_be_greater_than(0).or_throw(SomeError(...))
    expect_all(expect(x).to_be_between(0, 3), expect(y).to_be_between(0, 3)).or_throw(...)
"""

from .expectation import Expectation, FinishedExpectation, JoinedExpectation, MatcherCall


def expect(element=None):
    return Expectation(element)


def expect_all(*expectations):
    """Join finished expectations; the result holds when all of them hold."""
    return JoinedExpectation(expectations, all)


def expect_any(*expectations):
    """Join finished expectations; the result holds when at least one holds."""
    return JoinedExpectation(expectations, any)


__all__ = [
    "expect",
    "expect_all",
    "expect_any",
    "Expectation",
    "FinishedExpectation",
    "JoinedExpectation",
    "MatcherCall",
]
