"""Tests for bulk operations: all, partition and values."""

import doctest
from collections.abc import Iterator

from hypothesis import given
from hypothesis import strategies as st

from or_error import Err, ErrorInfo, Ok, OrError, fail
from or_error import itertools as oit
from tests.strategies import or_errors

LARGE = 1_000_000


class TestAll:
    """Tests for all()."""

    def test_empty(self):
        """all([]) is Ok([])."""
        assert oit.all([]) == Ok([])

    def test_all_ok(self):
        """All successes collect in order."""
        assert oit.all([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_first_failure_wins(self):
        """The first failure in input order is returned."""
        a, b = fail('a'), fail('b')
        assert oit.all([Ok(1), a, b, Ok(3)]) == a

    def test_stops_consuming_at_first_failure(self):
        """Nothing after the first failure is pulled from the iterable."""
        pulled: list[int] = []

        def source() -> Iterator[OrError[int]]:
            for i, item in enumerate([Ok(1), fail('stop'), Ok(3), fail('later')]):
                pulled.append(i)
                yield item

        assert oit.all(source()) == fail('stop')
        assert pulled == [0, 1]

    def test_accepts_generators(self):
        """Any iterable works."""
        assert oit.all(Ok(i) for i in range(3)) == Ok([0, 1, 2])

    def test_large_success(self):
        """A million successes collect without recursion limits."""
        result = oit.all(Ok(i) for i in range(LARGE))
        assert isinstance(result, Ok)
        assert len(result.value) == LARGE
        assert result.value[-1] == LARGE - 1

    def test_large_failure(self):
        """A million failures return the first."""
        failure = fail('e')
        assert oit.all([failure] * LARGE) is failure

    @given(st.lists(or_errors, max_size=30))
    def test_matches_definition(self, xs: list[OrError[int]]):
        """Ok of all values, or the first Err."""
        errors = [x for x in xs if isinstance(x, Err)]
        expected = errors[0] if errors else Ok([x.value for x in xs])
        assert oit.all(xs) == expected


class TestPartition:
    """Tests for partition()."""

    def test_empty(self):
        """partition([]) == ([], [])."""
        assert oit.partition([]) == ([], [])

    def test_all_ok_is_reversed(self):
        """Success values come back reversed."""
        assert oit.partition([Ok(1), Ok(2), Ok(3)]) == ([3, 2, 1], [])

    def test_all_errors_reversed(self):
        """Failures come back reversed."""
        a, b = ErrorInfo.create('a'), ErrorInfo.create('b')
        assert oit.partition([Err(a), Err(b)]) == ([], [b, a])

    def test_mixed(self):
        """Each bucket is reversed independently."""
        a, b = ErrorInfo.create('a'), ErrorInfo.create('b', 'ctx')
        oks, errors = oit.partition([Ok(1), Err(a), Ok(2), Err(b), Ok(3)])
        assert oks == [3, 2, 1]
        assert errors == [b, a]

    def test_inspects_everything(self):
        """Every element is consumed."""
        pulled: list[int] = []

        def source() -> Iterator[OrError[int]]:
            for i, item in enumerate([fail('a'), Ok(1), fail('b')]):
                pulled.append(i)
                yield item

        oit.partition(source())
        assert pulled == [0, 1, 2]

    def test_large_success(self):
        """A million successes partition without recursion limits."""
        oks, errors = oit.partition(Ok(i) for i in range(LARGE))
        assert len(oks) == LARGE
        assert oks[0] == LARGE - 1
        assert errors == []

    def test_large_failure(self):
        """A million failures partition without recursion limits."""
        failure = fail('e')
        oks, errors = oit.partition([failure] * LARGE)
        assert oks == []
        assert len(errors) == LARGE

    @given(st.lists(or_errors, max_size=30))
    def test_matches_reversed_filters(self, xs: list[OrError[int]]):
        """Buckets equal the reversed filtered input."""
        oks, errors = oit.partition(xs)
        assert oks == [x.value for x in reversed(xs) if isinstance(x, Ok)]
        assert errors == [x.error for x in reversed(xs) if isinstance(x, Err)]


class TestValues:
    """Tests for values()."""

    def test_drops_failures_keeps_order(self):
        """values keeps successes in original order."""
        assert oit.values([Ok(1), fail('e'), Ok(3)]) == [1, 3]

    def test_empty(self):
        """values([]) == []."""
        assert oit.values([]) == []

    @given(st.lists(or_errors, max_size=30))
    def test_is_reverse_of_partition(self, xs: list[OrError[int]]):
        """values() is the first partition bucket in input order."""
        oks, _ = oit.partition(xs)
        assert oit.values(xs) == oks[::-1]


class TestModuleExamples:
    """The documented examples run as written."""

    def test_docstring_examples(self):
        """Every >>> example in or_error.itertools passes under doctest."""
        outcome = doctest.testmod(oit, verbose=False)
        assert outcome.attempted > 0
        assert outcome.failed == 0
