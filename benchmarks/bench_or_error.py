"""Benchmarks comparing or-error vs the returns library.

Run with: pytest benchmarks/ --benchmark-only -v
"""

# or-error imports
from or_error import Err, Ok, fail, partition, safe
from or_error import all as oe_all

# returns library imports
from returns.result import Failure, Success
from returns.result import safe as r_safe

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark success/failure creation."""

    def test_or_error_ok_creation(self, benchmark):
        """Benchmark Ok creation."""
        benchmark(Ok, 42)

    def test_returns_success_creation(self, benchmark):
        """Benchmark returns Success creation."""
        benchmark(Success, 42)

    def test_or_error_fail(self, benchmark):
        """Benchmark fail(), which renders the error value."""
        benchmark(fail, ValueError('bad port'), 'parsing settings')

    def test_returns_failure_creation(self, benchmark):
        """Benchmark returns Failure creation."""
        benchmark(Failure, ValueError('bad port'))


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestMethodCalls:
    """Benchmark common method calls."""

    def test_or_error_map(self, benchmark):
        """Benchmark map."""
        ok = Ok(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_returns_map(self, benchmark):
        """Benchmark returns map."""
        ok = Success(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_or_error_bind(self, benchmark):
        """Benchmark bind."""
        ok = Ok(5)
        benchmark(ok.bind, lambda x: Ok(x * 2))

    def test_returns_bind(self, benchmark):
        """Benchmark returns bind."""
        ok = Success(5)
        benchmark(ok.bind, lambda x: Success(x * 2))

    def test_or_error_unwrap(self, benchmark):
        """Benchmark unwrap with default."""
        ok = Ok(5)
        benchmark(ok.unwrap, 0)

    def test_returns_value_or(self, benchmark):
        """Benchmark returns value_or."""
        ok = Success(5)
        benchmark(ok.value_or, 0)

    def test_or_error_pretty_print(self, benchmark):
        """Benchmark pretty_print on a failure with context."""
        failure = fail('boom', 'parsing header')
        benchmark(failure.pretty_print)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestChaining:
    """Benchmark chained operations."""

    def test_or_error_chain_3(self, benchmark):
        """Benchmark 3-step chain."""

        def chain():
            return Ok(5).map(lambda x: x + 1).map(lambda x: x * 2).bind(lambda x: Ok(x - 1))

        benchmark(chain)

    def test_returns_chain_3(self, benchmark):
        """Benchmark returns 3-step chain."""

        def chain():
            return Success(5).map(lambda x: x + 1).map(lambda x: x * 2).bind(lambda x: Success(x - 1))

        benchmark(chain)

    def test_or_error_pipe_operator_3(self, benchmark):
        """Benchmark 3-step chain through the | operator."""

        def chain():
            return Ok(5) | (lambda x: x + 1) | (lambda x: x * 2) | (lambda x: Ok(x - 1))

        benchmark(chain)


# =============================================================================
# Safe decorator benchmarks
# =============================================================================


class TestSafeDecorator:
    """Benchmark @safe decorator."""

    def test_or_error_safe_success(self, benchmark):
        """Benchmark @safe on success path."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 2)

    def test_returns_safe_success(self, benchmark):
        """Benchmark returns @safe on success path."""

        @r_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 2)

    def test_or_error_safe_failure(self, benchmark):
        """Benchmark @safe on failure path."""

        @safe(context='dividing')
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 0)

    def test_returns_safe_failure(self, benchmark):
        """Benchmark returns @safe on failure path."""

        @r_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 0)


# =============================================================================
# Bulk operation benchmarks
# =============================================================================


class TestBulk:
    """Benchmark all() and partition()."""

    def test_all_100(self, benchmark):
        """Benchmark all() with 100 successes."""
        items = [Ok(i) for i in range(100)]
        benchmark(oe_all, items)

    def test_all_with_early_failure(self, benchmark):
        """Benchmark all() with a failure at position 5."""
        failure = fail('fail')
        items = [Ok(i) if i != 5 else failure for i in range(100)]
        benchmark(oe_all, items)

    def test_partition_mixed_10000(self, benchmark):
        """Benchmark partition() over 10k mixed items."""
        failure = fail('fail')
        items = [Ok(i) if i % 3 else failure for i in range(10_000)]
        benchmark(partition, items)


# =============================================================================
# Pattern matching benchmarks
# =============================================================================


class TestPatternMatching:
    """Benchmark pattern matching."""

    def test_or_error_match_ok(self, benchmark):
        """Benchmark pattern matching on Ok."""
        ok = Ok(42)

        def match_it():
            match ok:
                case Ok(v):
                    return v
                case Err(e):
                    return e

        benchmark(match_it)

    def test_returns_match_success(self, benchmark):
        """Benchmark returns pattern matching on Success."""
        ok = Success(42)

        def match_it():
            match ok:
                case Success(v):
                    return v
                case Failure(e):
                    return e

        benchmark(match_it)
