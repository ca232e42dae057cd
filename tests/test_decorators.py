"""Tests for the @safe and @result decorators."""

import inspect
import json

import pytest

from or_error import Err, ErrorInfo, Nothing, Ok, OrError, Some, fail, result, safe


class TestSafe:
    """Tests for @safe."""

    def test_bare_decorator_ok(self):
        """@safe wraps return values in Ok."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Ok(5.0)

    def test_bare_decorator_err(self):
        """@safe turns exceptions into failures without context."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(1, 0) == Err(ErrorInfo(error="ZeroDivisionError('division by zero')", context=Nothing))

    def test_with_context(self):
        """@safe(context=...) attaches the context."""

        @safe(context='parsing settings')
        def parse(text: str) -> dict:
            return json.loads(text)

        failure = parse('{')
        assert isinstance(failure, Err)
        assert failure.error.error.startswith('JSONDecodeError(')
        assert failure.error.context == Some('parsing settings')
        assert parse('{"a": 1}') == Ok({'a': 1})

    def test_specific_exceptions(self):
        """Only the listed exception types are captured."""

        @safe(exceptions=(KeyError,))
        def lookup(key: str) -> int:
            if key == 'boom':
                raise RuntimeError('not captured')
            return {'a': 1}[key]

        assert lookup('a') == Ok(1)
        assert lookup('b') == fail(KeyError('b'))
        with pytest.raises(RuntimeError, match='not captured'):
            lookup('boom')

    def test_base_exceptions_propagate_by_default(self):
        """KeyboardInterrupt is not an Exception and propagates."""

        @safe
        def interrupted() -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            interrupted()

    def test_preserves_metadata(self):
        """The wrapper keeps name, docstring and signature."""

        @safe
        def documented(x: int, *, scale: int = 2) -> int:
            """Scale x."""
            return x * scale

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Scale x.'
        assert list(inspect.signature(documented).parameters) == ['x', 'scale']

    def test_methods(self):
        """@safe works on methods."""

        class Reader:
            def __init__(self, data: dict[str, str]) -> None:
                self.data = data

            @safe(context='reading')
            def get(self, key: str) -> str:
                return self.data[key]

        reader = Reader({'a': 'x'})
        assert reader.get('a') == Ok('x')
        assert reader.get('b') == fail(KeyError('b'), 'reading')


class TestResult:
    """Tests for @result and bail()."""

    def test_returns_value_when_all_ok(self):
        """Straight-line code returns its Ok."""

        @result
        def add() -> OrError[int]:
            a = Ok(1).bail()
            b = Ok(2).bail()
            return Ok(a + b)

        assert add() == Ok(3)

    def test_returns_bailed_err(self):
        """The first bailed Err is returned."""
        first, second = fail('first'), fail('second')
        reached: list[str] = []

        @result
        def run() -> OrError[int]:
            first.bail()
            reached.append('after')
            second.bail()
            return Ok(0)

        assert run() is first
        assert reached == []

    def test_matches_bind_chain(self):
        """@result with bail() behaves like chained binds."""

        def halve(x: int) -> OrError[int]:
            return fail(x, 'odd') if x % 2 else Ok(x // 2)

        @result
        def quarter(x: int) -> OrError[int]:
            return Ok(halve(halve(x).bail()).bail())

        for n in (8, 6, 3):
            assert quarter(n) == Ok(n).bind(halve).bind(halve)

    def test_other_exceptions_propagate(self):
        """Non-Propagate exceptions are not caught."""

        @result
        def broken() -> OrError[int]:
            raise ValueError('bug')

        with pytest.raises(ValueError, match='bug'):
            broken()

    def test_combined_with_safe(self):
        """@safe steps can be bailed inside @result."""

        @safe(context='parsing')
        def parse(text: str) -> int:
            return int(text)

        @result
        def total(texts: list[str]) -> OrError[int]:
            return Ok(sum(parse(t).bail() for t in texts))

        assert total(['1', '2']) == Ok(3)
        assert total(['1', 'x']) == fail(ValueError("invalid literal for int() with base 10: 'x'"), 'parsing')
