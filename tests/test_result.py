"""Tests for Result type (Ok and Error)."""

import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from resultkit import Error, Nothing, Ok, Result, Some, collect, from_execution, from_option
from tests.strategies import integers, results, texts


class TestOkCreation:
    """Tests for Ok instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        ok = Ok(42)
        assert ok.value == 42

    def test_ok_with_none(self):
        """Ok can wrap None."""
        assert Ok(None).value is None

    def test_ok_wraps_value_verbatim(self):
        """Ok stores the very object passed in."""
        data = {'key': [1, 2, 3]}
        assert Ok(data).value is data

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]


class TestErrorCreation:
    """Tests for Error instantiation and basic properties."""

    def test_error_creation(self):
        """Error wraps an error value."""
        assert Error('error message').error == 'error message'

    def test_error_with_exception(self):
        """Error can wrap exception objects."""
        exc = ValueError('something went wrong')
        assert Error(exc).error is exc

    def test_error_is_frozen(self):
        """Error instances are immutable."""
        err = Error('error')
        with pytest.raises(AttributeError):
            err.error = 'new error'  # type: ignore[misc]


class TestResultEquality:
    """Tests for Result equality and hashing."""

    def test_ok_equality(self):
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(43)

    def test_error_equality(self):
        assert Error('error') == Error('error')
        assert Error('error1') != Error('error2')

    def test_ok_not_equal_to_error(self):
        """Ok is never equal to Error, even with the same payload."""
        assert Ok(42) != Error(42)

    def test_hashable(self):
        """Results with hashable payloads are hashable."""
        assert {Ok(42): 'value'}[Ok(42)] == 'value'
        assert hash(Error('error')) == hash(Error('error'))


class TestResultQuerying:
    """Tests for is_ok() and is_error()."""

    def test_ok_predicates(self):
        assert Ok(42).is_ok() is True
        assert Ok(42).is_error() is False

    def test_error_predicates(self):
        assert Error('error').is_ok() is False
        assert Error('error').is_error() is True

    @given(results)
    def test_predicates_are_exclusive(self, result: Result[int, str]):
        """Exactly one predicate holds for every Result."""
        assert result.is_ok() != result.is_error()


class TestResultMap:
    """Tests for map and map_error."""

    def test_ok_map(self):
        assert Ok(5).map(lambda x: x * 2) == Ok(10)

    def test_ok_map_chain(self):
        assert Ok(5).map(lambda x: x * 2).map(str) == Ok('10')

    def test_error_map_returns_self(self):
        """Error.map() returns the receiver without calling f."""
        calls = []
        err: Result[int, str] = Error('error')
        assert err.map(calls.append) is err
        assert calls == []

    def test_ok_map_error_returns_self(self):
        ok = Ok(42)
        assert ok.map_error(str.upper) is ok

    def test_error_map_error(self):
        assert Error('error').map_error(str.upper) == Error('ERROR')

    def test_map_does_not_catch_exceptions(self):
        """Exceptions raised by f propagate unchanged."""

        def boom(_: int) -> int:
            raise KeyError('boom')

        with pytest.raises(KeyError, match='boom'):
            Ok(1).map(boom)

    def test_map_calls_f_once(self):
        calls = []
        Ok(3).map(lambda x: calls.append(x) or x)
        assert calls == [3]


class TestResultFlatMap:
    """Tests for flat_map and flat_map_error."""

    def test_ok_flat_map_returns_ok(self):
        assert Ok(5).flat_map(lambda x: Ok(x * 2)) == Ok(10)

    def test_ok_flat_map_returns_error(self):
        assert Ok(5).flat_map(lambda x: Error(f'failed with {x}')) == Error('failed with 5')

    def test_ok_flat_map_is_not_rewrapped(self):
        """flat_map returns exactly what f returns."""
        inner = Ok(7)
        assert Ok(1).flat_map(lambda _: inner) is inner

    def test_ok_flat_map_branch(self):
        result = Ok(1).flat_map(lambda x: Error('e') if x > 1 else Ok(2))
        assert result == Ok(2)

    def test_error_flat_map_returns_self(self):
        """Error.flat_map() returns the receiver without calling f."""
        calls = []
        err: Result[int, str] = Error('error')
        assert err.flat_map(lambda x: calls.append(x) or Ok(x * 2)) is err
        assert calls == []

    def test_ok_flat_map_error_returns_self(self):
        """Ok.flat_map_error() returns the receiver without calling f."""
        calls = []
        ok = Ok(42)
        assert ok.flat_map_error(lambda e: calls.append(e) or Ok(0)) is ok
        assert calls == []

    def test_error_flat_map_error_recovers(self):
        assert Error('error').flat_map_error(lambda e: Ok(0)) == Ok(0)

    def test_error_flat_map_error_rewrites(self):
        result = Error('error').flat_map_error(lambda e: Error(f'wrapped: {e}'))
        assert result == Error('wrapped: error')


class TestResultExtraction:
    """Tests for get_with_default, to_option and match."""

    def test_ok_get_with_default(self):
        assert Ok(2).map(lambda x: x * 2).get_with_default(0) == 4

    def test_error_get_with_default(self):
        assert Error(2).map_error(lambda x: x * 2).get_with_default(0) == 0

    def test_ok_to_option(self):
        assert Ok(42).to_option() == Some(42)

    def test_error_to_option(self):
        assert Error('error').to_option() is Nothing

    def test_match_ok_calls_only_ok(self):
        calls = []
        result = Ok(3).match(
            ok=lambda v: calls.append(('ok', v)) or 'ok',
            error=lambda e: calls.append(('error', e)) or 'error',
        )
        assert result == 'ok'
        assert calls == [('ok', 3)]

    def test_match_error_calls_only_error(self):
        calls = []
        result = Error('bad').match(
            ok=lambda v: calls.append(('ok', v)) or 'ok',
            error=lambda e: calls.append(('error', e)) or 'error',
        )
        assert result == 'error'
        assert calls == [('error', 'bad')]

    def test_match_requires_both_handlers(self):
        with pytest.raises(TypeError):
            Ok(1).match(ok=lambda v: v)  # type: ignore[call-arg]


class TestResultTap:
    """Tests for tap, tap_ok and tap_error."""

    def test_tap_sees_whole_result(self):
        seen = []
        ok = Ok(1)
        err = Error('e')
        assert ok.tap(seen.append) is ok
        assert err.tap(seen.append) is err
        assert seen == [ok, err]

    def test_tap_ok(self):
        seen = []
        ok = Ok(1)
        err = Error('e')
        assert ok.tap_ok(seen.append) is ok
        assert err.tap_ok(seen.append) is err
        assert seen == [1]

    def test_tap_error(self):
        seen = []
        ok = Ok(1)
        err = Error('e')
        assert ok.tap_error(seen.append) is ok
        assert err.tap_error(seen.append) is err
        assert seen == ['e']

    @given(results)
    def test_tap_is_transparent(self, result: Result[int, str]):
        def ignore(_: object) -> None:
            return None

        assert result.tap(ignore) == result
        assert result.tap_ok(ignore) == result
        assert result.tap_error(ignore) == result


class TestResultCollect:
    """Tests for collect()."""

    def test_collect_all_ok(self):
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_collect_with_error(self):
        assert collect([Ok(1), Error('x'), Ok(2)]) == Error('x')

    def test_collect_empty(self):
        assert collect([]) == Ok([])

    def test_collect_first_error_wins(self):
        first = Error('first')
        assert collect([Ok(0), first, Error('second')]) is first

    def test_collect_stops_consuming(self):
        """Items after the first Error are never pulled from the iterable."""
        pulled = []

        def items():
            for item in (Ok(1), Error('stop'), Ok(3)):
                pulled.append(item)
                yield item

        assert collect(items()) == Error('stop')
        assert pulled == [Ok(1), Error('stop')]


class TestFromOption:
    """Tests for from_option() and the Option round trip."""

    @given(integers, texts)
    def test_some_round_trip(self, value: int, error: str):
        assert from_option(Some(value), error).to_option() == Some(value)

    @given(texts)
    def test_nothing(self, error: str):
        result = from_option(Nothing, error)
        assert result == Error(error)
        assert result.to_option() is Nothing


class TestFromExecution:
    """Tests for from_execution()."""

    def test_returns_ok(self):
        assert from_execution(lambda: 42) == Ok(42)

    def test_captures_exception_identity(self):
        exc = ValueError('boom')

        def fail() -> int:
            raise exc

        result = from_execution(fail)
        assert isinstance(result, Error)
        assert result.error is exc
        assert result.error.__traceback__ is not None

    def test_calls_once(self):
        calls = []
        from_execution(lambda: calls.append(1))
        assert calls == [1]

    def test_uncaptured_exceptions_propagate(self):
        def fail() -> int:
            raise KeyError('missing')

        with pytest.raises(KeyError):
            from_execution(fail, exceptions=(ValueError,))

    def test_base_exceptions_propagate(self):
        def interrupt() -> int:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            from_execution(interrupt)


class TestResultPatternMatching:
    """Tests for match statement support."""

    def test_match_ok(self):
        result: Result[int, str] = Ok(42)
        match result:
            case Ok(value):
                assert value == 42
            case Error(_):
                pytest.fail('Should not match Error')

    def test_match_error(self):
        result: Result[int, str] = Error('error')
        match result:
            case Ok(_):
                pytest.fail('Should not match Ok')
            case Error(error):
                assert error == 'error'


class TestResultRepr:
    """Tests for __repr__ (provided by msgspec.Struct)."""

    def test_ok_repr(self):
        assert repr(Ok(42)) == 'Ok(value=42)'

    def test_error_repr(self):
        assert repr(Error('error')) == "Error(error='error')"

    def test_copy(self):
        ok = Ok(42)
        copied = copy.copy(ok)
        assert copied == ok
        assert copied is not ok


class TestResultMonadLaws:
    """Property-based tests for monad laws."""

    @given(st.integers())
    def test_left_identity(self, value: int):
        """Ok(a).flat_map(f) == f(a)."""

        def f(x: int) -> Result[int, str]:
            return Ok(x * 2)

        assert Ok(value).flat_map(f) == f(value)

    @given(st.integers())
    def test_right_identity(self, value: int):
        """m.flat_map(Ok) == m."""
        m = Ok(value)
        assert m.flat_map(Ok) == m

    @given(st.integers())
    def test_associativity(self, value: int):
        def f(x: int) -> Result[int, str]:
            return Ok(x + 1)

        def g(x: int) -> Result[str, str]:
            return Ok(str(x))

        m = Ok(value)
        assert m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))

    @given(texts)
    def test_error_short_circuits(self, error: str):
        assert Error(error).flat_map(lambda x: Ok(x)) == Error(error)


class TestResultFunctorLaws:
    """Property-based tests for functor laws."""

    @given(results)
    def test_identity(self, result: Result[int, str]):
        assert result.map(lambda x: x) == result
        assert result.map_error(lambda e: e) == result

    @given(st.integers())
    def test_composition(self, value: int):
        def f(x: int) -> int:
            return x + 1

        def g(x: int) -> str:
            return str(x)

        m = Ok(value)
        assert m.map(f).map(g) == m.map(lambda x: g(f(x)))
