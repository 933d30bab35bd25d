"""
tiny decorator-based test runner.

test modules register cases with @test and call main() under __main__.
the functions are plain test_* callables, so pytest collects them too.
"""
import sys
import time
import traceback
from contextlib import contextmanager
from functools import wraps
from typing import NamedTuple, List, Callable, Iterator, Optional, Type, Tuple, Union

ExpectedErrors = Union[Type[BaseException], Tuple[Type[BaseException], ...]]

_GREEN, _RED, _DIM, _RESET = '\033[92m', '\033[91m', '\033[90m', '\033[0m'


class _Case(NamedTuple):
    description: str
    func: Callable[[], None]


class _Outcome(NamedTuple):
    description: str
    error: Optional[str]

    @property
    def passed(self) -> bool:
        return self.error is None


_registered: List[_Case] = []


class TestAssertionError(AssertionError):
    """distinguishes assertion failures from unexpected exceptions."""
    __test__ = False


class _Raised:
    """holds the exception captured by assert_raises."""
    exception: Optional[BaseException] = None


# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _registered.append(_Case(description, func))

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: object, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


@contextmanager
def assert_raises(expected: ExpectedErrors, message: Optional[str] = None) -> Iterator[_Raised]:
    """fails unless the block raises `expected`. the caught exception is exposed on the yielded holder."""
    raised = _Raised()
    try:
        yield raised
    except expected as e:
        raised.exception = e
        return
    if isinstance(expected, tuple):
        names = " or ".join(e.__name__ for e in expected)
    else:
        names = expected.__name__
    raise TestAssertionError(message or f"expected {names} to be raised")


def run(title: str = "test run", verbose_errors: bool = False) -> int:
    """runs and clears the registered cases. returns the number of failures."""
    print(f"\n== {title} ==")
    started = time.perf_counter()
    outcomes = [_run_case(case, verbose_errors) for case in _registered]
    _registered.clear()

    failures = [o for o in outcomes if not o.passed]
    elapsed_ms = (time.perf_counter() - started) * 1000
    colour = _RED if failures else _GREEN
    print(f"\n{colour}{len(outcomes) - len(failures)}/{len(outcomes)} passed{_RESET} in {elapsed_ms:.1f}ms")
    for outcome in failures:
        print(f"  {_RED}{outcome.description}{_RESET}: {outcome.error}")
    return len(failures)


def main(title: str) -> None:
    """run the registered tests and exit non-zero on failure. pass -v for tracebacks."""
    sys.exit(1 if run(title, verbose_errors='-v' in sys.argv) else 0)


def _run_case(case: _Case, verbose_errors: bool) -> _Outcome:
    try:
        case.func()
        outcome = _Outcome(case.description, None)
    except TestAssertionError as e:
        outcome = _Outcome(case.description, f"assertion failed: {e}")
    except Exception as e:
        if verbose_errors:
            traceback.print_exc()
        outcome = _Outcome(case.description, f"{type(e).__name__}: {e}")

    mark = f"{_GREEN}ok  " if outcome.passed else f"{_RED}FAIL"
    print(f"  {mark}{_RESET} {case.description}")
    if not outcome.passed:
        print(f"       {_DIM}{outcome.error}{_RESET}")
    return outcome
