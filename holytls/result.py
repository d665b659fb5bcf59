"""Result values for fallible operations and a manually driven coroutine task."""

from __future__ import annotations

from typing import Any, Callable, Coroutine, Generic, Optional, TypeVar, Union

from holytls.errors import Error

T = TypeVar("T")
U = TypeVar("U")


class UnwrapError(RuntimeError):
    """Raised when the value of a failed result is requested."""


class Result(Generic[T]):
    """Outcome of a synchronous operation: a value or an error message."""

    __slots__ = ("value", "ok", "error")

    def __init__(self, value: Optional[T], ok: bool, error: str = "") -> None:
        self.value = value
        self.ok = ok
        self.error = error

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value, True, "")

    @classmethod
    def failure(cls, message: str) -> "Result[T]":
        return cls(None, False, message)

    def __bool__(self) -> bool:
        return self.ok

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (self.value, self.ok, self.error) == (other.value, other.ok, other.error)

    def __repr__(self) -> str:
        if self.ok:
            return f"Result.success({self.value!r})"
        return f"Result.failure({self.error!r})"


class AsyncResult(Generic[T]):
    """Outcome of an asynchronous operation: a value or an ``Error``."""

    __slots__ = ("_value", "_error")

    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None) -> None:
        self._value = value
        self._error = error

    @classmethod
    def success(cls, value: Optional[T] = None) -> "AsyncResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Error) -> "AsyncResult[T]":
        if not isinstance(error, Error):
            raise TypeError("failure() requires an Error")
        return cls(error=error)

    def ok(self) -> bool:
        return self._error is None

    def has_error(self) -> bool:
        return self._error is not None

    def value(self) -> T:
        """The held value; raises ``UnwrapError`` if this is an error."""
        if self._error is not None:
            raise UnwrapError("result holds an error, not a value")
        return self._value  # type: ignore[return-value]

    def error(self) -> Error:
        """The held error; raises ``UnwrapError`` if this is a value."""
        if self._error is None:
            raise UnwrapError("result holds a value, not an error")
        return self._error

    def unwrap(self) -> T:
        """The value, or ``UnwrapError`` carrying the error message."""
        if self._error is not None:
            raise UnwrapError(self._error.message)
        return self._value  # type: ignore[return-value]

    def map(self, func: Callable[[T], U]) -> "AsyncResult[U]":
        """Apply ``func`` to the value; errors pass through unchanged."""
        if self._error is None:
            return AsyncResult(value=func(self._value))  # type: ignore[arg-type]
        return AsyncResult(error=self._error)

    def __bool__(self) -> bool:
        return self.ok()

    def __repr__(self) -> str:
        if self._error is None:
            return f"AsyncResult.success({self._value!r})"
        return f"AsyncResult.failure({self._error!r})"


_NOT_STARTED = object()


class Task(Generic[T]):
    """A coroutine that starts suspended and is advanced by hand.

    The coroutine suspends whenever it awaits something that yields; the
    driver resumes it with ``resume()`` or hands it a value with ``send()``.
    """

    def __init__(self, coroutine: Union[Coroutine[Any, Any, T], Any]) -> None:
        self._coroutine = coroutine
        self._started = False
        self._done = False
        self._value: Optional[T] = None
        self._exception: Optional[BaseException] = None

    def _step(self, value: Any) -> None:
        try:
            self._coroutine.send(value)
        except StopIteration as stop:
            self._done = True
            self._value = stop.value
        except Exception as exc:  # stored and re-raised by result()
            self._done = True
            self._exception = exc
        finally:
            self._started = True

    def resume(self) -> None:
        """Start or continue the coroutine; does nothing once it is done."""
        if not self._done:
            self._step(None)

    def send(self, value: Any) -> None:
        """Continue the coroutine, making ``value`` the result of its await."""
        if self._done:
            raise RuntimeError("task has already finished")
        if not self._started:
            self._step(None)
            if self._done:
                return
        self._step(value)

    def done(self) -> bool:
        return self._done

    def result(self) -> T:
        """The returned value, or the exception the coroutine raised."""
        if not self._done:
            raise RuntimeError("task has not finished")
        if self._exception is not None:
            raise self._exception
        return self._value  # type: ignore[return-value]

    def __del__(self) -> None:
        close = getattr(self._coroutine, "close", None)
        if close is not None and not self._done:
            try:
                close()
            except Exception:
                pass