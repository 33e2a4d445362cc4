"""Option[T] monad – Some and Nothing variants."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar

from feature_maybe.kernel.errors import UnwrapError

T = TypeVar("T")
U = TypeVar("U")


class Some(Generic[T]):
    """Option with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or_else(self, func: Callable[[], T]) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Some[U]":
        return Some(func(self._value))

    def flat_map(self, func: "Callable[[T], Option[U]]") -> "Option[U]":
        return func(self._value)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self if predicate(self._value) else Nothing()

    def or_else(self, action: Callable[[], Any]) -> "Some[T]":  # noqa: ARG002
        return self

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Some):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Generic[T]):
    """Empty option."""

    __slots__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError("Called unwrap() on Nothing")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        return func()

    def map(self, func: Callable[[T], U]) -> "Nothing[U]":  # noqa: ARG002
        return self  # type: ignore[return-value]

    def flat_map(self, func: "Callable[[T], Option[U]]") -> "Nothing[U]":  # noqa: ARG002
        return self  # type: ignore[return-value]

    def filter(self, predicate: Callable[[T], bool]) -> "Nothing[T]":  # noqa: ARG002
        return self

    def or_else(self, action: Callable[[], Any]) -> "Option[T]":
        """Run *action* because the value is absent.

        When *action* returns an :class:`Option` it replaces this one, so a
        fallback can supply a value; any other return value is discarded.
        """
        replacement = action()
        if isinstance(replacement, (Some, Nothing)):
            return replacement
        return self

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nothing):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing[T]

__all__ = ["Nothing", "Option", "Some"]
