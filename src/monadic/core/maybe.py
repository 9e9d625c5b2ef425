from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar, Union

from loguru import logger

from .abstract import Functor, Monad

T = TypeVar("T")
U = TypeVar("U")


class _MaybeBase(Monad[T]):
    """Operations shared by both variants of Maybe."""

    __slots__ = ()

    @classmethod
    def lift(cls, value: Any) -> Maybe[Any]:
        # Wraps regardless of the variant it is called through.
        # None cannot live inside Present, so it lifts to ABSENT.
        if value is None:
            return ABSENT
        return Present(value)

    @abstractmethod
    def describe(self) -> str:
        ...

    def is_present(self) -> bool:
        return isinstance(self, Present)

    def is_absent(self) -> bool:
        return self is ABSENT

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Present(_MaybeBase[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Present cannot wrap None, use ABSENT instead")

    def map(self, transform: Callable[[T], U]) -> Maybe[U]:
        # Any falsy payload counts as "no value", not only None.
        # A nested Maybe is a value in its own right, even ABSENT.
        if not self.value and not isinstance(self.value, _MaybeBase):
            logger.debug("map collapsed falsy payload {value!r}", value=self.value)
            return ABSENT
        result = transform(self.value)
        return ABSENT if result is None else Present(result)

    def bind(self, transform: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return transform(self.value)

    def apply(self, argument: Functor[U]) -> Functor[U]:
        if not callable(self.value):
            logger.error(
                "apply called on non-callable payload of type {kind}",
                kind=type(self.value).__name__,
            )
            raise TypeError(
                f"apply needs a callable payload, got {type(self.value).__name__}"
            )
        return argument.map(self.value)

    def value_or(self, default: Any) -> T:
        return self.value

    def describe(self) -> str:
        return f"Present({self.value!s})"


class Absent(_MaybeBase[Any]):
    """The shared "no value" sentinel. `Absent()` always returns `ABSENT`."""

    __slots__ = ()
    __match_args__ = ()
    _instance: Optional[Absent] = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (Absent, ())

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def map(self, transform: Callable[[Any], U]) -> Absent:
        return self

    def bind(self, transform: Callable[[Any], Maybe[U]]) -> Absent:
        return self

    def apply(self, argument: Functor[U]) -> Absent:
        return self

    def value_or(self, default: U) -> U:
        return default

    def describe(self) -> str:
        return "Absent()"


ABSENT = Absent()

Maybe = Union[Present[T], Absent]

lift = _MaybeBase.lift
