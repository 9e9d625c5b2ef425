from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Functor(ABC, Generic[T]):
    """A context which can be mapped over."""

    @abstractmethod
    def map(self, transform: Callable[[T], U]) -> Functor[U]:
        """Transform the wrapped value while keeping the container shape."""
        ...


class Applicative(Functor[T]):
    """
    A Functor which further defines how to wrap values into context and
    how to apply a wrapped function to a wrapped argument.
    """

    @classmethod
    @abstractmethod
    def lift(cls, value: Any) -> Applicative[Any]:
        """Introduce a value into context ("pure")."""
        ...

    @abstractmethod
    def apply(self, argument: Functor[U]) -> Functor[U]:
        """
        Haskell's `<*>`. The wrapped value must be a one-argument callable
        accepting the payload of `argument`.
        """
        ...


class Monad(Applicative[T]):
    """An Applicative whose container-producing steps can be chained flat."""

    @abstractmethod
    def bind(self, transform: Callable[[T], Monad[U]]) -> Monad[U]:
        ...

    @classmethod
    def unit(cls, value: Any) -> Monad[Any]:
        # "return" in Haskell, a reserved word here
        return cls.lift(value)
