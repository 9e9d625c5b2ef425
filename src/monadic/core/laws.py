from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List

from loguru import logger

from .maybe import ABSENT, Maybe, Present, lift


class LawKind(Enum):
    FUNCTOR = "Functor"
    APPLICATIVE = "Applicative"
    MONAD = "Monad"


@dataclass
class LawCheck:
    law: str
    kind: LawKind
    holds: bool
    detail: str = ""


DEFAULT_SAMPLES = (1, 7, "hi", "yoooo")


def identity(x: Any) -> Any:
    return x


def _record(law: str, kind: LawKind, left: Any, right: Any) -> LawCheck:
    holds = left == right
    detail = f"{left} {'==' if holds else '!='} {right}"
    if not holds:
        logger.warning("{kind} law '{law}' does not hold: {detail}", kind=kind.value, law=law, detail=detail)
    return LawCheck(law, kind, holds, detail)


def check_functor_identity(m: Maybe[Any]) -> LawCheck:
    return _record("identity", LawKind.FUNCTOR, m.map(identity), m)


def check_functor_composition(m: Maybe[Any], f: Callable, g: Callable) -> LawCheck:
    return _record(
        "composition",
        LawKind.FUNCTOR,
        m.map(f).map(g),
        m.map(lambda x: g(f(x))),
    )


def check_applicative_identity(m: Maybe[Any]) -> LawCheck:
    return _record("identity", LawKind.APPLICATIVE, lift(identity).apply(m), m)


def check_applicative_homomorphism(f: Callable, x: Any) -> LawCheck:
    return _record("homomorphism", LawKind.APPLICATIVE, lift(f).apply(lift(x)), lift(f(x)))


def check_monad_left_identity(a: Any, f: Callable[[Any], Maybe[Any]]) -> LawCheck:
    return _record("left identity", LawKind.MONAD, lift(a).bind(f), f(a))


def check_monad_right_identity(m: Maybe[Any]) -> LawCheck:
    return _record("right identity", LawKind.MONAD, m.bind(lift), m)


def check_monad_associativity(
    m: Maybe[Any],
    f: Callable[[Any], Maybe[Any]],
    g: Callable[[Any], Maybe[Any]],
) -> LawCheck:
    return _record(
        "associativity",
        LawKind.MONAD,
        m.bind(f).bind(g),
        m.bind(lambda x: f(x).bind(g)),
    )


def _double(x: Any) -> Any:
    return x * 2


def _bracket(x: Any) -> str:
    return f"<{x}>"


def _lift_double(x: Any) -> Maybe[Any]:
    return lift(x * 2)


def _lift_bracket(x: Any) -> Maybe[Any]:
    return lift(f"<{x}>")


def _drop(x: Any) -> Maybe[Any]:
    return ABSENT


class LawReport:
    def __init__(self, checks: Iterable[LawCheck]):
        self.checks: List[LawCheck] = list(checks)

    @property
    def failures(self) -> List[LawCheck]:
        return [c for c in self.checks if not c.holds]

    @property
    def ok(self) -> bool:
        return not self.failures

    def __str__(self):
        lines = []
        lines.append("Maybe Law Report")
        lines.append("================")
        lines.append(f"Checks: {len(self.checks)}")
        for kind in LawKind:
            of_kind = [c for c in self.checks if c.kind == kind]
            held = sum(1 for c in of_kind if c.holds)
            lines.append(f"{kind.value}: {held}/{len(of_kind)}")

        if self.failures:
            lines.append("\nFailures:")
            for c in self.failures:
                lines.append(f"  [{c.kind.value}] {c.law}: {c.detail}")

        return "\n".join(lines)


def check_all(samples: Iterable[Any] = DEFAULT_SAMPLES) -> LawReport:
    """
    Run every law over each sample lifted into context, plus over ABSENT.

    Samples should be truthy and support `* 2`; falsy samples collapse
    under `map` and are expected to break the functor laws. None has no
    Present form and is skipped.
    """
    samples = tuple(s for s in samples if s is not None)
    checks: List[LawCheck] = []
    containers: List[Maybe[Any]] = [Present(s) for s in samples]

    for s in samples:
        checks.append(check_applicative_homomorphism(_double, s))
        checks.append(check_monad_left_identity(s, _lift_double))
        checks.append(check_monad_left_identity(s, _drop))

    for m in containers + [ABSENT]:
        checks.append(check_functor_identity(m))
        checks.append(check_functor_composition(m, _double, _bracket))
        checks.append(check_applicative_identity(m))
        checks.append(check_monad_right_identity(m))
        checks.append(check_monad_associativity(m, _lift_double, _lift_bracket))
        checks.append(check_monad_associativity(m, _drop, _lift_bracket))

    report = LawReport(checks)
    logger.debug("Law checks finished total={total} failed={failed}", total=len(checks), failed=len(report.failures))
    return report
