from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, List

from loguru import logger

from monadic.core.maybe import ABSENT, Maybe, Present
from monadic.demo.family import Child, Parent


@dataclass
class WalkthroughConfig:
    indent: str = "\t"
    show_laws: bool = True

    @classmethod
    def from_env(cls) -> WalkthroughConfig:
        return cls(show_laws=os.getenv("MONADIC_SHOW_LAWS", "1") != "0")


@dataclass
class WalkthroughStep:
    title: str
    results: List[Any] = field(default_factory=list)


def _twice(word: str) -> str:
    return word + word


def run_walkthrough() -> List[WalkthroughStep]:
    steps: List[WalkthroughStep] = []

    a: Maybe[int] = Present(1)
    b: Maybe[str] = a.map(lambda _: "hi")
    steps.append(WalkthroughStep("Simple monad container.", [a, b]))

    dad: Maybe[Parent] = Present(Parent())
    maybe_maybe_child = dad.map(Parent.get_child)
    steps.append(WalkthroughStep("Nested containers with just map", [maybe_maybe_child]))

    mom: Maybe[Parent] = ABSENT
    moms_stepson = mom.map(Parent.get_child)
    steps.append(
        WalkthroughStep("Nested container with head of sequence being absent.", [moms_stepson])
    )

    maybe_child = dad.bind(Parent.get_child)
    steps.append(WalkthroughStep("Un-nest with bind", [maybe_child]))

    maybe_granddaughter = dad.bind(Parent.get_child).bind(Child.get_daughter)
    maybe_grandson = dad.bind(Parent.get_child).bind(Child.get_son)
    steps.append(WalkthroughStep("Chained un-nesting", [maybe_granddaughter, maybe_grandson]))

    maybe_fn = Present(_twice)
    two_applications = maybe_fn.apply(maybe_fn.apply(Present("yoooo")))
    steps.append(WalkthroughStep("Applying a wrapped function twice", [two_applications]))

    logger.debug("Walkthrough produced {count} steps", count=len(steps))
    return steps


def render_walkthrough(steps: List[WalkthroughStep], config: WalkthroughConfig) -> str:
    blocks = []
    for step in steps:
        lines = [step.title]
        lines.extend(f"{config.indent}{result}" for result in step.results)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
