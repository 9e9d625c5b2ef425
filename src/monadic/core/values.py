from typing import Any

from .maybe import ABSENT, Maybe, Present


def maybe_of(val: Any) -> Maybe[Any]:
    return ABSENT if val is None else Present(val)

def is_absent(val: Any) -> bool:
    return val is ABSENT

def is_present(val: Any) -> bool:
    return isinstance(val, Present)
