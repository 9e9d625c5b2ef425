from monadic.core.maybe import ABSENT, Absent, Maybe, Present, lift
from monadic.core.values import is_absent, is_present, maybe_of

__all__ = [
    "ABSENT",
    "Absent",
    "Maybe",
    "Present",
    "lift",
    "is_absent",
    "is_present",
    "maybe_of",
]
