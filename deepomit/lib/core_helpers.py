"""
Helper functions for core omit operations.
"""

from typing import Any, Callable, Hashable

from ..context import is_strict
from ..signals import KeepPolicy, KeepSignal, Path


def is_plain_mapping(value: Any) -> bool:
    """Only exact dicts are opened; subclasses and other mappings are opaque."""
    return type(value) is dict


def is_sequence(value: Any) -> bool:
    """Only exact lists and tuples are walked element-wise."""
    return type(value) is list or type(value) is tuple


def to_decider(keep: Any) -> Callable[[Path], KeepSignal] | None:
    """
    Normalize a keep policy into a function of path returning a KeepSignal.

    Accepts either a callable taking the path, or a KeepPolicy exposing
    decide(path, key).
    """
    if keep is None:
        return None

    if isinstance(keep, KeepPolicy):
        decide = keep.decide

        def ask(path: Path) -> Any:
            return decide(path, path[-1])

    elif callable(keep):
        ask = keep
    else:
        raise TypeError(
            f"keep must be callable or define decide(path, key), got {type(keep).__name__}"
        )

    strict = is_strict()

    def decider(path: Path) -> KeepSignal:
        return resolve_answer(ask(path), strict)

    return decider


def resolve_answer(answer: Any, strict: bool = False) -> KeepSignal:
    """Map a raw keep-policy answer onto a KeepSignal."""
    if isinstance(answer, KeepSignal):
        return answer
    if answer is True:
        return KeepSignal.KEEP_KEY
    if answer is None or answer is False:
        return KeepSignal.REMOVE
    if strict:
        raise TypeError(
            f"Keep policy must return None, a bool or a KeepSignal, got {answer!r}"
        )
    return KeepSignal.REMOVE


def extend(path: Path, key: Hashable) -> Path:
    """Return a new path with key appended."""
    return path + (key,)
