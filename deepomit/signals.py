"""
Keep-policy answers for omit_deep.
"""

from enum import Enum
from typing import Any, Hashable, Protocol, runtime_checkable

Path = tuple[Hashable, ...]


class KeepSignal(Enum):
    """
    Answer a keep policy gives for a single path.

    - REMOVE: Apply the default (drop the key if it is the target key)
    - KEEP_KEY: Keep this key even though its name is the target key
    - BREAK: Keep the whole value at this path as-is, without descending into it

    A policy may also answer None/False (same as REMOVE) or True (same as
    KEEP_KEY). BREAK is only ever produced on purpose, since it is compared
    by identity.

    Examples:
        def keep(path):
            if path == ("settings",):
                return BREAK              # send settings untouched
            if path == ("user", "__typename"):
                return True               # keep this one occurrence
    """

    REMOVE = 0
    KEEP_KEY = 1
    BREAK = 2


BREAK = KeepSignal.BREAK
KEEP_KEY = KeepSignal.KEEP_KEY


@runtime_checkable
class KeepPolicy(Protocol):
    """Object form of a keep policy."""

    def decide(self, path: Path, key: Hashable) -> Any: ...
